"""Partner directory / solution catalog reconciliation."""

__version__ = "0.1.0"
