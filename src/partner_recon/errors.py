"""Exception types raised by partner-recon."""


class ReconError(Exception):
    """Base class for partner-recon errors."""


class MalformedResponseError(ReconError, ValueError):
    """A listing page parsed but did not have the expected shape."""

    def __init__(self, message: str, *, offset: int | None = None):
        super().__init__(message)
        self.offset = offset


class ConfigError(ReconError, ValueError):
    """Run configuration is missing or invalid."""
