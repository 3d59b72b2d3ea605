"""Logging setup for the command line."""

import logging


def configure_logging(*, verbose: bool = False, force: bool = False) -> None:
    """
    Initialise the root logger: INFO by default, DEBUG with verbose.
    Log lines go to stderr so JSON on stdout stays clean.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        datefmt="%H:%M:%S",
        force=force,
    )
    # httpx logs every request at INFO
    logging.getLogger("httpx").setLevel(logging.DEBUG if verbose else logging.WARNING)
