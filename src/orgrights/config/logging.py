"""Logging setup for the rights CLI."""

from __future__ import annotations

import logging

# Emit one INFO record per request; only useful when debugging.
CHATTY_LOGGERS = ("httpx", "httpcore")


def configure_logging(*, verbose: bool = False, force: bool = False) -> None:
    """Configure the root logger for CLI output.

    At the default INFO level the HTTP client libraries are limited to warnings so
    that only rights changes are reported. ``verbose`` switches everything,
    request tracing included, to DEBUG.
    """

    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        datefmt="%H:%M:%S",
        force=force,
    )
    for name in CHATTY_LOGGERS:
        logging.getLogger(name).setLevel(logging.DEBUG if verbose else logging.WARNING)
