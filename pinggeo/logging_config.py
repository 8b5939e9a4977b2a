"""Logging setup for the pinggeo command-line tool.

Diagnostics go to stderr so the report on stdout stays clean for redirection.
The level comes from ``--log-level``, else PINGGEO_LOG_LEVEL, else INFO:

    $ PINGGEO_LOG_LEVEL=DEBUG pinggeo example.com 2> probes.log
"""

import logging
import os
import sys

DEFAULT_LEVEL = "INFO"
LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"
LEVEL_NAMES = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def resolve_level(name: str | None) -> int | None:
    """Numeric logging level for a case-insensitive name, or None if unknown."""
    if not name:
        return None
    name = name.strip().upper()
    if name not in LEVEL_NAMES:
        return None
    return getattr(logging, name)


def configure_logging(level: str | None = None) -> None:
    """Configure root logging for a pinggeo run.

    An explicit ``level`` wins over PINGGEO_LOG_LEVEL. An unrecognised name
    falls back to INFO and is reported once the handler is in place.
    """
    requested = level if level is not None else os.environ.get("PINGGEO_LOG_LEVEL", DEFAULT_LEVEL)
    resolved = resolve_level(requested)

    logging.basicConfig(
        level=resolved if resolved is not None else logging.INFO,
        format=LOG_FORMAT,
        datefmt="%H:%M:%S",
        stream=sys.stderr,
        force=True,
    )

    if resolved is None:
        logging.getLogger(__name__).warning(
            "Unknown log level %r, using %s", requested, DEFAULT_LEVEL
        )
