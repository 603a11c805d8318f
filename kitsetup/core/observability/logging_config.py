"""
Logging configuration — set up once by the CLI entrypoint.

Every module does ``logger = logging.getLogger(__name__)`` and inherits
what is configured here. Operator-facing notes go through click, so the
console handler stays quiet (WARNING) unless asked otherwise.

Level precedence:
    --debug / --verbose / --quiet  >  KITSETUP_LOG_LEVEL  >  WARNING

A log file can be added with KITSETUP_LOG_FILE (and its own level with
KITSETUP_LOG_FILE_LEVEL); it always uses the detailed format.
"""

from __future__ import annotations

import logging
import os
import sys

ENV_LEVEL = "KITSETUP_LOG_LEVEL"
ENV_FILE = "KITSETUP_LOG_FILE"
ENV_FILE_LEVEL = "KITSETUP_LOG_FILE_LEVEL"

# level threshold → (format, datefmt); first match wins
_CONSOLE_FORMATS: tuple[tuple[int, str, str | None], ...] = (
    (logging.DEBUG, "%(asctime)s %(levelname)-5s %(name)s:%(lineno)d — %(message)s", "%H:%M:%S"),
    (logging.INFO, "%(asctime)s [%(name)s] %(message)s", "%H:%M:%S"),
    (logging.CRITICAL, "%(message)s", None),
)

_FILE_FORMAT = "%(asctime)s %(levelname)-5s %(name)s:%(lineno)d — %(message)s"
_FILE_DATEFMT = "%Y-%m-%d %H:%M:%S"


def resolve_level(*, debug: bool = False, verbose: bool = False, quiet: bool = False) -> str:
    """Pick the console level from CLI flags, falling back to the environment."""
    if debug:
        return "DEBUG"
    if verbose:
        return "INFO"
    if quiet:
        return "ERROR"
    return os.environ.get(ENV_LEVEL, "WARNING")


def setup_logging(
    level: str = "WARNING",
    log_file: str | None = None,
    log_file_level: str | None = None,
) -> None:
    """Configure the root logger for the whole process.

    Args:
        level: Console level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_file: Optional path to a log file. Defaults to KITSETUP_LOG_FILE.
        log_file_level: Level for the file handler. Defaults to
            KITSETUP_LOG_FILE_LEVEL, then to ``level``.
    """
    console_level = _parse_level(level)
    fmt, datefmt = next(
        (f, d) for threshold, f, d in _CONSOLE_FORMATS if console_level <= threshold
    )

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(console_level)
    console.setFormatter(logging.Formatter(fmt, datefmt=datefmt))

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(console)
    root_level = console_level

    log_file = log_file or os.environ.get(ENV_FILE)
    if log_file:
        file_level = _parse_level(log_file_level or os.environ.get(ENV_FILE_LEVEL) or level)
        root_level = min(root_level, file_level)

        fh = logging.FileHandler(log_file, encoding="utf-8")
        fh.setLevel(file_level)
        fh.setFormatter(logging.Formatter(_FILE_FORMAT, datefmt=_FILE_DATEFMT))
        root.addHandler(fh)

    root.setLevel(root_level)

    logging.raiseExceptions = False


def _parse_level(level: str | None) -> int:
    """Convert a level name string to its numeric constant."""
    if not level:
        return logging.WARNING
    numeric = getattr(logging, level.upper(), None)
    if not isinstance(numeric, int):
        return logging.WARNING
    return numeric
