#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Logging setup for the cli2md command.

The rendered document goes to stdout, so every log record is sent to stderr
(and optionally to a log file). Library modules only create module-level
loggers; nothing here runs on import.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

PLAIN_FORMAT = "%(levelname)s: %(message)s"
TRACE_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s"
TRACE_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Third-party loggers that flood the output at DEBUG (rich's Markdown parser)
QUIET_LOGGERS = ("markdown_it",)


def resolve_log_level(log_level: str = "WARNING", verbose: bool = False, trace: bool = False) -> int:
    """Turn the CLI logging flags into a numeric level.

    ``--trace`` wins, then ``--verbose`` (only while ``--log-level`` is left
    at its ``WARNING`` default), then ``--log-level``.

    Examples
    --------
        >>> resolve_log_level("ERROR", verbose=True)
        40
        >>> resolve_log_level(verbose=True)
        10

    """
    if trace or (verbose and log_level.upper() == "WARNING"):
        return logging.DEBUG
    level = logging.getLevelName(log_level.upper())
    return level if isinstance(level, int) else logging.INFO


def _make_handler(handler: logging.Handler, level: int, formatter: logging.Formatter) -> logging.Handler:
    handler.setLevel(level)
    handler.setFormatter(formatter)
    return handler


def configure_logging(
    log_level: int | str,
    log_file: Optional[str] = None,
    trace_mode: bool = False,
) -> logging.Logger:
    """Replace the root logger's handlers with the cli2md ones.

    Parameters
    ----------
    log_level : int | str
        Numeric level or level name (e.g. ``"INFO"``)
    log_file : str, optional
        File that receives a copy of every record. A file that cannot be
        opened is reported as a warning and otherwise ignored.
    trace_mode : bool, default False
        Include timestamps and logger names

    Returns
    -------
    logging.Logger
        The root logger

    """
    level = log_level if isinstance(log_level, int) else resolve_log_level(str(log_level))
    formatter = (
        logging.Formatter(TRACE_FORMAT, datefmt=TRACE_DATE_FORMAT) if trace_mode else logging.Formatter(PLAIN_FORMAT)
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()
    root_logger.addHandler(_make_handler(logging.StreamHandler(sys.stderr), level, formatter))

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))

    if not log_file:
        return root_logger

    try:
        file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
    except OSError as exc:
        root_logger.warning("Could not create log file %s: %s", log_file, exc)
        return root_logger

    root_logger.addHandler(_make_handler(file_handler, level, formatter))
    root_logger.debug("Copying log records to %s", log_file)
    return root_logger
