"""Logging setup for applications embedding mdvis."""

from __future__ import annotations

import logging
import sys
from typing import Optional

PACKAGE_LOGGER_NAME = "mdvis"

_PLAIN_FORMAT = "%(levelname)s: %(message)s"
_TRACE_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s"


def configure_logging(
    log_level: int | str,
    log_file: Optional[str] = None,
    trace_mode: bool = False,
) -> logging.Logger:
    """Attach fresh handlers to the ``mdvis`` logger and return it.

    Skipped chart blocks are reported as warnings on this logger. Calling
    the function again replaces the handlers instead of adding more.

    Parameters
    ----------
    log_level : int | str
        Level number or name such as ``"INFO"``; unknown names mean INFO.
    log_file : str, optional
        Also append records to this file. If it cannot be opened a warning
        is logged and only the console handler is kept.
    trace_mode : bool, default False
        Include timestamps and logger names.

    """
    level = log_level if isinstance(log_level, int) else getattr(logging, str(log_level).upper(), logging.INFO)
    if not isinstance(level, int):
        level = logging.INFO

    if trace_mode:
        formatter = logging.Formatter(_TRACE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
    else:
        formatter = logging.Formatter(_PLAIN_FORMAT)

    package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    package_logger.setLevel(level)
    for old_handler in list(package_logger.handlers):
        package_logger.removeHandler(old_handler)
        old_handler.close()

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file:
        try:
            handlers.append(logging.FileHandler(log_file, mode="a", encoding="utf-8"))
        except OSError as exc:
            package_logger.warning("Could not create log file %s: %s", log_file, exc)

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        package_logger.addHandler(handler)

    if log_file and len(handlers) > 1:
        package_logger.info("Logging to file: %s", log_file)
    return package_logger
