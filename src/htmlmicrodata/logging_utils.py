"""Logging helpers for applications embedding htmlmicrodata.

The library itself only creates module loggers under the ``htmlmicrodata``
namespace and never installs handlers; host applications call
:func:`configure_logging` (or configure logging themselves) to see them.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

LIBRARY_LOGGER = "htmlmicrodata"


def configure_logging(
    log_level: int | str,
    log_file: Optional[str] = None,
    trace_mode: bool = False,
) -> logging.Logger:
    """Attach console (and optionally file) handlers to the library logger.

    Parameters
    ----------
    log_level : int | str
        Numeric logging level or string name (e.g., "DEBUG").
    log_file : str, optional
        Path of a file that receives a copy of the log output.
    trace_mode : bool, default False
        When true, emit timestamps and logger names, useful when following
        a render through the registry and renderers.

    Returns
    -------
    logging.Logger
        The configured ``htmlmicrodata`` logger.

    """
    resolved_level = log_level if isinstance(log_level, int) else getattr(logging, str(log_level).upper(), logging.INFO)

    library_logger = logging.getLogger(LIBRARY_LOGGER)
    library_logger.setLevel(resolved_level)
    for handler in list(library_logger.handlers):
        library_logger.removeHandler(handler)
        handler.close()

    format_str = "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s" if trace_mode else "%(levelname)s: %(message)s"
    date_format = "%Y-%m-%d %H:%M:%S" if trace_mode else None
    formatter = logging.Formatter(format_str, datefmt=date_format)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(resolved_level)
    console_handler.setFormatter(formatter)
    library_logger.addHandler(console_handler)

    if log_file:
        try:
            file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        except OSError as exc:
            library_logger.warning("Could not create log file %s: %s", log_file, exc)
        else:
            file_handler.setLevel(resolved_level)
            file_handler.setFormatter(formatter)
            library_logger.addHandler(file_handler)
            library_logger.info("Logging to file: %s", log_file)

    return library_logger
