"""
Logging setup for competition_field.

Logs to stdout and, optionally, a log file.
"""

import logging
import sys
from pathlib import Path
from typing import Optional

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(verbose: bool = False,
                  log_file: Optional[str] = None,
                  log_format: Optional[str] = None) -> logging.Logger:
    """
    Setup console (and optional file) logging.

    Args:
        verbose: If True, set log level to DEBUG. Otherwise INFO.
        log_file: Also append to this file when given.
        log_format: Override log format string.

    Returns:
        The competition_field package logger
    """
    level = logging.DEBUG if verbose else logging.INFO
    log_format = log_format or DEFAULT_FORMAT

    handlers = []

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter(log_format))
    handlers.append(console_handler)

    if log_file:
        try:
            Path(log_file).parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(log_file, mode='a')
            file_handler.setLevel(level)
            file_handler.setFormatter(logging.Formatter(log_format))
            handlers.append(file_handler)
        except OSError as e:
            print(f"Warning: Could not setup file logging at {log_file}: {e}",
                  file=sys.stderr)

    logging.basicConfig(level=level, format=log_format, handlers=handlers, force=True)

    logger = logging.getLogger("competition_field")
    logger.setLevel(level)
    return logger
