"""
Logging setup for the sequenceFlow fixer.

Library modules log through children of the "seqflow_fix" logger
(logging.getLogger(__name__)) and never add handlers themselves. The command
line entry point configures that package logger once per run.
"""

import logging
import sys
from pathlib import Path
from typing import Optional

PACKAGE_LOGGER = "seqflow_fix"

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def reset_logger(name: str = PACKAGE_LOGGER) -> logging.Logger:
    """
    Close and detach every handler of a logger and let it propagate again.

    Args:
        name: Logger name (default: the package logger)

    Returns:
        The reset logger
    """
    logger = logging.getLogger(name)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
    return logger


def setup_logger(
    name: str = PACKAGE_LOGGER,
    log_file: Optional[Path] = None,
    level: int = logging.INFO,
    console: bool = True
) -> logging.Logger:
    """
    Configure a logger with stdout and optional file output.

    Handlers from an earlier call are closed first, so calling this again
    (e.g. repeated main() runs) does not leave log files open.

    Args:
        name: Logger name (default: the package logger)
        log_file: Optional path to log file, parent folders are created
        level: Logging level (default: INFO)
        console: Whether to log to stdout (default: True)

    Returns:
        Configured logger instance
    """
    logger = reset_logger(name)
    logger.setLevel(level)
    logger.propagate = False

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    handlers = []
    if console:
        handlers.append(logging.StreamHandler(sys.stdout))
    if log_file:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, encoding='utf-8'))

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger
