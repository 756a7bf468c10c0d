"""Logging configuration and setup utilities.

Library modules only create module level loggers; handlers are attached
here, by the command line entry point or by applications embedding the
analyzer.
"""
import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

PACKAGE_LOGGER = "mapreduce_memory_analyzer"
FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(
    level: int = logging.INFO,
    log_file: Optional[str] = None,
    console: Optional[Console] = None,
) -> logging.Logger:
    """Setup package logging with rich formatting"""
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)
    logger.handlers.clear()

    rich_handler = RichHandler(
        console=console or Console(stderr=True), show_time=True, show_path=False
    )
    rich_handler.setFormatter(
        logging.Formatter(fmt="%(message)s", datefmt="[%Y-%m-%d %H:%M:%S]")
    )
    logger.addHandler(rich_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(logging.Formatter(fmt=FILE_FORMAT))
        logger.addHandler(file_handler)

    return logger
