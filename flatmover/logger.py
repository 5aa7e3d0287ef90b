import logging
import os
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "flatmover"
LEVEL_ENV_VAR = "FLATMOVER_LOG_LEVEL"


def get_logging_level(level_name):
    return {
        "CRITICAL": logging.CRITICAL,
        "ERROR": logging.ERROR,
        "WARNING": logging.WARNING,
        "INFO": logging.INFO,
        "DEBUG": logging.DEBUG
    }.get(level_name.upper(), logging.INFO)


def setup_logger(verbose: bool = False, console: Optional[Console] = None):
    if verbose:
        log_level = logging.DEBUG
    else:
        log_level = get_logging_level(os.environ.get(LEVEL_ENV_VAR, "INFO"))

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(log_level)

    if not logger.handlers:
        # share the console with the progress bar so log lines print above it
        handler = RichHandler(console=console, show_path=False, markup=False)
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)

    return logger
