"""Logging setup for Spendlog.

Everything goes to a dated file under the configured log directory and,
unless disabled, to stderr.
"""

import logging
import sys
from datetime import date
from config import Config

LOGGER_NAME = "spendlog"


def setup_logging(config: Config, console: bool = True) -> logging.Logger:
    """Configure the spendlog logger.

    Args:
        config: Application configuration containing log settings.
        console: Also log to stderr when True.

    Returns:
        Configured logger instance.
    """
    config.log_dir.mkdir(parents=True, exist_ok=True)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(config.log_level)

    # Calling twice (tests, reset script) must not duplicate handlers
    logger.handlers.clear()

    file_handler = logging.FileHandler(
        config.log_dir / f"spendlog-{date.today().isoformat()}.log"
    )
    file_handler.setLevel(config.log_level)
    file_handler.setFormatter(
        logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    logger.addHandler(file_handler)

    if console:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(config.log_level)
        console_handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(console_handler)

    return logger


def get_logger() -> logging.Logger:
    """Get the application logger."""
    return logging.getLogger(LOGGER_NAME)
