import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from .config import LoggingConfig

ROOT_LOGGER = "stringext"


def _file_handler(log_config: LoggingConfig) -> RotatingFileHandler:
    log_path = Path(log_config.file_path)
    log_path.parent.mkdir(parents=True, exist_ok=True)
    return RotatingFileHandler(
        log_path,
        maxBytes=log_config.max_bytes,
        backupCount=log_config.backup_count,
        encoding="utf-8",
    )


def setup_logging(log_config: LoggingConfig, level: Optional[str] = None) -> logging.Logger:
    """
    Configure the package logger for command-line use

    Library calls never configure logging themselves. Records go to stderr
    so that stdout carries only command results.

    Args:
        log_config: Logging section of the loaded Config
        level: Overrides log_config.level when given (--log-level)

    Returns:
        The "stringext" logger
    """
    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(level or log_config.level)
    logger.handlers.clear()

    formatter = logging.Formatter(log_config.format)
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_config.file_path:
        handlers.append(_file_handler(log_config))

    for handler in handlers:
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.debug(f"Logging at {logging.getLevelName(logger.level)}")
    return logger


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")
