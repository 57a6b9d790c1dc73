"""
Logging for stringext.

Every module logs through a child of the "stringext" logger, which carries
only a NullHandler until the application opts in. setup_logging() and
setup_logging_from_config() attach console and rotating file output to
the package logger; the root logger is never touched.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

PACKAGE_LOGGER = "stringext"
LOG_FILENAME = "stringext.log"

logging.getLogger(PACKAGE_LOGGER).addHandler(logging.NullHandler())

_logger_initialized = False


def setup_logging(
    log_level: str = "WARNING",
    log_format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    logs_directory: Path = None,
    max_file_size_mb: int = 10,
    backup_count: int = 5
) -> logging.Logger:
    """
    Send stringext log records to stdout and optionally a rotating file.

    Only runs once; later calls return the already configured logger.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_format: Format string for log messages.
        logs_directory: Directory for the log file. If None, file logging disabled.
        max_file_size_mb: Maximum size of each log file in MB.
        backup_count: Number of backup files to keep.

    Returns:
        The package logger.
    """
    global _logger_initialized

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    if _logger_initialized:
        return package_logger

    package_logger.setLevel(getattr(logging, log_level.upper(), logging.WARNING))
    package_logger.propagate = False
    formatter = logging.Formatter(log_format)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    package_logger.addHandler(console_handler)

    if logs_directory:
        logs_directory = Path(logs_directory)
        logs_directory.mkdir(parents=True, exist_ok=True)

        file_handler = RotatingFileHandler(
            logs_directory / LOG_FILENAME,
            maxBytes=max_file_size_mb * 1024 * 1024,
            backupCount=backup_count,
            encoding="utf-8"
        )
        file_handler.setFormatter(formatter)
        package_logger.addHandler(file_handler)

    _logger_initialized = True
    return package_logger


def setup_logging_from_config(config) -> logging.Logger:
    """
    Apply the logging section of a loaded Config.

    Args:
        config: Config instance, usually from get_config().

    Returns:
        The package logger.
    """
    return setup_logging(
        log_level=config.logging.level,
        log_format=config.logging.format,
        logs_directory=config.paths.logs_directory,
        max_file_size_mb=config.logging.max_file_size_mb,
        backup_count=config.logging.backup_count
    )


def get_logger(name: str) -> logging.Logger:
    """
    Get a named logger instance. Never configures handlers.

    Args:
        name: Logger name, typically __name__ of the calling module.

    Returns:
        Logger instance.
    """
    return logging.getLogger(name)


if __name__ == "__main__":
    setup_logging(log_level="DEBUG")

    logger = get_logger("stringext.demo")
    logger.debug("Debug message")
    logger.info("Info message")
    logger.warning("Warning message")
