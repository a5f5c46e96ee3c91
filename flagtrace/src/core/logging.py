# Copyright (c) 2025 GÖKSEL ÖZKAN
# Centralized Logging Configuration for FlagTrace

import sys
from pathlib import Path
from loguru import logger

# Remove default handler
logger.remove()

_handler_ids = []


def _stderr_sink(message):
    # Resolved per write so a swapped or restored sys.stderr is always used
    sys.stderr.write(message)


def configure_logging(
    level: str = "INFO",
    log_to_file: bool = False,
    log_dir: Path = None
):
    """
    Configure centralized logging for FlagTrace.

    Calling it again replaces the handlers added by the previous call.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_to_file: Whether to also log to a file
        log_dir: Directory for log files (default: current working directory)
    """
    while _handler_ids:
        logger.remove(_handler_ids.pop())

    # Console output with colors
    _handler_ids.append(logger.add(
        _stderr_sink,
        format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{extra[name]}</cyan> - <level>{message}</level>",
        level=level,
        colorize=True,
        catch=False  # Write failures propagate to the caller
    ))

    if log_to_file:
        if log_dir is None:
            log_dir = Path.cwd()

        log_path = Path(log_dir) / "flagtrace_{time}.log"

        _handler_ids.append(logger.add(
            str(log_path),
            format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {extra[name]} - {message}",
            level="DEBUG",  # File gets all logs
            rotation="10 MB",
            retention="7 days",
            compression="zip",
        catch=False
        ))


def get_logger(name: str = "flagtrace"):
    """
    Get a logger instance with the given name.

    Args:
        name: Logger name (typically module name)

    Returns:
        Configured logger instance
    """
    return logger.bind(name=name)


# Every record carries a name, even ones logged through the bare logger
logger.configure(extra={"name": "flagtrace"})

# Initialize with default settings when imported
configure_logging()
