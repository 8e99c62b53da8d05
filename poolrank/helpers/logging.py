"""Logger module."""

import logging
import sys

import colorlog

from poolrank.helpers.config import get_log_level
from poolrank.helpers.constants import DEFAULT_LOG_LEVEL

loggers: dict[str, logging.Logger] = {}

LOG_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


def get_logger(
    name: str,
    log_handler: str = "stderr",
    log_level: str | None = None,
    log_color: bool = False,
) -> logging.Logger:
    """Get logger.

    Log records go to stderr by default so that stdout only carries the
    balance report.

    Args:
        name: The name of the logger.
        log_handler: The log handler type ('stderr' or 'stdout').
        log_level: The logging level ('DEBUG', 'INFO', 'WARNING', 'ERROR',
            'CRITICAL'). Defaults to POOLRANK_LOG_LEVEL, or WARNING if that
            is unset or unknown.
        log_color: Whether to use colored output.

    Returns:
        logging.Logger: Configured logger instance.

    Raises:
        ValueError: If invalid handler or log level is provided.
    """
    if name in loggers:
        return loggers[name]

    streams = {"stderr": sys.stderr, "stdout": sys.stdout}
    if log_handler not in streams:
        err_msg = f"Invalid handler: {log_handler}"
        raise ValueError(err_msg)

    if log_level is None:
        level_name = get_log_level()
        if level_name not in LOG_LEVELS:
            level_name = DEFAULT_LOG_LEVEL
    else:
        level_name = log_level.upper()

    if level_name not in LOG_LEVELS:
        err_msg = f"Invalid log level: {level_name}"
        raise ValueError(err_msg)

    level = LOG_LEVELS[level_name]

    if log_color:
        logger = colorlog.getLogger(name)
        handler: logging.Handler = colorlog.StreamHandler(streams[log_handler])
        formatter: logging.Formatter = colorlog.ColoredFormatter(
            "%(log_color)s %(asctime)s - %(name)s - %(levelname)s - %(message)s",
            log_colors={
                "DEBUG": "cyan",
                "INFO": "green",
                "WARNING": "yellow",
                "ERROR": "red",
                "CRITICAL": "red,bg_white",
            },
        )
    else:
        logger = logging.getLogger(name)
        handler = logging.StreamHandler(streams[log_handler])
        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        )

    logger.setLevel(level)
    handler.setLevel(level)
    handler.setFormatter(formatter)
    logger.addHandler(handler)

    loggers[name] = logger
    return logger


def set_log_level(log_level: str) -> None:
    """Change the level of every logger handed out so far.

    Args:
        log_level: One of the names in LOG_LEVELS (case-insensitive).

    Raises:
        ValueError: If the level name is unknown.
    """
    level_name = log_level.upper()
    if level_name not in LOG_LEVELS:
        err_msg = f"Invalid log level: {log_level}"
        raise ValueError(err_msg)

    level = LOG_LEVELS[level_name]
    for logger in loggers.values():
        logger.setLevel(level)
        for handler in logger.handlers:
            handler.setLevel(level)


__all__ = ["LOG_LEVELS", "get_logger", "set_log_level"]
