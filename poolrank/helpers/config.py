"""Configuration management and environment variable utilities."""

import math
import os
from pathlib import Path

from dotenv import load_dotenv

from poolrank.helpers.constants import (
    DEFAULT_CONFIG_PATH,
    DEFAULT_LOG_LEVEL,
    DEFAULT_TIMEOUT,
)


# Load environment variables from .env file
load_dotenv()


def get_optional_env(key: str, default: str | None = None) -> str | None:
    """Get an optional environment variable with a default value.

    Empty values are treated as not set.

    Args:
        key: Environment variable name
        default: Default value if not set

    Returns:
        Environment variable value or default

    Example:
        ```python
        from poolrank.helpers.config import get_optional_env

        path = get_optional_env("POOLRANK_CONFIG", "config.json")
        ```
    """
    value = os.getenv(key)
    return value if value else default


def get_config_path(path: str | Path | None = None) -> Path:
    """Get the pool config file path from parameter or environment.

    Args:
        path: Optional path to use directly

    Returns:
        Path of the persisted pool configuration

    Example:
        ```python
        from poolrank.helpers.config import get_config_path

        # From POOLRANK_CONFIG, falling back to ./config.json
        config_path = get_config_path()
        ```
    """
    if path:
        return Path(path)

    return Path(get_optional_env("POOLRANK_CONFIG", DEFAULT_CONFIG_PATH) or "")


def get_request_timeout(timeout: float | None = None) -> float:
    """Get the per-request HTTP timeout from parameter or environment.

    Args:
        timeout: Optional timeout in seconds to use directly

    Returns:
        Timeout in seconds

    Raises:
        ValueError: If the timeout or POOLRANK_TIMEOUT is not a positive number
    """
    if timeout is not None:
        source, value = "timeout", timeout
    else:
        raw = get_optional_env("POOLRANK_TIMEOUT")
        if raw is None:
            return DEFAULT_TIMEOUT

        try:
            source, value = "POOLRANK_TIMEOUT", float(raw)
        except ValueError:
            msg = f"POOLRANK_TIMEOUT must be a number, got {raw!r}"
            raise ValueError(msg) from None

    if not math.isfinite(value) or value <= 0:
        msg = f"{source} must be positive, got {value}"
        raise ValueError(msg)

    return value


def get_log_level(log_level: str | None = None) -> str:
    """Get the log level name from parameter or environment."""
    if log_level:
        return log_level.upper()

    return (get_optional_env("POOLRANK_LOG_LEVEL", DEFAULT_LOG_LEVEL) or "").upper()


__all__ = [
    "get_config_path",
    "get_log_level",
    "get_optional_env",
    "get_request_timeout",
]
