"""Common configuration constants used across the application."""

# HTTP and Network Constants
DEFAULT_TIMEOUT = 30.0
"""Default HTTP request timeout in seconds"""

JSON_HEADERS = {"accept": "application/json"}
"""Headers sent with every pool API request"""

# Unit conversion
WEI_PER_ETH = 1e18
"""Wei in one ETH"""

GWEI_PER_ETH = 1e9
"""Gwei in one ETH"""

# Pool configuration defaults
DEFAULT_HASHRATE = 1.0
"""Hashrate used when none (or an unusable one) is provided"""

DEFAULT_STARTING_BALANCE = 0.0
"""Baseline subtracted from balances when none was captured"""

DEFAULT_CONFIG_PATH = "config.json"
"""Config file location when POOLRANK_CONFIG is not set"""

DEFAULT_LOG_LEVEL = "WARNING"
"""Log level when POOLRANK_LOG_LEVEL is not set"""

# Report formatting
PERCENT_PLACEHOLDER = "n/a"
"""Shown instead of a percentage when the comparison is meaningless"""


__all__ = [
    "DEFAULT_CONFIG_PATH",
    "DEFAULT_HASHRATE",
    "DEFAULT_LOG_LEVEL",
    "DEFAULT_STARTING_BALANCE",
    "DEFAULT_TIMEOUT",
    "GWEI_PER_ETH",
    "JSON_HEADERS",
    "PERCENT_PLACEHOLDER",
    "WEI_PER_ETH",
]
