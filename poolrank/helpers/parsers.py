"""Parsing utilities for common data transformations."""

import math

from poolrank.helpers.constants import DEFAULT_HASHRATE, GWEI_PER_ETH, WEI_PER_ETH


def wei_to_eth(wei: int) -> float:
    """Convert Wei to ETH (divide by 1e18).

    Args:
        wei: Amount in Wei

    Returns:
        float: Amount in ETH

    Example:
        >>> wei_to_eth(2_000_000_000_000_000_000)
        2.0
    """
    return float(wei) / WEI_PER_ETH


def gwei_to_eth(gwei: int) -> float:
    """Convert Gwei to ETH (divide by 1e9).

    Args:
        gwei: Amount in Gwei

    Returns:
        float: Amount in ETH

    Example:
        >>> gwei_to_eth(1_500_000_000)
        1.5
    """
    return float(gwei) / GWEI_PER_ETH


def strip_chain_prefix(wallet: str, length: int = 2) -> str:
    """Drop the leading chain prefix (``0x``) from a wallet address.

    Only the character count is checked, not the characters themselves.

    Example:
        >>> strip_chain_prefix("0xabc")
        'abc'
        >>> strip_chain_prefix("0x")
        ''
    """
    return wallet[length:]


def parse_hashrate(text: str, default: float = DEFAULT_HASHRATE) -> float:
    """Parse a user-entered hashrate, falling back to a safe default.

    Anything that is not a finite, strictly positive number yields ``default``.

    Example:
        >>> parse_hashrate(" 95.5 ")
        95.5
        >>> parse_hashrate("0")
        1.0
        >>> parse_hashrate("fast")
        1.0
    """
    try:
        value = float(text.strip())
    except ValueError:
        return default

    if not math.isfinite(value) or value <= 0:
        return default
    return value


def is_yes(answer: str) -> bool:
    """Interpret a ``[Y/n]`` prompt answer.

    Any answer containing a ``y`` counts as yes, anything else as no.

    Example:
        >>> is_yes("Yes")
        True
        >>> is_yes("")
        False
    """
    return "y" in answer.lower()


__all__ = [
    "gwei_to_eth",
    "is_yes",
    "parse_hashrate",
    "strip_chain_prefix",
    "wei_to_eth",
]
