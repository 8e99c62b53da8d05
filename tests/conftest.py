"""Pytest configuration and shared fixtures."""

from collections.abc import Callable, Generator, Iterator
import os

import pytest

from poolrank.pools.constants import PoolId
from poolrank.pools.registry import AdapterRegistry
from poolrank.settings.models import Config, PoolConfig


WALLET = "0x52bc44d5378309ee2abf1539bf71de1b7d7be3b5"
"""Sample wallet address used across tests"""

ENV_KEYS = ("POOLRANK_CONFIG", "POOLRANK_TIMEOUT", "POOLRANK_LOG_LEVEL")


@pytest.fixture
def clean_env() -> Generator[None]:
    """Clean poolrank environment variables before and after test."""
    saved_env = {key: os.environ.get(key) for key in ENV_KEYS}

    for key in saved_env:
        if key in os.environ:
            del os.environ[key]

    yield

    for key, value in saved_env.items():
        if value is not None:
            os.environ[key] = value
        elif key in os.environ:
            del os.environ[key]


@pytest.fixture
def wallet() -> str:
    """Provide a sample wallet address."""
    return WALLET


@pytest.fixture
def registry() -> AdapterRegistry:
    """Provide a registry with every supported pool."""
    return AdapterRegistry()


@pytest.fixture
def make_config() -> Callable[..., Config]:
    """Build a Config enabling the given pools with shared settings.

    Returns:
        Factory taking pools and optional hashrate/starting_balance
    """

    def factory(
        *pools: PoolId, hashrate: float = 1.0, starting_balance: float = 0.0
    ) -> Config:
        return Config(
            pools={
                pool: PoolConfig(
                    enabled=True,
                    wallet=WALLET,
                    hashrate=hashrate,
                    starting_balance=starting_balance,
                )
                for pool in pools
            }
        )

    return factory


@pytest.fixture
def answers(monkeypatch: pytest.MonkeyPatch) -> Callable[[list[str]], Iterator[str]]:
    """Feed scripted answers to input().

    Returns:
        Function that installs the answers and returns the remaining iterator
    """

    def install(values: list[str]) -> Iterator[str]:
        remaining = iter(values)
        monkeypatch.setattr("builtins.input", lambda _prompt="": next(remaining))
        return remaining

    return install


@pytest.fixture
def tolerance() -> float:
    """Provide tolerance for floating point comparisons.

    Returns:
        float: Maximum acceptable difference for float equality
    """
    return 1e-9
