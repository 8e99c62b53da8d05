"""Interactive first-run setup.

Asks, pool by pool, whether to track it, which wallet to use, the reported
hashrate and whether to capture the current balance as the baseline.
"""

import asyncio
from collections.abc import Callable

import httpx

from poolrank.helpers.errors import FetchFailedError
from poolrank.helpers.logging import get_logger
from poolrank.helpers.parsers import is_yes, parse_hashrate
from poolrank.pools.constants import PoolId
from poolrank.pools.registry import AdapterRegistry
from poolrank.settings.models import Config, PoolConfig


logger = get_logger(__name__)

type Prompt = Callable[[str], str]


async def ask(prompt: Prompt, question: str) -> str:
    """Run a blocking prompt in a worker thread."""
    return await asyncio.to_thread(prompt, question)


async def current_balance(
    client: httpx.AsyncClient, registry: AdapterRegistry, pool: PoolId, wallet: str
) -> float:
    """Fetch the balance to use as a starting baseline, 0.0 on failure."""
    try:
        raw = await registry.get(pool).fetch(client, wallet)
    except FetchFailedError as e:
        logger.warning("Could not fetch current %s balance: %s", pool.display_name, e)
        return 0.0
    return raw.value_eth


async def ask_pool(
    client: httpx.AsyncClient,
    registry: AdapterRegistry,
    pool: PoolId,
    prompt: Prompt | None = None,
) -> PoolConfig:
    """Ask the user for one pool's settings.

    Args:
        client: HTTP client used to capture the starting balance
        registry: Adapters to fetch the starting balance with
        pool: Pool being configured
        prompt: Function that shows a prompt and returns the answer
            (default: input)

    Returns:
        PoolConfig for the pool (disabled if the user declined it)
    """
    prompt = prompt or input
    if not is_yes(await ask(prompt, f"{pool.display_name}? [Y/n]: ")):
        return PoolConfig()

    wallet = (await ask(prompt, "Provide the wallet address: ")).strip()
    hashrate = parse_hashrate(await ask(prompt, "Provide the reported hashrate: "))

    starting_balance = 0.0
    if is_yes(await ask(prompt, "Subtract the current balance? [Y/n]: ")):
        starting_balance = await current_balance(client, registry, pool, wallet)

    return PoolConfig(
        enabled=True,
        wallet=wallet,
        hashrate=hashrate,
        starting_balance=starting_balance,
    )


async def run_wizard(
    client: httpx.AsyncClient,
    registry: AdapterRegistry,
    prompt: Prompt | None = None,
) -> Config:
    """Build a Config by asking about every registered pool in order."""
    pools: dict[PoolId, PoolConfig] = {}
    for pool in registry.pools:
        pools[pool] = await ask_pool(client, registry, pool, prompt)

    enabled = sum(1 for pool_config in pools.values() if pool_config.enabled)
    logger.info("Configured %d of %d pools", enabled, len(pools))
    return Config(pools=pools)


__all__ = ["ask", "ask_pool", "current_balance", "run_wizard"]
