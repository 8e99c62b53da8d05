"""Balance comparison pipeline.

Processing flow:
1. Pick the enabled pools from the config, in canonical order
2. Fetch every pool's balance concurrently (failures count as 0.0 ETH)
3. Normalize each balance by hashrate and starting balance
4. Rank the results and render the report lines
"""

from collections.abc import Callable
import asyncio

import httpx

from poolrank.analysis.models import NormalizedYield
from poolrank.analysis.normalize import normalize
from poolrank.analysis.rank import rank
from poolrank.analysis.report import render
from poolrank.helpers.errors import FetchFailedError
from poolrank.helpers.logging import get_logger
from poolrank.pools.constants import PoolId
from poolrank.pools.models import RawBalance
from poolrank.pools.registry import AdapterRegistry
from poolrank.settings.models import Config


logger = get_logger(__name__)


async def fetch_balance(
    client: httpx.AsyncClient,
    registry: AdapterRegistry,
    pool: PoolId,
    wallet: str,
) -> RawBalance:
    """Fetch one pool's balance, substituting 0.0 ETH on failure.

    Args:
        client: HTTP client instance.
        registry: Adapters to fetch with.
        pool: Pool to query.
        wallet: Wallet address configured for the pool.

    Returns:
        RawBalance, with fetch_failed set if the pool could not be read.
    """
    try:
        return await registry.get(pool).fetch(client, wallet)
    except FetchFailedError as e:
        logger.warning("Failed to fetch %s balance: %s", pool.display_name, e)
        return RawBalance.failed(pool)


async def collect_balances(
    client: httpx.AsyncClient,
    registry: AdapterRegistry,
    config: Config,
    on_done: Callable[[str], None] | None = None,
) -> list[RawBalance]:
    """Fetch the balances of all enabled pools concurrently.

    Args:
        client: HTTP client instance.
        registry: Adapters to fetch with.
        config: Pool settings; only enabled pools are queried.
        on_done: Called with the pool name as each fetch completes.

    Returns:
        One RawBalance per enabled pool, in canonical order.
    """
    enabled = registry.list_enabled(config)

    async def fetch_one(pool: PoolId, wallet: str) -> RawBalance:
        try:
            return await fetch_balance(client, registry, pool, wallet)
        finally:
            if on_done is not None:
                on_done(pool.display_name)

    tasks = [fetch_one(pool, pool_config.wallet) for pool, pool_config in enabled]
    results = await asyncio.gather(*tasks, return_exceptions=True)

    balances: list[RawBalance] = []
    for (pool, _), result in zip(enabled, results, strict=True):
        if isinstance(result, RawBalance):
            balances.append(result)
        else:
            logger.error("Error fetching %s balance: %r", pool.display_name, result)
            balances.append(RawBalance.failed(pool))

    failed = sum(1 for balance in balances if balance.fetch_failed)
    if failed:
        logger.warning("%d of %d pool fetches failed", failed, len(balances))

    return balances


def normalize_balances(
    balances: list[RawBalance], config: Config
) -> list[NormalizedYield]:
    """Normalize each balance with its pool's settings."""
    return [normalize(balance, config.get(balance.pool)) for balance in balances]


async def run_pipeline(
    client: httpx.AsyncClient,
    config: Config,
    registry: AdapterRegistry | None = None,
    on_done: Callable[[str], None] | None = None,
) -> list[str]:
    """Fetch, normalize, rank and render the enabled pools.

    Args:
        client: HTTP client instance.
        config: Pool settings.
        registry: Adapters to use (default: all supported pools).
        on_done: Called with the pool name as each fetch completes.

    Returns:
        Report lines, best pool first.
    """
    if registry is None:
        registry = AdapterRegistry()
    balances = await collect_balances(client, registry, config, on_done)
    return render(rank(normalize_balances(balances, config)))


__all__ = [
    "collect_balances",
    "fetch_balance",
    "normalize_balances",
    "run_pipeline",
]
