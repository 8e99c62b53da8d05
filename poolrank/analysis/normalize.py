"""Balance normalization."""

from poolrank.analysis.models import NormalizedYield
from poolrank.pools.models import RawBalance
from poolrank.settings.models import PoolConfig


def normalize(raw: RawBalance, pool_config: PoolConfig) -> NormalizedYield:
    """Turn a raw ETH balance into a yield comparable across pools.

    The balance is expressed per 100 units of the configured hashrate and the
    baseline captured at setup is subtracted, so only what accrued since then
    counts. The result may be negative.

    Args:
        raw: Balance fetched for the pool (0.0 if the fetch failed)
        pool_config: Settings of the same pool; hashrate is validated > 0

    Returns:
        NormalizedYield for the pool

    Example:
        >>> raw = RawBalance(pool=PoolId.FLEXPOOL, value_eth=2.0)
        >>> normalize(raw, PoolConfig(hashrate=100, starting_balance=0.5)).value
        1.5
    """
    value = raw.value_eth * 100.0 / pool_config.hashrate - pool_config.starting_balance
    return NormalizedYield(pool=raw.pool, value=value)


__all__ = ["normalize"]
