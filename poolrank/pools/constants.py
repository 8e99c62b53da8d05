"""Constants for the supported mining pools."""

from enum import StrEnum


class PoolId(StrEnum):
    """Stable pool keys, declared in canonical report order.

    The values are used as keys in the persisted config file and must not
    change between releases.
    """

    FLEXPOOL = "flexpool"
    ETHERMINE = "ethermine"
    TWO_MINERS = "2miners"
    F2POOL = "f2pool"
    HIVEON = "hiveon"
    NANOPOOL = "nanopool"
    SPARKPOOL = "sparkpool"

    @property
    def display_name(self) -> str:
        """Human-readable pool name used in prompts and reports."""
        return DISPLAY_NAMES[self]

    @property
    def order(self) -> int:
        """Position of the pool in canonical order."""
        return CANONICAL_ORDER.index(self)


DISPLAY_NAMES: dict[PoolId, str] = {
    PoolId.FLEXPOOL: "Flexpool",
    PoolId.ETHERMINE: "Ethermine",
    PoolId.TWO_MINERS: "2Miners",
    PoolId.F2POOL: "F2Pool",
    PoolId.HIVEON: "Hiveon",
    PoolId.NANOPOOL: "Nanopool",
    PoolId.SPARKPOOL: "SparkPool",
}

CANONICAL_ORDER: list[PoolId] = list(PoolId)

# Balance endpoints, with the wallet address interpolated as {wallet}
ENDPOINTS: dict[PoolId, str] = {
    PoolId.FLEXPOOL: "https://flexpool.io/api/v1/miner/{wallet}/balance/",
    PoolId.ETHERMINE: "https://api.ethermine.org/miner/{wallet}/currentStats",
    PoolId.TWO_MINERS: "https://eth.2miners.com/api/accounts/{wallet}",
    PoolId.F2POOL: "https://api.f2pool.com/eth/{wallet}",
    PoolId.HIVEON: "https://hiveon.net/api/v1/stats/miner/{wallet}/ETH/billing-acc",
    PoolId.NANOPOOL: "https://api.nanopool.org/v1/eth/balance/{wallet}",
    PoolId.SPARKPOOL: "https://www.sparkpool.com/v1/bill/stats?miner={wallet}&currency=ETH",
}


__all__ = ["CANONICAL_ORDER", "DISPLAY_NAMES", "ENDPOINTS", "PoolId"]
