"""Models for pool API responses and fetched balances.

Each response model declares only the field that carries the unpaid balance;
pydantic ignores everything else the pool sends back. NaN and infinite
balances fail validation like any other malformed value.
"""

from datetime import UTC, datetime

from pydantic import BaseModel, ConfigDict, Field

from poolrank.pools.constants import PoolId


class PoolResponse(BaseModel):
    """Base for pool API responses."""

    model_config = ConfigDict(allow_inf_nan=False)


class FlexpoolBalance(PoolResponse):
    """Flexpool miner balance response."""

    result: int = Field(..., description="Unpaid balance in wei")


class EthermineData(PoolResponse):
    """Ethermine current stats payload."""

    unpaid: int = Field(..., description="Unpaid balance in wei")


class EthermineBalance(PoolResponse):
    """Ethermine current stats response."""

    data: EthermineData


class TwoMinersStats(PoolResponse):
    """2Miners account stats block."""

    balance: int = Field(..., description="Unpaid balance in Gwei")


class TwoMinersBalance(PoolResponse):
    """2Miners account response."""

    stats: TwoMinersStats


class F2PoolBalance(PoolResponse):
    """F2Pool account response."""

    balance: float = Field(..., description="Unpaid balance in ETH")


class HiveonBalance(PoolResponse):
    """Hiveon billing account response."""

    total_unpaid: float = Field(
        ..., description="Unpaid balance in ETH", alias="totalUnpaid"
    )

    model_config = ConfigDict(populate_by_name=True)


class NanopoolBalance(PoolResponse):
    """Nanopool balance response."""

    data: float = Field(..., description="Unpaid balance in ETH")


class SparkPoolData(PoolResponse):
    """SparkPool bill stats payload."""

    balance: float = Field(..., description="Unpaid balance in ETH")


class SparkPoolBalance(PoolResponse):
    """SparkPool bill stats response."""

    data: SparkPoolData


class RawBalance(BaseModel):
    """Balance of one pool in ETH, as fetched during this run."""

    pool: PoolId
    value_eth: float = Field(..., description="Unpaid balance converted to ETH")
    fetched_at: datetime = Field(default_factory=lambda: datetime.now(UTC))
    fetch_failed: bool = Field(
        default=False, description="True when value_eth is a 0.0 stand-in"
    )

    model_config = ConfigDict(frozen=True)

    @classmethod
    def failed(cls, pool: PoolId) -> "RawBalance":
        """Stand-in balance for a pool whose fetch failed."""
        return cls(pool=pool, value_eth=0.0, fetch_failed=True)


__all__ = [
    "EthermineBalance",
    "EthermineData",
    "F2PoolBalance",
    "FlexpoolBalance",
    "HiveonBalance",
    "NanopoolBalance",
    "PoolResponse",
    "RawBalance",
    "SparkPoolBalance",
    "SparkPoolData",
    "TwoMinersBalance",
    "TwoMinersStats",
]
