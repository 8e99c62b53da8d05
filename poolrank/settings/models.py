"""Pydantic models for the persisted pool configuration."""

import math

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from poolrank.helpers.constants import DEFAULT_HASHRATE, DEFAULT_STARTING_BALANCE
from poolrank.pools.constants import PoolId


class PoolConfig(BaseModel):
    """Settings for one pool."""

    enabled: bool = Field(
        default=False,
        description="Whether the pool is queried",
        validation_alias=AliasChoices("enabled", "check"),
    )
    wallet: str = Field(default="", description="Wallet address for the pool API")
    hashrate: float = Field(
        default=DEFAULT_HASHRATE,
        description="Reported hashrate the balance is scaled by",
    )
    starting_balance: float = Field(
        default=DEFAULT_STARTING_BALANCE,
        description="Balance in ETH captured at setup, subtracted from results",
    )

    model_config = ConfigDict(frozen=True, extra="forbid")

    @field_validator("hashrate")
    @classmethod
    def hashrate_must_be_positive(cls, value: float) -> float:
        """Reject hashrates that would break the per-hashrate scaling."""
        if not math.isfinite(value) or value <= 0:
            msg = f"hashrate must be a positive number, got {value}"
            raise ValueError(msg)
        return value

    @field_validator("starting_balance")
    @classmethod
    def starting_balance_must_be_finite(cls, value: float) -> float:
        if not math.isfinite(value):
            msg = f"starting_balance must be a finite number, got {value}"
            raise ValueError(msg)
        return value


class Config(BaseModel):
    """Pool settings keyed by pool."""

    pools: dict[PoolId, PoolConfig] = Field(default_factory=dict)

    model_config = ConfigDict(frozen=True, extra="forbid")

    def get(self, pool: PoolId) -> PoolConfig:
        """Settings for a pool; pools missing from the file are disabled."""
        return self.pools.get(pool, PoolConfig())


__all__ = ["Config", "PoolConfig"]
