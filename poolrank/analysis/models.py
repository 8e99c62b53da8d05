"""Models for normalized and ranked pool results."""

from pydantic import BaseModel, ConfigDict, Field

from poolrank.pools.constants import PoolId


class NormalizedYield(BaseModel):
    """Pool balance scaled by hashrate and reduced by the starting balance."""

    pool: PoolId
    value: float = Field(..., description="Net yield per 100 units of hashrate")

    model_config = ConfigDict(frozen=True)


class RankedEntry(BaseModel):
    """One row of the ranked comparison."""

    pool: PoolId
    value: float
    percent_of_top: float | None = Field(
        default=None,
        description="Difference to the top entry in percent; None for the top "
        "entry and when the comparison is degenerate",
    )
    is_top: bool = False

    model_config = ConfigDict(frozen=True)


__all__ = ["NormalizedYield", "RankedEntry"]
