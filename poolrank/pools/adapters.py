"""Pool adapters.

Each adapter knows how one pool shapes its balance URL and its JSON response,
and how to turn the single balance field it cares about into ETH. Adding a
pool means adding a ``PoolId`` member and an adapter subclass here.
"""

from abc import ABC, abstractmethod
from typing import ClassVar

import httpx
from pydantic import ValidationError

from poolrank.helpers.errors import FetchFailedError
from poolrank.helpers.http import fetch_json
from poolrank.helpers.logging import get_logger
from poolrank.helpers.parsers import gwei_to_eth, strip_chain_prefix, wei_to_eth
from poolrank.pools.constants import ENDPOINTS, PoolId
from poolrank.pools.models import (
    EthermineBalance,
    F2PoolBalance,
    FlexpoolBalance,
    HiveonBalance,
    NanopoolBalance,
    PoolResponse,
    RawBalance,
    SparkPoolBalance,
    TwoMinersBalance,
)


logger = get_logger(__name__)


class PoolAdapter[ResponseT: PoolResponse](ABC):
    """Fetches one pool's unpaid balance and converts it to ETH."""

    pool: ClassVar[PoolId]
    response_model: ClassVar[type[PoolResponse]]

    @property
    def name(self) -> str:
        """Display name of the pool."""
        return self.pool.display_name

    def wallet_path(self, wallet: str) -> str:
        """Wallet address as the pool's endpoint expects it."""
        return wallet

    def build_url(self, wallet: str) -> str:
        """Balance URL for a wallet address."""
        return ENDPOINTS[self.pool].format(wallet=self.wallet_path(wallet))

    @abstractmethod
    def to_eth(self, response: ResponseT) -> float:
        """Extract the unpaid balance from a parsed response, in ETH."""

    async def fetch(self, client: httpx.AsyncClient, wallet: str) -> RawBalance:
        """Fetch the unpaid balance for a wallet.

        Args:
            client: HTTP client to issue the request with.
            wallet: Wallet address as configured.

        Returns:
            RawBalance with the balance in ETH.

        Raises:
            FetchFailedError: If the request fails or the response does not
                carry the expected balance field.
        """
        url = self.build_url(wallet)
        data = await fetch_json(client, url)

        try:
            parsed = self.response_model.model_validate(data)
        except ValidationError as e:
            logger.debug("%s response did not match schema: %s", self.name, e)
            msg = f"unexpected response shape ({e.error_count()} errors)"
            raise FetchFailedError(url, msg) from e

        value_eth = self.to_eth(parsed)  # type: ignore[arg-type]
        logger.info("%s balance: %s ETH", self.name, value_eth)
        return RawBalance(pool=self.pool, value_eth=value_eth)


class FlexpoolAdapter(PoolAdapter[FlexpoolBalance]):
    """Flexpool reports the balance in wei under ``result``."""

    pool = PoolId.FLEXPOOL
    response_model = FlexpoolBalance

    def to_eth(self, response: FlexpoolBalance) -> float:
        return wei_to_eth(response.result)


class EthermineAdapter(PoolAdapter[EthermineBalance]):
    """Ethermine reports the balance in wei under ``data.unpaid``."""

    pool = PoolId.ETHERMINE
    response_model = EthermineBalance

    def to_eth(self, response: EthermineBalance) -> float:
        return wei_to_eth(response.data.unpaid)


class TwoMinersAdapter(PoolAdapter[TwoMinersBalance]):
    """2Miners reports the balance in Gwei under ``stats.balance``."""

    pool = PoolId.TWO_MINERS
    response_model = TwoMinersBalance

    def to_eth(self, response: TwoMinersBalance) -> float:
        return gwei_to_eth(response.stats.balance)


class F2PoolAdapter(PoolAdapter[F2PoolBalance]):
    pool = PoolId.F2POOL
    response_model = F2PoolBalance

    def to_eth(self, response: F2PoolBalance) -> float:
        return response.balance


class HiveonAdapter(PoolAdapter[HiveonBalance]):
    """Hiveon wants the wallet without its ``0x`` prefix."""

    pool = PoolId.HIVEON
    response_model = HiveonBalance

    def wallet_path(self, wallet: str) -> str:
        return strip_chain_prefix(wallet)

    def to_eth(self, response: HiveonBalance) -> float:
        return response.total_unpaid


class NanopoolAdapter(PoolAdapter[NanopoolBalance]):
    pool = PoolId.NANOPOOL
    response_model = NanopoolBalance

    def to_eth(self, response: NanopoolBalance) -> float:
        return response.data


class SparkPoolAdapter(PoolAdapter[SparkPoolBalance]):
    pool = PoolId.SPARKPOOL
    response_model = SparkPoolBalance

    def to_eth(self, response: SparkPoolBalance) -> float:
        return response.data.balance


DEFAULT_ADAPTERS: list[type[PoolAdapter]] = [
    FlexpoolAdapter,
    EthermineAdapter,
    TwoMinersAdapter,
    F2PoolAdapter,
    HiveonAdapter,
    NanopoolAdapter,
    SparkPoolAdapter,
]


__all__ = [
    "DEFAULT_ADAPTERS",
    "EthermineAdapter",
    "F2PoolAdapter",
    "FlexpoolAdapter",
    "HiveonAdapter",
    "NanopoolAdapter",
    "PoolAdapter",
    "SparkPoolAdapter",
    "TwoMinersAdapter",
]
