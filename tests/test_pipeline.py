"""Tests for the fetch, normalize, rank and render pipeline."""

from typing import TYPE_CHECKING

import httpx
import pytest

from poolrank.pipeline import (
    collect_balances,
    fetch_balance,
    normalize_balances,
    run_pipeline,
)
from poolrank.pools.adapters import F2PoolAdapter, FlexpoolAdapter
from poolrank.pools.constants import PoolId
from poolrank.pools.models import RawBalance
from poolrank.pools.registry import AdapterRegistry
from poolrank.settings.models import Config, PoolConfig


if TYPE_CHECKING:
    from pytest_httpx import HTTPXMock


WALLET = "0x52bc44d5378309ee2abf1539bf71de1b7d7be3b5"

FLEXPOOL_URL = f"https://flexpool.io/api/v1/miner/{WALLET}/balance/"
F2POOL_URL = f"https://api.f2pool.com/eth/{WALLET}"
HIVEON_URL = f"https://hiveon.net/api/v1/stats/miner/{WALLET[2:]}/ETH/billing-acc"


def pool(hashrate: float, starting_balance: float) -> PoolConfig:
    return PoolConfig(
        enabled=True,
        wallet=WALLET,
        hashrate=hashrate,
        starting_balance=starting_balance,
    )


@pytest.fixture
def config() -> Config:
    """Provide Flexpool, F2Pool and Hiveon with distinct settings."""
    return Config(
        pools={
            PoolId.FLEXPOOL: pool(100.0, 0.5),
            PoolId.F2POOL: pool(50.0, 1.0),
            PoolId.HIVEON: pool(100.0, 0.25),
            PoolId.NANOPOOL: PoolConfig(enabled=False, wallet=WALLET),
        }
    )


class TestFetchBalance:
    """Tests for fetch_balance function."""

    @pytest.mark.asyncio
    async def test_success(
        self, httpx_mock: "HTTPXMock", registry: AdapterRegistry
    ) -> None:
        """Test a successful fetch passes the adapter result through."""
        httpx_mock.add_response(url=F2POOL_URL, json={"balance": 3.2})

        async with httpx.AsyncClient() as client:
            raw = await fetch_balance(client, registry, PoolId.F2POOL, WALLET)

        assert raw.value_eth == 3.2
        assert raw.fetch_failed is False

    @pytest.mark.asyncio
    async def test_failure_becomes_zero(
        self,
        httpx_mock: "HTTPXMock",
        registry: AdapterRegistry,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        """Test a failed fetch is logged and replaced by 0.0 ETH."""
        httpx_mock.add_response(url=F2POOL_URL, status_code=500)

        async with httpx.AsyncClient() as client:
            raw = await fetch_balance(client, registry, PoolId.F2POOL, WALLET)

        assert raw.value_eth == 0.0
        assert raw.fetch_failed is True
        assert any("Failed to fetch F2Pool balance" in r.message for r in caplog.records)


class TestCollectBalances:
    """Tests for collect_balances function."""

    @pytest.mark.asyncio
    async def test_fetches_enabled_pools_in_canonical_order(
        self, httpx_mock: "HTTPXMock", registry: AdapterRegistry, config: Config
    ) -> None:
        """Test one balance per enabled pool, disabled pools not requested."""
        httpx_mock.add_response(url=FLEXPOOL_URL, json={"result": 2 * 10**18})
        httpx_mock.add_response(url=F2POOL_URL, json={"balance": 3.2})
        httpx_mock.add_response(url=HIVEON_URL, json={"totalUnpaid": 0.7})

        async with httpx.AsyncClient() as client:
            balances = await collect_balances(client, registry, config)

        assert [b.pool for b in balances] == [
            PoolId.FLEXPOOL,
            PoolId.F2POOL,
            PoolId.HIVEON,
        ]
        assert [b.value_eth for b in balances] == [2.0, 3.2, 0.7]
        assert len(httpx_mock.get_requests()) == 3

    @pytest.mark.asyncio
    async def test_on_done_called_per_pool(
        self, httpx_mock: "HTTPXMock", registry: AdapterRegistry, config: Config
    ) -> None:
        """Test the completion callback fires once per pool, failures included."""
        httpx_mock.add_response(url=FLEXPOOL_URL, json={"result": 0})
        httpx_mock.add_response(url=F2POOL_URL, status_code=500)
        httpx_mock.add_response(url=HIVEON_URL, json={"totalUnpaid": 0.0})
        done: list[str] = []

        async with httpx.AsyncClient() as client:
            await collect_balances(client, registry, config, on_done=done.append)

        assert sorted(done) == ["F2Pool", "Flexpool", "Hiveon"]

    @pytest.mark.asyncio
    async def test_unexpected_error_isolated(
        self,
        httpx_mock: "HTTPXMock",
        config: Config,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        """Test an unexpected adapter exception only affects its own pool."""
        httpx_mock.add_response(url=FLEXPOOL_URL, json={"result": 10**18})

        async def broken(*_args: object) -> RawBalance:
            raise RuntimeError("boom")

        f2pool = F2PoolAdapter()
        monkeypatch.setattr(f2pool, "fetch", broken)
        registry = AdapterRegistry([FlexpoolAdapter(), f2pool])

        async with httpx.AsyncClient() as client:
            balances = await collect_balances(client, registry, config)

        assert balances[0].value_eth == 1.0
        assert balances[1].pool == PoolId.F2POOL
        assert balances[1].fetch_failed is True

    @pytest.mark.asyncio
    async def test_nothing_enabled(self, registry: AdapterRegistry) -> None:
        """Test an empty config makes no requests."""
        async with httpx.AsyncClient() as client:
            assert await collect_balances(client, registry, Config()) == []


class TestNormalizeBalances:
    """Tests for normalize_balances function."""

    def test_uses_each_pools_settings(self, config: Config) -> None:
        """Test every balance is normalized with its own pool config."""
        balances = [
            RawBalance(pool=PoolId.FLEXPOOL, value_eth=2.0),
            RawBalance(pool=PoolId.F2POOL, value_eth=3.2),
        ]

        yields = normalize_balances(balances, config)

        assert yields[0].value == 1.5
        assert yields[1].value == pytest.approx(5.4)


class TestRunPipeline:
    """Tests for run_pipeline function."""

    @pytest.mark.asyncio
    async def test_full_report(self, httpx_mock: "HTTPXMock", config: Config) -> None:
        """Test the ranked report for three pools."""
        httpx_mock.add_response(url=FLEXPOOL_URL, json={"result": 2 * 10**18})
        httpx_mock.add_response(url=F2POOL_URL, json={"balance": 3.2})
        httpx_mock.add_response(url=HIVEON_URL, json={"totalUnpaid": 0.75})

        async with httpx.AsyncClient() as client:
            lines = await run_pipeline(client, config)

        assert lines[0].startswith("F2Pool: 5.4")
        assert lines[1] == "Flexpool: 1.5 ETH (-72.22%)"
        assert lines[2].startswith("Hiveon: 0.5")
        assert lines[2].endswith("(-90.74%)")

    @pytest.mark.asyncio
    async def test_failed_pool_isolated(
        self, httpx_mock: "HTTPXMock", config: Config
    ) -> None:
        """Test a failing pool leaves the others untouched and shows -baseline."""
        httpx_mock.add_response(url=FLEXPOOL_URL, json={"result": 2 * 10**18})
        httpx_mock.add_response(url=F2POOL_URL, json={"balance": 3.2})
        httpx_mock.add_exception(httpx.ConnectError("unreachable"), url=HIVEON_URL)

        async with httpx.AsyncClient() as client:
            lines = await run_pipeline(client, config)

        assert lines[0].startswith("F2Pool: 5.4")
        assert lines[1] == "Flexpool: 1.5 ETH (-72.22%)"
        assert lines[2].startswith("Hiveon: -0.25 ETH")

    @pytest.mark.asyncio
    async def test_custom_registry(
        self, httpx_mock: "HTTPXMock", config: Config
    ) -> None:
        """Test only pools in the given registry are reported."""
        httpx_mock.add_response(url=F2POOL_URL, json={"balance": 3.2})

        async with httpx.AsyncClient() as client:
            lines = await run_pipeline(
                client, config, registry=AdapterRegistry([F2PoolAdapter()])
            )

        assert len(lines) == 1
        assert lines[0].startswith("F2Pool: ")

    @pytest.mark.asyncio
    async def test_empty_registry_reports_nothing(self, config: Config) -> None:
        """Test an empty registry is respected rather than replaced."""
        async with httpx.AsyncClient() as client:
            lines = await run_pipeline(client, config, registry=AdapterRegistry([]))

        assert lines == []
