"""Registry of pool adapters keyed by pool."""

from collections.abc import Iterable

from poolrank.pools.adapters import DEFAULT_ADAPTERS, PoolAdapter
from poolrank.pools.constants import CANONICAL_ORDER, PoolId
from poolrank.settings.models import Config, PoolConfig


class AdapterRegistry:
    """Fixed collection of adapters, one per pool."""

    def __init__(self, adapters: Iterable[PoolAdapter] | None = None) -> None:
        """Initialize the registry.

        Args:
            adapters: Adapters to register. Defaults to one instance of every
                adapter in DEFAULT_ADAPTERS.

        Raises:
            ValueError: If two adapters serve the same pool.
        """
        if adapters is None:
            adapters = [adapter_class() for adapter_class in DEFAULT_ADAPTERS]

        self._adapters: dict[PoolId, PoolAdapter] = {}
        for adapter in adapters:
            if adapter.pool in self._adapters:
                msg = f"Duplicate adapter for pool {adapter.pool.value}"
                raise ValueError(msg)
            self._adapters[adapter.pool] = adapter

    def __contains__(self, pool: object) -> bool:
        return pool in self._adapters

    def __len__(self) -> int:
        return len(self._adapters)

    @property
    def pools(self) -> list[PoolId]:
        """Registered pools in canonical order."""
        return [pool for pool in CANONICAL_ORDER if pool in self._adapters]

    def get(self, pool: PoolId) -> PoolAdapter:
        """Adapter for a pool.

        Raises:
            KeyError: If no adapter is registered for the pool.
        """
        return self._adapters[pool]

    def list_enabled(self, config: Config) -> list[tuple[PoolId, PoolConfig]]:
        """Enabled pools with their settings, in canonical order.

        The order does not depend on how the config mapping is ordered. Pools
        without a registered adapter are skipped.
        """
        return [
            (pool, pool_config)
            for pool in self.pools
            if (pool_config := config.get(pool)).enabled
        ]


__all__ = ["AdapterRegistry"]
