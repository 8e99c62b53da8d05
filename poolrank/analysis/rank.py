"""Ranking of normalized pool yields."""

from collections.abc import Iterable
import math

from poolrank.analysis.models import NormalizedYield, RankedEntry


def percent_of_top(value: float, top_value: float) -> float | None:
    """Difference of ``value`` to ``top_value`` in percent.

    Returns None when the top value is zero or the result is not finite.
    Negative tops are divided as is, so
    ``top_value * (percent / 100 + 1) == value`` holds whenever a number is
    returned.
    """
    if top_value == 0:
        return None

    percent = value * 100.0 / top_value - 100.0
    return percent if math.isfinite(percent) else None


def rank(entries: Iterable[NormalizedYield]) -> list[RankedEntry]:
    """Sort yields descending and compare each one to the best.

    Ties keep canonical pool order, so the result does not depend on the
    order of ``entries``.

    Args:
        entries: Normalized yields, at most one per pool

    Returns:
        Ranked entries, best first; the first carries no percentage
    """
    ordered = sorted(entries, key=lambda entry: (-entry.value, entry.pool.order))
    if not ordered:
        return []

    top = ordered[0]
    ranked = [RankedEntry(pool=top.pool, value=top.value, is_top=True)]
    ranked.extend(
        RankedEntry(
            pool=entry.pool,
            value=entry.value,
            percent_of_top=percent_of_top(entry.value, top.value),
        )
        for entry in ordered[1:]
    )
    return ranked


__all__ = ["percent_of_top", "rank"]
