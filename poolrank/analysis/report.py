"""Text rendering of ranked results."""

from collections.abc import Iterable

from poolrank.analysis.models import RankedEntry
from poolrank.helpers.constants import PERCENT_PLACEHOLDER


def render_entry(entry: RankedEntry) -> str:
    """Format one ranked entry as a report line."""
    line = f"{entry.pool.display_name}: {entry.value} ETH"
    if entry.is_top:
        return line
    if entry.percent_of_top is None:
        return f"{line} ({PERCENT_PLACEHOLDER})"
    return f"{line} ({entry.percent_of_top:.2f}%)"


def render(ranked: Iterable[RankedEntry]) -> list[str]:
    """Format ranked entries as report lines, one per pool."""
    return [render_entry(entry) for entry in ranked]


__all__ = ["render", "render_entry"]
