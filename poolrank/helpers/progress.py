"""Progress display for the pool fetches."""

from collections.abc import Callable, Iterator
from contextlib import contextmanager

from rich.console import Console
from rich.progress import (
    BarColumn,
    MofNCompleteColumn,
    Progress,
    SpinnerColumn,
    TextColumn,
    TimeElapsedColumn,
)


def create_fetch_progress(
    console: Console | None = None, *, disable: bool = False
) -> Progress:
    """Create a transient progress bar for concurrent balance fetches.

    The bar is drawn on stderr unless a console is given, and removed once
    all fetches finished so only the report stays on screen.

    Args:
        console: Rich console instance (optional)
        disable: Whether to suppress the display entirely

    Returns:
        Configured Progress instance with:
        - Spinner
        - Task description
        - Progress bar
        - M of N counter
        - Time elapsed
    """
    return Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        BarColumn(),
        MofNCompleteColumn(),
        TextColumn("•"),
        TimeElapsedColumn(),
        console=console or Console(stderr=True),
        transient=True,
        disable=disable,
    )


@contextmanager
def track_fetches(
    total: int,
    console: Console | None = None,
    *,
    disable: bool = False,
) -> Iterator[Callable[[str], None]]:
    """Context manager that shows fetch progress.

    Yields a callback to invoke with the pool name each time a fetch
    completes, successfully or not.

    Example:
        ```python
        from poolrank.helpers.progress import track_fetches

        with track_fetches(total=3) as advance:
            for name in ("Flexpool", "F2Pool", "Hiveon"):
                ...
                advance(name)
        ```
    """
    progress = create_fetch_progress(console, disable=disable)

    with progress:
        task_id = progress.add_task("Fetching balances", total=total)

        def advance(name: str) -> None:
            progress.update(task_id, advance=1, description=f"Fetched {name}")

        yield advance


__all__ = ["create_fetch_progress", "track_fetches"]
