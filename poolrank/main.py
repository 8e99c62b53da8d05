"""Compare unpaid balances across mining pools.

On first run an interactive wizard asks which pools to track and saves the
answers; later runs read the saved config, fetch every enabled pool and print
the pools ranked by normalized yield.

Usage:
    poolrank
    poolrank --config ~/pools.json --reconfigure
"""

import argparse
import asyncio
from pathlib import Path
import sys

import httpx

from poolrank.helpers.config import get_config_path, get_request_timeout
from poolrank.helpers.errors import ConfigInvalidError
from poolrank.helpers.http import create_http_client
from poolrank.helpers.logging import LOG_LEVELS, set_log_level
from poolrank.helpers.progress import track_fetches
from poolrank.pipeline import run_pipeline
from poolrank.pools.registry import AdapterRegistry
from poolrank.settings.models import Config
from poolrank.settings.store import load_config, save_config
from poolrank.settings.wizard import Prompt, run_wizard


async def main(
    config_path: str | Path | None = None,
    *,
    reconfigure: bool = False,
    timeout: float | None = None,
    show_progress: bool | None = None,
    prompt: Prompt | None = None,
) -> int:
    """Main entry point for the pool comparison.

    Args:
        config_path: Config file location (default: POOLRANK_CONFIG or
            ./config.json)
        reconfigure: Run the setup wizard even if a config file exists
        timeout: Per-request timeout in seconds
        show_progress: Draw a progress bar on stderr (default: only when
            stderr is a terminal)
        prompt: Function used by the wizard to ask questions

    Returns:
        Exit code (0 on completion, including failed pool fetches; 1 for
        configuration errors)
    """
    path = get_config_path(config_path)

    try:
        request_timeout = get_request_timeout(timeout)
        config = None if reconfigure else load_config(path)
    except (ConfigInvalidError, ValueError) as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 1

    registry = AdapterRegistry()
    if show_progress is None:
        show_progress = sys.stderr.isatty()

    async with create_http_client(timeout=request_timeout) as client:
        if config is None:
            config = await run_wizard(client, registry, prompt)
            try:
                save_config(path, config)
            except OSError as e:
                print(f"Cannot save configuration to {path}: {e}", file=sys.stderr)
                return 1
            print(f"Saved configuration to {path}")

        lines = await report(client, config, registry, show_progress=show_progress)

    if not lines:
        print("No pools enabled. Run with --reconfigure to pick some.")
    for line in lines:
        print(line)

    return 0


async def report(
    client: httpx.AsyncClient,
    config: Config,
    registry: AdapterRegistry,
    *,
    show_progress: bool,
) -> list[str]:
    """Run the pipeline with a progress bar over the enabled pools."""
    total = len(registry.list_enabled(config))
    with track_fetches(total, disable=not show_progress) as advance:
        return await run_pipeline(client, config, registry, on_done=advance)


def cli() -> None:
    """Command-line interface entry point."""
    parser = argparse.ArgumentParser(
        description="Compare unpaid balances across mining pools",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # First run asks for pools and wallets, later runs just report
  poolrank

  # Use a different config file and redo the setup
  poolrank --config ~/pools.json --reconfigure

  # Give slow pools more time and show what happens
  poolrank --timeout 60 --log-level INFO
        """,
    )

    parser.add_argument(
        "--config",
        default=None,
        help="Config file path (default: $POOLRANK_CONFIG or ./config.json)",
    )
    parser.add_argument(
        "--reconfigure",
        action="store_true",
        help="Run the setup wizard even if a config file exists",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=None,
        help="Per-request timeout in seconds (default: $POOLRANK_TIMEOUT or 30)",
    )
    parser.add_argument(
        "--log-level",
        choices=list(LOG_LEVELS),
        default=None,
        help="Log level (default: $POOLRANK_LOG_LEVEL or WARNING)",
    )
    parser.add_argument(
        "--pause",
        action=argparse.BooleanOptionalAction,
        default=sys.platform == "win32",
        help="Wait for Enter before exiting (default: on for Windows)",
    )

    args = parser.parse_args()

    if args.log_level:
        set_log_level(args.log_level)

    exit_code = asyncio.run(
        main(args.config, reconfigure=args.reconfigure, timeout=args.timeout)
    )

    if args.pause:
        input("Press Enter to exit...")

    sys.exit(exit_code)


if __name__ == "__main__":
    cli()
