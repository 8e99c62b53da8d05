"""Reading and writing the pool config file."""

import os
from pathlib import Path
import tempfile

from pydantic import ValidationError

from poolrank.helpers.errors import ConfigInvalidError
from poolrank.helpers.logging import get_logger
from poolrank.settings.models import Config


logger = get_logger(__name__)


def load_config(path: str | Path) -> Config | None:
    """Load the pool config from a JSON file.

    Args:
        path: Config file location

    Returns:
        The validated Config, or None if the file does not exist yet

    Raises:
        ConfigInvalidError: If the file cannot be read, is not valid JSON or
            holds values that fail validation (e.g. a zero hashrate)

    Example:
        ```python
        from poolrank.settings.store import load_config

        config = load_config("config.json")
        if config is None:
            ...  # first run, ask the user
        ```
    """
    path = Path(path)
    if not path.exists():
        logger.info("No config file at %s", path)
        return None

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        msg = f"Cannot read config file {path}: {e}"
        raise ConfigInvalidError(msg) from e

    try:
        config = Config.model_validate_json(raw)
    except ValidationError as e:
        msg = f"Invalid config file {path}: {e}"
        raise ConfigInvalidError(msg) from e

    logger.info("Loaded config for %d pools from %s", len(config.pools), path)
    return config


def save_config(path: str | Path, config: Config) -> None:
    """Write the pool config to a JSON file atomically.

    The data is written to a temporary file next to the target and then
    moved over it, so a crash never leaves a half-written config behind.

    Args:
        path: Config file location
        config: Config to persist
    """
    path = Path(path)
    directory = path.parent
    directory.mkdir(parents=True, exist_ok=True)

    fd, tmp_name = tempfile.mkstemp(
        prefix=f".{path.name}.", suffix=".tmp", dir=directory
    )
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as handle:
            handle.write(config.model_dump_json(indent=2))
            handle.write("\n")
        os.replace(tmp_name, path)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise

    logger.info("Saved config for %d pools to %s", len(config.pools), path)


__all__ = ["load_config", "save_config"]
