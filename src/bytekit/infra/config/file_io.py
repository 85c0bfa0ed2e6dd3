from __future__ import annotations

import json
import logging
import tomllib
from pathlib import Path
from typing import Any

from bytekit.infra.paths import DEFAULT_CONFIG_FILE, SETTING_PATH

logger = logging.getLogger(__name__)

LOCAL_FILENAMES = ("settings.toml", "settings.json")


def _resolve_file_path(
    user_path: str | Path | None,
    local_filenames: tuple[str, ...],
    fallback_path: Path,
) -> Path | None:
    """
    Pick the settings file to load.

    Lookup order:
        1. ``user_path``, if given and it exists
        2. the first of ``local_filenames`` present in the working directory
        3. ``fallback_path`` in the user config directory

    Returns:
        The resolved path, or None when nothing matched.
    """
    if user_path:
        path = Path(user_path).expanduser().resolve()
        if path.is_file():
            return path
        logger.warning("Specified file not found: %s", path)

    for name in local_filenames:
        local_path = (Path.cwd() / name).resolve()
        if local_path.is_file():
            logger.debug("Using local file: %s", local_path)
            return local_path

    if fallback_path.is_file():
        return fallback_path.resolve()

    return None


def _load_by_extension(path: Path) -> dict[str, Any]:
    """
    Parse a ``.toml`` or ``.json`` settings file.

    Raises:
        ValueError: If the extension is unsupported, parsing fails, or the
            root element is not a table/object.
    """
    ext = path.suffix.lower()

    if ext == ".json":
        try:
            with path.open("r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise ValueError(f"Invalid JSON in {path}: {e}") from e

    elif ext == ".toml":
        try:
            with path.open("rb") as f:
                data = tomllib.load(f)
        except (OSError, tomllib.TOMLDecodeError) as e:
            raise ValueError(f"Invalid TOML in {path}: {e}") from e

    else:
        raise ValueError(f"Unsupported config file extension: {ext}")

    if not isinstance(data, dict):
        raise ValueError(f"Config root must be a dict, got {type(data)} in {path}")

    return data


def load_config(config_path: str | Path | None = None) -> dict[str, Any]:
    """
    Load settings from TOML or JSON.

    Resolution order:
        - Explicit ``config_path`` (if provided)
        - ``settings.toml`` or ``settings.json`` in the working directory
        - ``SETTING_PATH`` in the user config directory

    Raises:
        FileNotFoundError: If no settings file is found.
        ValueError: If the file cannot be parsed.
    """
    path = _resolve_file_path(
        user_path=config_path,
        local_filenames=LOCAL_FILENAMES,
        fallback_path=SETTING_PATH,
    )

    if not path:
        raise FileNotFoundError("No valid config file found.")

    logger.debug("Loading configuration from: %s", path)
    return _load_by_extension(path)


def copy_default_config(target: Path) -> None:
    """
    Write the bundled ``settings.sample.toml`` to ``target``.
    """
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_bytes(DEFAULT_CONFIG_FILE.read_bytes())
    logger.info("Default configuration written to: %s", target)


def save_config(
    config: dict[str, Any],
    output_path: str | Path = SETTING_PATH,
) -> None:
    """
    Save settings as JSON, by default to the user config directory.

    Raises:
        OSError: If writing to disk fails.
    """
    output = Path(output_path).expanduser().resolve()
    output.parent.mkdir(parents=True, exist_ok=True)

    try:
        with output.open("w", encoding="utf-8") as f:
            json.dump(config, f, indent=2, ensure_ascii=False)
    except OSError as e:
        logger.error("Failed to write config JSON '%s': %s", output, e)
        raise

    logger.info("Configuration saved to JSON: %s", output)
