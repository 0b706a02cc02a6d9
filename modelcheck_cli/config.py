"""Configuration defaults and TOML loading for ModelCheck."""

from __future__ import annotations

import logging
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional

import toml

from .errors import ConfigError

logger = logging.getLogger(__name__)

# Manifest item classification
MODEL_SUFFIX = ".uml"
DIAGRAM_SUFFIX = "diagram"
FOLDER_ITEM = "Folder"

# Document vocabulary
MONIKER_SUFFIX = "Moniker"
ELEMENT_DEFINITION_TAG = "elementDefinition"
ID_ATTRIBUTE = "Id"
NAME_ATTRIBUTE = "name"

# Alias bound to each document's own root namespace when querying
NAMESPACE_ALIAS = "ns"

CONFIG_FILENAME = "modelcheck.toml"
CONFIG_SECTION = "modelcheck"


@dataclass(frozen=True)
class CheckConfig:
    """Tunable settings threaded through a single check run."""

    model_suffix: str = MODEL_SUFFIX
    diagram_suffix: str = DIAGRAM_SUFFIX
    moniker_suffix: str = MONIKER_SUFFIX
    wait: bool = False


def _coerce(values: Dict[str, Any], source: Path) -> CheckConfig:
    known = {f.name: f for f in fields(CheckConfig)}
    kwargs: Dict[str, Any] = {}
    for key, value in values.items():
        if key not in known:
            logger.warning("Ignoring unknown config key '%s' in %s", key, source)
            continue
        expected = bool if key == "wait" else str
        if not isinstance(value, expected):
            raise ConfigError(
                f"{source}: '{key}' must be a {expected.__name__}, got {type(value).__name__}"
            )
        if expected is str and not value:
            raise ConfigError(f"{source}: '{key}' must not be empty")
        kwargs[key] = value
    return CheckConfig(**kwargs)


def load_config(path: Optional[Path] = None, search_dir: Optional[Path] = None) -> CheckConfig:
    """Load settings from a ``modelcheck.toml`` file.

    Args:
        path: Explicit config file. Must exist when given.
        search_dir: Directory probed for ``modelcheck.toml`` when no explicit
            path is given (normally the manifest's directory).

    Returns:
        The loaded configuration, or defaults when no file applies.
    """
    if path is None:
        if search_dir is None:
            return CheckConfig()
        candidate = search_dir / CONFIG_FILENAME
        if not candidate.is_file():
            return CheckConfig()
        path = candidate
    elif not path.is_file():
        raise ConfigError(f"Config file not found: {path}")

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = toml.load(f)
    except (OSError, toml.TomlDecodeError) as exc:
        raise ConfigError(f"Could not read config {path}: {exc}") from exc

    section = data.get(CONFIG_SECTION, {})
    if not isinstance(section, dict):
        raise ConfigError(f"{path}: [{CONFIG_SECTION}] must be a table")

    logger.debug("Loaded config from %s", path)
    return _coerce(section, path)
