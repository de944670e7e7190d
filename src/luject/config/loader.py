"""Load luject.yaml, expanding ${VAR} / ${VAR:default} references."""

from __future__ import annotations

import os
import re
from pathlib import Path
from typing import Any

import yaml

from luject.config.defaults import CONFIG_FILE_NAMES, CONFIG_SEARCH_PATHS
from luject.config.models import LujectConfig
from luject.errors import InputNotFoundError
from luject.utils.logging import get_logger

log = get_logger(__name__)

_ENV_VAR_PATTERN = re.compile(r"\$\{(\w+)(?::([^}]*))?\}")


def _interpolate_env(value: str) -> str:
    """Expand ${VAR} or ${VAR:default}; unset variables without a default become ""."""
    return _ENV_VAR_PATTERN.sub(
        lambda m: os.environ.get(m.group(1), m.group(2) if m.group(2) is not None else ""),
        value,
    )


def _expand(node: Any) -> Any:
    if isinstance(node, str):
        return _interpolate_env(node)
    if isinstance(node, dict):
        return {key: _expand(value) for key, value in node.items()}
    if isinstance(node, list):
        return [_expand(item) for item in node]
    return node


def find_config_file(explicit_path: str | Path | None = None) -> Path | None:
    """Return the config file to load.

    An explicit path must exist. Without one, the search paths are tried in
    order and ``None`` means "use the defaults".
    """
    if explicit_path is not None:
        path = Path(explicit_path).expanduser()
        if not path.is_file():
            raise InputNotFoundError(path, "config")
        return path

    candidates = (directory / name for directory in CONFIG_SEARCH_PATHS for name in CONFIG_FILE_NAMES)
    return next((c for c in candidates if c.is_file()), None)


def load_config(path: str | Path | None = None) -> LujectConfig:
    config_path = find_config_file(path)
    if config_path is None:
        log.debug("config_defaults")
        return LujectConfig()

    raw = yaml.safe_load(config_path.read_text()) or {}
    log.debug("config_loaded", path=str(config_path))
    return LujectConfig.model_validate(_expand(raw))
