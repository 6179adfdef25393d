"""Logic for loading and merging configuration files."""

import copy
import logging
from pathlib import Path
from typing import Any

import yaml

from protoc_adapter.deep_merge import deep_merge
from protoc_adapter.errors import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG: dict[str, Any] = {
    "source_suffixes": [".go"],
    "placeholder": {
        "build_tag": "ignore",
        "package": "ignore",
    },
    "scratch_prefix": "go_proto",
}


def load_config(path: str | None = None) -> dict[str, Any]:
    """Load configuration from a YAML file and merge it with defaults."""
    config = copy.deepcopy(DEFAULT_CONFIG)
    if not path:
        return config

    p = Path(path)
    if not p.exists():
        logger.warning("Config file %s not found, using defaults", path)
        return config

    try:
        user_config = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
    except (OSError, yaml.YAMLError) as e:
        msg = f"Cannot load config {path}: {e}"
        raise ConfigError(msg) from e
    if not isinstance(user_config, dict):
        msg = f"Config {path} must be a mapping, got {type(user_config).__name__}"
        raise ConfigError(msg)
    return deep_merge(config, user_config)
