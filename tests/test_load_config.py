"""Tests for configuration loading and merging."""

from pathlib import Path

import pytest
import yaml

from protoc_adapter.deep_merge import deep_merge
from protoc_adapter.errors import ConfigError
from protoc_adapter.load_config import DEFAULT_CONFIG, load_config


def test_deep_merge_nested() -> None:
    """Verify recursive merging of dictionaries."""
    base = {"placeholder": {"build_tag": "ignore", "package": "ignore"}}
    update = {"placeholder": {"package": "empty"}}
    merged = deep_merge(base, update)
    assert merged == {"placeholder": {"build_tag": "ignore", "package": "empty"}}


def test_deep_merge_arrays_replace() -> None:
    """Verify that arrays are replaced by default."""
    merged = deep_merge({"arr": [1, 2]}, {"arr": [3, 4]})
    assert merged == {"arr": [3, 4]}


def test_deep_merge_source_suffixes_replace() -> None:
    """Verify that the source suffix list can drop the default."""
    merged = deep_merge({"source_suffixes": [".go"]}, {"source_suffixes": [".h"]})
    assert merged["source_suffixes"] == [".h"]


def test_load_config_defaults() -> None:
    """Verify that default config is loaded when no path is provided."""
    config = load_config(None)
    assert config == DEFAULT_CONFIG
    config["placeholder"]["package"] = "changed"
    assert DEFAULT_CONFIG["placeholder"]["package"] == "ignore"


def test_load_config_with_file(tmp_path: Path) -> None:
    """Verify that user config correctly overrides defaults."""
    config_file = tmp_path / "config.yml"
    config_data = {
        "placeholder": {"build_tag": "never"},
        "source_suffixes": [".pb.h"],
        "scratch_prefix": "proto_scratch",
    }
    config_file.write_text(yaml.dump(config_data))

    loaded = load_config(str(config_file))
    assert loaded["placeholder"] == {"build_tag": "never", "package": "ignore"}
    assert loaded["source_suffixes"] == [".pb.h"]
    assert loaded["scratch_prefix"] == "proto_scratch"


def test_load_config_missing_file(tmp_path: Path) -> None:
    """Verify that a missing config file falls back to defaults."""
    assert load_config(str(tmp_path / "nope.yml")) == DEFAULT_CONFIG


def test_load_config_malformed(tmp_path: Path) -> None:
    """Verify that unparsable or non-mapping YAML is rejected."""
    bad = tmp_path / "bad.yml"
    bad.write_text("placeholder: [unclosed")
    with pytest.raises(ConfigError):
        load_config(str(bad))

    listy = tmp_path / "list.yml"
    listy.write_text("- a\n- b\n")
    with pytest.raises(ConfigError):
        load_config(str(listy))
