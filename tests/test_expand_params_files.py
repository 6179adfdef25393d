"""Tests for @params file expansion."""

from pathlib import Path

import pytest

from protoc_adapter.errors import ConfigError
from protoc_adapter.expand_params_files import expand_params_files


def test_plain_args_untouched() -> None:
    """Verify that arguments without @ pass through."""
    assert expand_params_files(["--protoc", "protoc"]) == ["--protoc", "protoc"]


def test_params_file_expanded(tmp_path: Path) -> None:
    """Verify that each line of a params file becomes one argument."""
    params = tmp_path / "args.params"
    params.write_text("--expected\nout/a b.pb.go\n--plugin=protoc-gen-go\n")
    args = expand_params_files(["--protoc", "protoc", f"@{params}", "x.proto"])
    assert args == [
        "--protoc",
        "protoc",
        "--expected",
        "out/a b.pb.go",
        "--plugin=protoc-gen-go",
        "x.proto",
    ]


def test_quoted_and_crlf_lines(tmp_path: Path) -> None:
    """Verify that shell-quoted lines and CRLF endings are handled."""
    params = tmp_path / "args.params"
    params.write_bytes(b"'--option=paths=source relative'\r\n--include\r\n.\r\n")
    assert expand_params_files([f"@{params}"]) == [
        "--option=paths=source relative",
        "--include",
        ".",
    ]


def test_escaped_at() -> None:
    """Verify that @@ yields a literal @ argument."""
    assert expand_params_files(["@@scope/pkg"]) == ["@scope/pkg"]


def test_missing_params_file(tmp_path: Path) -> None:
    """Verify that an unreadable params file is a configuration error."""
    with pytest.raises(ConfigError):
        expand_params_files([f"@{tmp_path / 'missing.params'}"])
