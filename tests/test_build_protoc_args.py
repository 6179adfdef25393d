"""Tests for protoc command line construction."""

import os

from protoc_adapter.build_protoc_args import build_protoc_args, plugin_name
from protoc_adapter.long_path import WINDOWS_LONG_PATH_PREFIX, abs_path


def test_plugin_name() -> None:
    """Verify that the generator name is derived from the plugin binary."""
    assert plugin_name("/tools/protoc-gen-go") == "go"
    assert plugin_name("bin/protoc-gen-go_grpc.exe") == "go_grpc"
    assert plugin_name("custom") == "custom"


def test_full_command_line() -> None:
    """Verify argument order and formatting."""
    args = build_protoc_args(
        plugin="/tools/protoc-gen-go",
        scratch_dir="/tmp/go_proto123",
        options=["paths=source_relative"],
        imports=["a.proto=example.com/a"],
        descriptor_sets=["x.bin", "y.bin"],
        includes=[".", "third_party"],
        sources=["svc.proto"],
        prefix_args=["--experimental_allow_proto3_optional"],
        platform="linux",
    )
    assert args == [
        "--experimental_allow_proto3_optional",
        "--go_out=paths=source_relative,Ma.proto=example.com/a:/tmp/go_proto123",
        "--plugin",
        "protoc-gen-go=/tools/protoc-gen-go",
        "--descriptor_set_in",
        f"x.bin{os.pathsep}y.bin",
        "-I.",
        "-Ithird_party",
        "svc.proto",
    ]


def test_minimal_command_line() -> None:
    """Verify that optional sections are left out when empty."""
    args = build_protoc_args(
        plugin="protoc-gen-go",
        scratch_dir="/s",
        options=[],
        imports=[],
        descriptor_sets=[],
        includes=[],
        sources=["a.proto"],
        platform="linux",
    )
    assert args == ["--go_out=:/s", "--plugin", "protoc-gen-go=protoc-gen-go", "a.proto"]


def test_windows_plugin_path() -> None:
    """Verify that the plugin path uses long-path form on Windows."""
    args = build_protoc_args(
        plugin="protoc-gen-go.exe",
        scratch_dir="s",
        options=[],
        imports=[],
        descriptor_sets=[],
        includes=[],
        sources=[],
        platform="win32",
    )
    assert args[0] == "--go_out=:s"
    name, _, path = args[2].partition("=")
    assert name == "protoc-gen-go"
    assert path.startswith(WINDOWS_LONG_PATH_PREFIX)


def test_abs_path() -> None:
    """Verify absolute path handling per platform."""
    assert abs_path("rel", platform="linux") == os.path.abspath("rel")
    prefixed = abs_path("rel", platform="win32")
    assert prefixed.startswith(WINDOWS_LONG_PATH_PREFIX)
    assert abs_path(prefixed, platform="win32") == prefixed
