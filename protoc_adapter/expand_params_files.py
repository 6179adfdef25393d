"""Utility for expanding @params files on the command line."""

import shlex
from pathlib import Path

from protoc_adapter.errors import ConfigError


def expand_params_files(args: list[str]) -> list[str]:
    """Replace each ``@file`` argument with the arguments listed in that file.

    Files hold one argument per line. ``@@x`` stands for a literal ``@x``.
    """
    expanded: list[str] = []
    for arg in args:
        if arg.startswith("@@"):
            expanded.append(arg[1:])
        elif arg.startswith("@"):
            expanded.extend(_read_params_file(Path(arg[1:])))
        else:
            expanded.append(arg)
    return expanded


def _read_params_file(path: Path) -> list[str]:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        msg = f"Cannot read params file {path}: {e}"
        raise ConfigError(msg) from e

    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    out = []
    for line in lines:
        line = line.removesuffix("\r")
        if line.startswith("'"):
            # shell-quoted by the build tool
            out.extend(shlex.split(line))
        else:
            out.append(line)
    return out
