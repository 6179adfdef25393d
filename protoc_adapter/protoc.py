"""Run protoc with a Go code generator and capture the declared outputs.

The build system declares every output file up front. protoc writes into a
scratch directory instead, and the files found there are moved into place by
exact path or, failing that, by unique basename. Declared outputs the plugin
did not produce are replaced by build-excluded placeholder files.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import TYPE_CHECKING

from protoc_adapter.errors import AdapterError
from protoc_adapter.expand_params_files import expand_params_files
from protoc_adapter.run_compile import run_compile

if TYPE_CHECKING:
    from collections.abc import Sequence

logger = logging.getLogger("protoc_adapter")


def build_parser() -> argparse.ArgumentParser:
    """Create the command line parser."""
    ap = argparse.ArgumentParser(
        prog="protoc-adapter",
        description="Invoke protoc and reconcile its output with the expected files.",
    )
    ap.add_argument("--protoc", required=True, help="The path to the real protoc.")
    ap.add_argument(
        "--out_path", required=True, help="The base output path to write to."
    )
    ap.add_argument("--plugin", required=True, help="The go plugin to use.")
    ap.add_argument(
        "--importpath",
        default="",
        help="The importpath for the generated sources.",
    )
    ap.add_argument(
        "--option", action="append", default=[], help="The plugin options."
    )
    ap.add_argument(
        "--descriptor_set",
        action="append",
        default=[],
        help="The descriptor set to read.",
    )
    ap.add_argument(
        "--include",
        action="append",
        default=[],
        help="An include directory passed to protoc as -I.",
    )
    ap.add_argument(
        "--expected",
        action="append",
        default=[],
        help="An expected output file, relative to --out_path.",
    )
    ap.add_argument(
        "--import",
        dest="import_",
        action="append",
        default=[],
        help="Map a proto file to an import path.",
    )
    ap.add_argument(
        "--prefix-arg",
        dest="prefix_arg",
        action="append",
        default=[],
        help=(
            "Args to pass to protoc before normal options "
            "(use --prefix-arg=VALUE)."
        ),
    )
    ap.add_argument("--config", help="Path to a YAML configuration file.")
    ap.add_argument(
        "--report", help="Write a JSON reconciliation report to this path."
    )
    ap.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Log progress (-v) or matching details (-vv).",
    )
    ap.add_argument("sources", nargs="*", help="The proto sources to compile.")
    return ap


def main(argv: Sequence[str] | None = None) -> int:
    """Run the adapter and return a process exit code."""
    raw_args = list(sys.argv[1:] if argv is None else argv)
    try:
        args = build_parser().parse_args(expand_params_files(raw_args))
    except AdapterError as e:
        print(f"protoc-adapter: {e}", file=sys.stderr)
        return 1

    level = logging.WARNING
    if args.verbose == 1:
        level = logging.INFO
    elif args.verbose > 1:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    try:
        return run_compile(args)
    except AdapterError as e:
        logger.error("%s", e)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
