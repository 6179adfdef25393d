"""Orchestration logic for one protoc invocation and its output reconciliation."""

import argparse
import logging
import tempfile
from pathlib import Path

from protoc_adapter.build_protoc_args import build_protoc_args
from protoc_adapter.errors import ReconcileError
from protoc_adapter.load_config import load_config
from protoc_adapter.long_path import abs_path
from protoc_adapter.output_registry import OutputRegistry
from protoc_adapter.placeholder_generator import PlaceholderGenerator
from protoc_adapter.reconcile import reconcile_registry
from protoc_adapter.reconcile_report import ReconcileReport
from protoc_adapter.run_protoc import run_protoc

logger = logging.getLogger(__name__)


def run_compile(args: argparse.Namespace) -> int:
    """Run protoc into a scratch directory and place the declared outputs."""
    config = load_config(args.config)
    source_suffixes = tuple(config["source_suffixes"])

    # Raw long-path form is needed on Windows for deep output trees
    out_root = Path(abs_path(args.out_path))
    try:
        out_root.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        msg = f"Cannot create output root {out_root}: {e}"
        raise ReconcileError(msg) from e

    placeholders = PlaceholderGenerator(
        str(out_root),
        build_tag=config["placeholder"]["build_tag"],
        package=config["placeholder"]["package"],
    )

    with tempfile.TemporaryDirectory(prefix=config["scratch_prefix"]) as tmp:
        scratch_root = abs_path(tmp)
        protoc_args = build_protoc_args(
            plugin=args.plugin,
            scratch_dir=scratch_root,
            options=args.option,
            imports=args.import_,
            descriptor_sets=args.descriptor_set,
            includes=args.include,
            sources=args.sources,
            prefix_args=args.prefix_arg,
        )
        run_protoc(args.protoc, protoc_args)

        registry = OutputRegistry(args.expected)
        try:
            reconcile_registry(
                registry,
                Path(scratch_root),
                out_root,
                args.importpath,
                source_suffixes=source_suffixes,
                placeholders=placeholders,
            )
        except ReconcileError:
            if args.report:
                try:
                    _write_report(registry, args.importpath, args.report)
                except ReconcileError as report_error:
                    logger.error("%s", report_error)
            raise

        if args.report:
            _write_report(registry, args.importpath, args.report)

    return 0


def _write_report(registry: OutputRegistry, importpath: str, path: str) -> None:
    """Write the JSON reconciliation report."""
    report = ReconcileReport(importpath)
    report.add_records(registry.expected_records())
    try:
        report.generate_report(path)
    except OSError as e:
        msg = f"Cannot write reconciliation report {path}: {e}"
        raise ReconcileError(msg) from e
    logger.info("Wrote reconciliation report to %s", path)
