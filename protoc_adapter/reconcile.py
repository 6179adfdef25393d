"""Reconcile a compiler's scratch output against the declared expected outputs."""

import logging
from pathlib import Path

from protoc_adapter.emit_outputs import emit_outputs
from protoc_adapter.output_registry import OutputRegistry
from protoc_adapter.placeholder_generator import PlaceholderGenerator
from protoc_adapter.walk_scratch_tree import walk_scratch_tree

logger = logging.getLogger(__name__)


def reconcile(
    expected_paths: list[str],
    scratch_root: Path,
    out_root: Path,
    importpath: str,
    *,
    source_suffixes: tuple[str, ...] = (".go",),
    placeholders: PlaceholderGenerator | None = None,
) -> OutputRegistry:
    """Place a file at every expected path or raise a single aggregated error."""
    registry = OutputRegistry(expected_paths)
    reconcile_registry(
        registry,
        scratch_root,
        out_root,
        importpath,
        source_suffixes=source_suffixes,
        placeholders=placeholders,
    )
    return registry


def reconcile_registry(
    registry: OutputRegistry,
    scratch_root: Path,
    out_root: Path,
    importpath: str,
    *,
    source_suffixes: tuple[str, ...] = (".go",),
    placeholders: PlaceholderGenerator | None = None,
) -> None:
    """Walk the scratch tree into ``registry`` and emit the final outputs.

    Callers that keep their own registry can still inspect record states after
    an ambiguity failure.
    """
    if placeholders is None:
        placeholders = PlaceholderGenerator(str(out_root))

    seen = walk_scratch_tree(registry, scratch_root, out_root, source_suffixes)
    logger.debug(
        "Scanned %d generated files for %d expected outputs",
        seen,
        len(registry.expected_records()),
    )

    counts = emit_outputs(registry, out_root, importpath, placeholders)
    summary = ", ".join(
        f"{state.value}={n}"
        for state, n in sorted(counts.items(), key=lambda kv: kv[0].value)
    )
    logger.info("Reconciled %s: %s", importpath or "<no importpath>", summary)
