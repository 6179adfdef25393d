"""Logic for writing reconciled outputs to the final output root."""

import logging
from pathlib import Path

from protoc_adapter.errors import AmbiguousOutputError, ReconcileError
from protoc_adapter.match_state import MatchState
from protoc_adapter.output_file_for_path import output_file_for_path
from protoc_adapter.output_registry import OutputRegistry
from protoc_adapter.placeholder_generator import PlaceholderGenerator

logger = logging.getLogger(__name__)


def emit_outputs(
    registry: OutputRegistry,
    out_root: Path,
    importpath: str,
    placeholders: PlaceholderGenerator,
) -> dict[MatchState, int]:
    """Write every expected output, or raise once with all ambiguous paths.

    Outputs that can be written are written even when others are ambiguous;
    filesystem errors abort immediately and leave earlier writes in place.
    """
    counts: dict[MatchState, int] = {}
    ambiguous: list[str] = []

    for record in registry.expected_records():
        counts[record.state] = counts.get(record.state, 0) + 1

        if record.state is MatchState.AMBIGUOUS:
            ambiguous.append(record.path)
        elif record.resolved:
            _copy_source(record.source, out_root, record.path)
        else:
            logger.debug("No output produced for %s, writing placeholder", record.path)
            placeholders.generate_placeholder(record.path)

    if ambiguous:
        raise AmbiguousOutputError(ambiguous, importpath)
    return counts


def _copy_source(source: Path | None, out_root: Path, rel_path: str) -> None:
    """Copy the produced bytes verbatim to the expected location."""
    if source is None:
        msg = f"Resolved output {rel_path} has no source file"
        raise ReconcileError(msg)
    target = output_file_for_path(out_root, rel_path)
    try:
        target.write_bytes(source.read_bytes())
    except OSError as e:
        msg = f"Cannot copy {source} to {rel_path}: {e}"
        raise ReconcileError(msg) from e
