"""Logic for walking the compiler's scratch output and matching it to expected paths."""

import logging
import os
from pathlib import Path

from protoc_adapter.errors import ReconcileError
from protoc_adapter.output_registry import OutputRegistry

logger = logging.getLogger(__name__)


def _raise_walk_error(err: OSError) -> None:
    msg = f"Cannot read scratch directory {err.filename}: {err.strerror}"
    raise ReconcileError(msg) from err


def walk_scratch_tree(
    registry: OutputRegistry,
    scratch_root: Path,
    out_root: Path,
    source_suffixes: tuple[str, ...] = (".go",),
) -> int:
    """Walk the scratch tree once, mirroring directories and matching files.

    Every directory is recreated under ``out_root`` before the files inside it
    are visited. Files without a generated-source suffix are skipped. Returns the
    number of generated-source files seen.
    """
    seen = 0
    for dirpath, dirnames, filenames in os.walk(scratch_root, onerror=_raise_walk_error):
        dirnames.sort()
        current = Path(dirpath)
        rel_dir = current.relative_to(scratch_root)

        if rel_dir != Path("."):
            try:
                (out_root / rel_dir).mkdir(parents=True, exist_ok=True)
            except OSError as e:
                msg = f"Cannot create output directory {rel_dir.as_posix()}: {e}"
                raise ReconcileError(msg) from e

        for name in sorted(filenames):
            if not name.endswith(source_suffixes):
                continue
            file_path = current / name
            if not file_path.is_file():
                continue
            rel_path = (rel_dir / name).as_posix()
            record = registry.match(rel_path, file_path)
            if record is not None:
                logger.debug("%s -> %s (%s)", rel_path, record.path, record.state.value)
            seen += 1

    return seen
