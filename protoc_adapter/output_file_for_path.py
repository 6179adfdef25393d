"""Utility for determining where an expected output is written."""

from pathlib import Path

from protoc_adapter.errors import ReconcileError


def output_file_for_path(out_root: Path, rel_path: str) -> Path:
    """Determine the output file for an expected path, creating its parent."""
    target = (out_root / rel_path).resolve()
    base = out_root.resolve()
    try:
        target.relative_to(base)
    except ValueError as e:
        msg = f"Expected output {rel_path} resolves outside {out_root}"
        raise ReconcileError(msg) from e

    try:
        target.parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        msg = f"Cannot create directory for {rel_path}: {e}"
        raise ReconcileError(msg) from e
    return target
