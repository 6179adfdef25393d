"""Data model for a single tracked output path."""

from dataclasses import dataclass
from pathlib import Path, PurePath

from protoc_adapter.match_state import MatchState


@dataclass
class FileRecord:
    """Represents one relative path seen during a run (declared or discovered)."""

    path: str  # relative path, registry key
    basename: str
    expected: bool
    unique: bool = True  # basename not shared by another declared path
    state: MatchState = MatchState.UNMATCHED
    source: Path | None = None  # scratch file supplying the bytes

    @classmethod
    def for_path(cls, path: str, *, expected: bool) -> "FileRecord":
        """Create a record, deriving the basename from the path."""
        return cls(path=path, basename=PurePath(path).name, expected=expected)

    @property
    def resolved(self) -> bool:
        """Return True if the record has a source file to copy."""
        return self.state in (MatchState.MATCHED_EXACT, MatchState.MATCHED_FALLBACK)
