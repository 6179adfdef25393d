"""Registry of expected and discovered output files."""

import logging
from pathlib import Path, PurePath

from protoc_adapter.file_record import FileRecord
from protoc_adapter.match_state import MatchState

logger = logging.getLogger(__name__)


class OutputRegistry:
    """Tracks every output path by full path and by basename.

    The basename index only ever holds declared (expected) records, and basename
    uniqueness is fixed when the registry is built. Discovered files are matched
    against it one at a time while the scratch tree is walked.
    """

    def __init__(self, expected_paths: list[str]) -> None:
        """Build the registry from the declared expected paths."""
        self.records: dict[str, FileRecord] = {}
        self.by_base: dict[str, list[FileRecord]] = {}

        for path in expected_paths:
            if path in self.records:
                logger.debug("Ignoring duplicate expected path: %s", path)
                continue
            record = FileRecord.for_path(path, expected=True)
            self.records[path] = record
            self.by_base.setdefault(record.basename, []).append(record)

        for records in self.by_base.values():
            if len(records) > 1:
                for record in records:
                    record.unique = False

    def match(self, rel_path: str, source: Path) -> FileRecord | None:
        """Match a discovered scratch file, returning the expected record it feeds.

        Exact path matches win over basename matches, regardless of the order in
        which files are discovered.
        """
        exact = self.records.get(rel_path)
        if exact is not None and exact.expected:
            exact.state = MatchState.MATCHED_EXACT
            exact.source = source
            return exact

        self.records.setdefault(rel_path, FileRecord.for_path(rel_path, expected=False))

        candidates = self.by_base.get(PurePath(rel_path).name, [])
        if len(candidates) != 1 or not candidates[0].unique:
            # Unwanted output, or a basename that several declared paths share
            return None

        target = candidates[0]
        if target.state is MatchState.UNMATCHED:
            target.state = MatchState.MATCHED_FALLBACK
            target.source = source
            return target
        if target.state is MatchState.MATCHED_FALLBACK:
            logger.debug(
                "Second candidate %s for %s (already bound to %s)",
                rel_path,
                target.path,
                target.source,
            )
            target.state = MatchState.AMBIGUOUS
            target.source = None
        return None

    def expected_records(self) -> list[FileRecord]:
        """Return the declared records in stable path order."""
        return sorted(
            (r for r in self.records.values() if r.expected), key=lambda r: r.path
        )
