"""Logic for generating reports on output reconciliation."""

import json
import time
from pathlib import Path
from typing import Any

from protoc_adapter.file_record import FileRecord


class ReconcileReport:
    """Collects and summarizes how each expected output was satisfied."""

    def __init__(self, importpath: str) -> None:
        """Initialize the report with the importpath being generated."""
        self.importpath = importpath
        self.records: list[FileRecord] = []
        self.start_time = time.time()

    def add_records(self, records: list[FileRecord]) -> None:
        """Add expected records to the report."""
        self.records.extend(records)

    def generate_report(self, path: str) -> None:
        """Write the summary report to a JSON file."""
        report = {
            "meta": {
                "timestamp": time.time(),
                "duration": time.time() - self.start_time,
                "importpath": self.importpath,
                "total_expected": len(self.records),
            },
            "results": [
                {
                    "path": r.path,
                    "state": r.state.value,
                    "source": str(r.source) if r.source is not None else None,
                }
                for r in self.records
            ],
            "stats": self._compute_stats(),
        }

        out = Path(path)
        out.parent.mkdir(parents=True, exist_ok=True)
        out.write_text(json.dumps(report, indent=2), encoding="utf-8")

    def _compute_stats(self) -> dict[str, Any]:
        state_counts: dict[str, int] = {}
        for r in self.records:
            state_counts[r.state.value] = state_counts.get(r.state.value, 0) + 1
        return {"state_counts": state_counts}
