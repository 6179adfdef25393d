"""Resolution states for tracked output files."""

from enum import Enum


class MatchState(Enum):
    """How an expected output was (or was not) satisfied by the scratch tree."""

    UNMATCHED = "unmatched"
    MATCHED_EXACT = "matched_exact"
    MATCHED_FALLBACK = "matched_fallback"
    AMBIGUOUS = "ambiguous"
