"""Models module - Pydantic data models"""

from .diff import (
    AlignmentGroup,
    DiffHunk,
    DiffLine,
    DiffMode,
    DiffOptions,
    DiffResult,
    DiffStats,
    DiffType,
    InlineGranularity,
    InlineSegment,
    UnifiedDiff,
)
from .compare import (
    CompareRequest,
    CompareResponse,
    DiffStreamEvent,
    LanguageOption,
    UnifiedDiffRequest,
)

__all__ = [
    # Diff models
    "AlignmentGroup",
    "DiffHunk",
    "DiffLine",
    "DiffMode",
    "DiffOptions",
    "DiffResult",
    "DiffStats",
    "DiffType",
    "InlineGranularity",
    "InlineSegment",
    "UnifiedDiff",
    # Compare API models
    "CompareRequest",
    "CompareResponse",
    "DiffStreamEvent",
    "LanguageOption",
    "UnifiedDiffRequest",
]
