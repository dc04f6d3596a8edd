"""Diff-related data models"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class DiffType(str, Enum):
    """Tag carried by alignment groups, diff lines and inline segments"""

    ADDED = "added"
    REMOVED = "removed"
    UNCHANGED = "unchanged"


class DiffMode(str, Enum):
    """How raw text is split into comparable units"""

    LINES = "lines"
    SENTENCES = "sentences"


class InlineGranularity(str, Enum):
    """Token size used for the inline pass over a replaced pair"""

    WORDS = "words"
    SENTENCES = "sentences"


class DiffOptions(BaseModel):
    """Tunables for the reconciliation step"""

    model_config = ConfigDict(frozen=True)

    # Pairs must score strictly above this to be rendered inline
    similarity_threshold: float = Field(default=0.6, ge=0.0, le=1.0)
    inline_granularity: InlineGranularity = InlineGranularity.WORDS
    # Longer units skip the quadratic similarity pass entirely
    max_inline_unit_length: int = Field(default=1000, ge=1)


class AlignmentGroup(BaseModel):
    """A maximal run of same-tagged units from the array diff"""

    model_config = ConfigDict(frozen=True)

    type: DiffType
    units: list[str]


class InlineSegment(BaseModel):
    """One span of an inline diff"""

    model_config = ConfigDict(frozen=True)

    type: DiffType
    value: str


class DiffLine(BaseModel):
    """A single renderable row of a diff"""

    model_config = ConfigDict(frozen=True)

    type: DiffType
    content: str  # Markup when is_inline_diff is set, plain text otherwise
    old_line_number: int | None = None  # 1-indexed
    new_line_number: int | None = None  # 1-indexed
    is_inline_diff: bool = False
    segments: list[InlineSegment] = []


class DiffStats(BaseModel):
    """Aggregate counts for a diff"""

    model_config = ConfigDict(frozen=True)

    additions: int = 0
    deletions: int = 0
    unchanged: int = 0


class DiffResult(BaseModel):
    """Complete diff result for a pair of texts"""

    model_config = ConfigDict(frozen=True)

    lines: list[DiffLine] = []
    stats: DiffStats = DiffStats()


class DiffHunk(BaseModel):
    """A single change hunk in a unified diff"""

    start_line: int  # 1-indexed
    end_line: int
    original_content: str
    new_content: str
    change_type: str  # "add", "modify", "delete"


class UnifiedDiff(BaseModel):
    """Unified diff for a pair of texts"""

    old_file_name: str
    new_file_name: str
    language: str
    hunks: list[DiffHunk]
    unified_diff: str  # Standard unified diff format
