"""Compare endpoint data models"""

from __future__ import annotations

from pydantic import BaseModel

from .diff import DiffLine, DiffMode, DiffResult, DiffStats


class CompareRequest(BaseModel):
    """Request to compare two texts"""

    original_text: str
    modified_text: str
    mode: DiffMode | None = None  # Falls back to the configured default
    language: str | None = None  # Only used by the renderer for syntax colouring


class CompareResponse(BaseModel):
    """Response for a comparison"""

    status: str  # "empty", "identical", "changed"
    message: str
    language: str
    result: DiffResult


class UnifiedDiffRequest(BaseModel):
    """Request for a unified diff"""

    original_text: str
    modified_text: str
    language: str | None = None


class LanguageOption(BaseModel):
    """Entry of the language dropdown"""

    value: str
    label: str
    extension: str


class DiffStreamEvent(BaseModel):
    """SSE stream event"""

    type: str  # "line", "done", "error"
    line: DiffLine | None = None
    stats: DiffStats | None = None
    done: bool = False
    error: str | None = None
