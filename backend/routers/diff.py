"""Diff API endpoints"""

from __future__ import annotations

from fastapi import APIRouter, HTTPException
from sse_starlette.sse import EventSourceResponse

from models.compare import (
    CompareRequest,
    CompareResponse,
    DiffStreamEvent,
    LanguageOption,
    UnifiedDiffRequest,
)
from models.diff import DiffResult, UnifiedDiff
from services.config_manager import ConfigManager
from services.diff_generator import DiffGenerator
from services.languages import get_language, language_options

router = APIRouter()


def resolve_language(language: str | None) -> str:
    """Validate the requested language, defaulting to the configured one"""
    if language is None:
        language = ConfigManager.get_instance().get("language", {}).get("default", "plaintext")
    try:
        get_language(language)
    except KeyError as e:
        raise HTTPException(status_code=400, detail=str(e.args[0]))
    return language


def describe(original_text: str, modified_text: str) -> tuple[str, str]:
    """Status and message shown above the result"""
    if original_text == "" and modified_text == "":
        return "empty", "Enter text in both fields to begin."
    if original_text == modified_text:
        return "identical", "The content in both fields is identical."
    return "changed", "Differences found."


def run_compare(request: CompareRequest) -> DiffResult:
    """Compute a diff with the configured options"""
    config_manager = ConfigManager.get_instance()
    generator = DiffGenerator(config_manager.get_diff_options())
    mode = request.mode or config_manager.get_default_mode()
    return generator.compute_diff(request.original_text, request.modified_text, mode)


@router.post("/compare", response_model=CompareResponse)
async def compare(request: CompareRequest) -> CompareResponse:
    """Compare two texts and return every diff line with stats"""
    language = resolve_language(request.language)
    status, message = describe(request.original_text, request.modified_text)

    return CompareResponse(
        status=status,
        message=message,
        language=language,
        result=run_compare(request),
    )


@router.post("/stream")
async def compare_stream(request: CompareRequest):
    """Compare two texts and stream the diff lines (SSE)"""
    resolve_language(request.language)

    async def event_generator():
        try:
            result = run_compare(request)

            for line in result.lines:
                event = DiffStreamEvent(type="line", line=line)
                yield {"event": "message", "data": event.model_dump_json()}

            event = DiffStreamEvent(type="done", stats=result.stats, done=True)
            yield {"event": "message", "data": event.model_dump_json()}

        except Exception as e:
            print(f"[DiffRouter] Stream failed: {e}")
            event = DiffStreamEvent(type="error", error=str(e))
            yield {"event": "message", "data": event.model_dump_json()}

    return EventSourceResponse(event_generator())


@router.post("/unified", response_model=UnifiedDiff)
async def unified(request: UnifiedDiffRequest) -> UnifiedDiff:
    """Unified diff export with language-specific file names"""
    language = resolve_language(request.language)
    generator = DiffGenerator(ConfigManager.get_instance().get_diff_options())
    return generator.generate_unified_diff(request.original_text, request.modified_text, language)


@router.get("/languages", response_model=list[LanguageOption])
async def languages() -> list[LanguageOption]:
    """Languages offered for syntax colouring"""
    return [LanguageOption(**option) for option in language_options()]
