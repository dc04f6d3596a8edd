"""Configuration API endpoints"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field

from models.diff import DiffMode, InlineGranularity
from services.config_manager import ConfigManager
from services.languages import get_language

router = APIRouter()


class DiffSettings(BaseModel):
    """Diff settings as stored in the config file"""

    similarityThreshold: float
    inlineGranularity: InlineGranularity
    maxInlineUnitLength: int
    defaultMode: DiffMode


class ConfigUpdateRequest(BaseModel):
    """Request to update configuration"""

    similarityThreshold: float | None = Field(default=None, ge=0.0, le=1.0)
    inlineGranularity: InlineGranularity | None = None
    maxInlineUnitLength: int | None = Field(default=None, ge=1)
    defaultMode: DiffMode | None = None
    defaultLanguage: str | None = None


class ConfigResponse(BaseModel):
    """Configuration response"""

    diff: DiffSettings
    defaultLanguage: str


def build_response(config: dict[str, Any]) -> ConfigResponse:
    config_manager = ConfigManager.get_instance()
    options = config_manager.get_diff_options()

    return ConfigResponse(
        diff=DiffSettings(
            similarityThreshold=options.similarity_threshold,
            inlineGranularity=options.inline_granularity,
            maxInlineUnitLength=options.max_inline_unit_length,
            defaultMode=config_manager.get_default_mode(),
        ),
        defaultLanguage=config.get("language", {}).get("default", "plaintext"),
    )


@router.get("", response_model=ConfigResponse)
async def get_config() -> ConfigResponse:
    """Get current configuration"""
    config = ConfigManager.get_instance().get_config()
    return build_response(config)


@router.put("", response_model=ConfigResponse)
async def update_config(request: ConfigUpdateRequest) -> ConfigResponse:
    """Update configuration"""
    config_manager = ConfigManager.get_instance()
    current_config = config_manager.get_config()

    # Update only provided fields
    updates = request.model_dump(exclude_none=True, mode="json")
    default_language = updates.pop("defaultLanguage", None)

    if default_language is not None:
        try:
            get_language(default_language)
        except KeyError as e:
            raise HTTPException(status_code=400, detail=str(e.args[0]))
        current_config["language"] = {
            **current_config.get("language", {}),
            "default": default_language,
        }

    if updates:
        current_config["diff"] = {**current_config.get("diff", {}), **updates}

    try:
        config_manager.save_config(current_config)
    except RuntimeError as e:
        print(f"[ConfigRouter] {e}")
        raise HTTPException(status_code=500, detail=str(e))

    return build_response(config_manager.get_config())
