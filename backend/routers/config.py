"""Configuration API endpoints"""

from __future__ import annotations

import sys

from fastapi import APIRouter
from pydantic import BaseModel

from services.config_manager import ConfigManager

router = APIRouter()


class ConfigResponse(BaseModel):
    """Configuration response"""

    provider: str
    model: str
    temperature: float
    maxOutputTokens: int
    apiKey: str
    platform: str


def mask_key(key: str) -> str:
    if not key:
        return ""
    if len(key) <= 8:
        return "*" * len(key)
    return key[:4] + "*" * (len(key) - 8) + key[-4:]


@router.get("", response_model=ConfigResponse)
async def get_config() -> ConfigResponse:
    """Get current configuration with the API key masked"""
    config = ConfigManager.get_instance().get_config()
    gemini = config.get("gemini", {})

    return ConfigResponse(
        provider=config.get("provider", "gemini"),
        model=gemini.get("model", ""),
        temperature=gemini.get("temperature"),
        maxOutputTokens=gemini.get("maxOutputTokens"),
        apiKey=mask_key(gemini.get("apiKey", "")),
        platform=sys.platform,
    )
