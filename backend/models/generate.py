"""Prompt relay data models"""

from __future__ import annotations

from pydantic import BaseModel


class GenerateRequest(BaseModel):
    """Request for a single relayed generation"""

    prompt: str | None = None
    model: str | None = None  # Overrides the configured Gemini model


class GenerateResponse(BaseModel):
    text: str


class ErrorResponse(BaseModel):
    error: str
    details: str | None = None
