"""Generated-file data models"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel


class ResolutionSource(str, Enum):
    """Which rule produced a segment's filename"""

    HINT = "hint"
    TAG = "tag"
    CONTENT = "content"
    FALLBACK = "fallback"


class CodeSegment(BaseModel):
    """Fenced code segment found in a model response"""

    language: str  # lower-cased, "" when untagged
    code: str
    file_hint: str | None = None  # Filename named in the first lines


class ExtractedFile(BaseModel):
    """A segment after filename resolution"""

    filename: str
    content: str
    language: str
    source: ResolutionSource


class ExtractRequest(BaseModel):
    text: str


class ExtractResponse(BaseModel):
    files: dict[str, str]
    details: list[ExtractedFile] = []


class PreviewRequest(BaseModel):
    files: dict[str, str] = {}
