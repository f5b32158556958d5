"""Models module - Pydantic data models"""

from .files import CodeSegment, ExtractedFile, ExtractRequest, ExtractResponse, PreviewRequest, ResolutionSource
from .generate import ErrorResponse, GenerateRequest, GenerateResponse
from .workspace import (
    ChatMessage,
    MessageKind,
    WorkspaceGenerateRequest,
    WorkspaceGenerateResponse,
    WorkspaceState,
)

__all__ = [
    # File models
    "CodeSegment",
    "ExtractedFile",
    "ExtractRequest",
    "ExtractResponse",
    "PreviewRequest",
    "ResolutionSource",
    # Relay models
    "ErrorResponse",
    "GenerateRequest",
    "GenerateResponse",
    # Workspace models
    "ChatMessage",
    "MessageKind",
    "WorkspaceGenerateRequest",
    "WorkspaceGenerateResponse",
    "WorkspaceState",
]
