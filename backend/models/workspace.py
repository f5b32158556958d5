"""Workspace (chat session) data models"""

from __future__ import annotations

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, Field


class MessageKind(str, Enum):
    USER = "user"
    AI = "ai"
    ERROR = "error"
    WARNING = "warning"
    SUCCESS = "success"


class ChatMessage(BaseModel):
    """One entry of the conversation log"""

    kind: MessageKind
    text: str
    timestamp: datetime = Field(default_factory=datetime.now)


class WorkspaceGenerateRequest(BaseModel):
    """Request to generate files inside a workspace"""

    prompt: str | None = None
    workspace_id: str | None = None
    model: str | None = None


class WorkspaceState(BaseModel):
    workspace_id: str
    messages: list[ChatMessage] = []
    files: dict[str, str] = {}
    is_processing: bool = False


class WorkspaceGenerateResponse(BaseModel):
    """Result of one workspace generation"""

    workspace_id: str
    text: str
    new_files: dict[str, str] = {}
    state: WorkspaceState
