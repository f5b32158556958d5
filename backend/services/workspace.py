"""
Workspace Service - Per-session conversation log and accumulated file set
"""

from __future__ import annotations

import logging
import uuid

from models.workspace import ChatMessage, MessageKind, WorkspaceState
from services.errors import GenerationInProgressError, PromptRequiredError, UpstreamError, WorkspaceNotFoundError
from services.file_extractor import extract_files_from_response
from services.llm_service import LLMService
from services.preview_builder import build_preview_html

logger = logging.getLogger(__name__)

NO_FILES_WARNING = "No files detected in the AI response. Showing raw response."


def build_website_prompt(prompt: str) -> str:
    """Wrap the user's request so the model answers with hinted code blocks"""
    return (
        "You are an expert web developer. Produce full website files "
        "(index.html, style.css, script.js) in separate code blocks with filename hints. "
        f"The user asked: {prompt}"
    )


class Workspace:
    """Conversation messages plus the files generated so far"""

    def __init__(self, workspace_id: str):
        self.workspace_id = workspace_id
        self.messages: list[ChatMessage] = []
        self.files: dict[str, str] = {}
        self.is_processing = False

    def add_message(self, kind: MessageKind, text: str) -> ChatMessage:
        message = ChatMessage(kind=kind, text=text)
        self.messages.append(message)
        return message

    def ingest_response(self, text: str) -> dict[str, str]:
        """Record a model response and merge the files it contains.

        Files accumulate across generations: a repeated filename replaces the
        earlier content but keeps its position. A response without fenced
        segments is surfaced as a warning followed by the raw text.
        """
        files = extract_files_from_response(text)
        if not files:
            self.add_message(MessageKind.WARNING, NO_FILES_WARNING)
            self.add_message(MessageKind.AI, text)
            return files

        self.add_message(MessageKind.AI, text)
        self.files.update(files)
        self.add_message(
            MessageKind.SUCCESS,
            f"Generated {len(files)} files: {', '.join(files)}",
        )
        return files

    async def generate(self, prompt: str | None, llm_service: LLMService, model: str | None = None) -> tuple[str, dict[str, str]]:
        """Relay a prompt for this workspace and ingest the answer"""
        prompt = (prompt or "").strip()
        if not prompt:
            raise PromptRequiredError()
        if self.is_processing:
            raise GenerationInProgressError()

        self.is_processing = True
        self.add_message(MessageKind.USER, prompt)
        try:
            try:
                text = await llm_service.generate_response(build_website_prompt(prompt), model)
            except Exception as e:
                logger.error("[Workspace] Generation failed for %s: %s", self.workspace_id, e)
                self.add_message(MessageKind.ERROR, f"Server error: {e}")
                raise UpstreamError(str(e)) from e
            return text, self.ingest_response(text)
        finally:
            self.is_processing = False

    def preview_html(self) -> str:
        return build_preview_html(self.files)

    def clear(self):
        """Forget every message and file"""
        self.messages = []
        self.files = {}

    def snapshot(self) -> WorkspaceState:
        return WorkspaceState(
            workspace_id=self.workspace_id,
            messages=list(self.messages),
            files=dict(self.files),
            is_processing=self.is_processing,
        )


class WorkspaceStore:
    """In-memory workspaces keyed by id"""

    def __init__(self):
        self._workspaces: dict[str, Workspace] = {}

    def get_or_create(self, workspace_id: str | None = None) -> Workspace:
        workspace_id = workspace_id or str(uuid.uuid4())
        if workspace_id not in self._workspaces:
            self._workspaces[workspace_id] = Workspace(workspace_id)
            logger.info("[Workspace] Created workspace %s", workspace_id)
        return self._workspaces[workspace_id]

    def get(self, workspace_id: str) -> Workspace:
        workspace = self._workspaces.get(workspace_id)
        if workspace is None:
            raise WorkspaceNotFoundError(f"No workspace with id {workspace_id}")
        return workspace

    def remove(self, workspace_id: str) -> Workspace:
        """Drop a workspace from the store and return it"""
        workspace = self.get(workspace_id)
        del self._workspaces[workspace_id]
        logger.info("[Workspace] Removed workspace %s", workspace_id)
        return workspace

    def __len__(self) -> int:
        return len(self._workspaces)


workspace_store = WorkspaceStore()


def get_workspace_store() -> WorkspaceStore:
    """FastAPI dependency returning the process-wide store"""
    return workspace_store
