"""Workspace (chat session) endpoints"""

from __future__ import annotations

from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse

from models.generate import ErrorResponse
from models.workspace import WorkspaceGenerateRequest, WorkspaceGenerateResponse, WorkspaceState
from services.errors import PromptRequiredError
from services.llm_service import LLMService, get_llm_service
from services.workspace import WorkspaceStore, get_workspace_store

router = APIRouter()


@router.post(
    "/generate",
    response_model=WorkspaceGenerateResponse,
    responses={400: {"model": ErrorResponse}, 409: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def generate_in_workspace(
    request: WorkspaceGenerateRequest,
    llm_service: LLMService = Depends(get_llm_service),
    store: WorkspaceStore = Depends(get_workspace_store),
) -> WorkspaceGenerateResponse:
    """Generate website files and merge them into the workspace"""
    if not (request.prompt or "").strip():
        raise PromptRequiredError()

    workspace = store.get_or_create(request.workspace_id)
    text, new_files = await workspace.generate(request.prompt, llm_service, request.model)

    return WorkspaceGenerateResponse(
        workspace_id=workspace.workspace_id,
        text=text,
        new_files=new_files,
        state=workspace.snapshot(),
    )


@router.get("/{workspace_id}", response_model=WorkspaceState, responses={404: {"model": ErrorResponse}})
async def get_workspace(
    workspace_id: str,
    store: WorkspaceStore = Depends(get_workspace_store),
) -> WorkspaceState:
    """Get messages and accumulated files"""
    return store.get(workspace_id).snapshot()


@router.get("/{workspace_id}/preview", response_class=HTMLResponse, responses={404: {"model": ErrorResponse}})
async def preview_workspace(
    workspace_id: str,
    store: WorkspaceStore = Depends(get_workspace_store),
) -> HTMLResponse:
    return HTMLResponse(store.get(workspace_id).preview_html())


@router.delete("/{workspace_id}", response_model=WorkspaceState, responses={404: {"model": ErrorResponse}})
async def clear_workspace(
    workspace_id: str,
    store: WorkspaceStore = Depends(get_workspace_store),
) -> WorkspaceState:
    """Reset the conversation and the file set, then forget the workspace"""
    workspace = store.remove(workspace_id)
    workspace.clear()
    return workspace.snapshot()
