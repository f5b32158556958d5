"""Services module - Business logic layer"""

from .config_manager import ConfigManager
from .file_extractor import extract_code_segments, extract_files_from_response, resolve_files
from .llm_service import GeminiAPIError, LLMService, get_llm_service
from .preview_builder import build_preview_html
from .workspace import Workspace, WorkspaceStore

__all__ = [
    "ConfigManager",
    "extract_code_segments",
    "extract_files_from_response",
    "resolve_files",
    "GeminiAPIError",
    "LLMService",
    "get_llm_service",
    "build_preview_html",
    "Workspace",
    "WorkspaceStore",
]
