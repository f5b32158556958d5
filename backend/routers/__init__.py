"""Routers module - FastAPI route handlers"""

from . import config, files, generate, workspace

__all__ = ["config", "files", "generate", "workspace"]
