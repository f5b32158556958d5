"""Domain errors rendered as JSON error payloads by the API layer"""

from __future__ import annotations


class WallahError(Exception):
    """Base error carrying the HTTP status and payload fields"""

    status_code = 500
    error = "Server error"

    def __init__(self, details: str | None = None, error: str | None = None):
        super().__init__(details or error or self.error)
        self.details = details
        if error is not None:
            self.error = error

    def to_payload(self) -> dict[str, str]:
        payload = {"error": self.error}
        if self.details is not None:
            payload["details"] = self.details
        return payload


class PromptRequiredError(WallahError):
    """Empty or whitespace-only prompt"""

    status_code = 400
    error = "Prompt required"


class InvalidRequestError(WallahError):
    status_code = 400
    error = "Invalid request"


class UpstreamError(WallahError):
    """The generative model call failed"""

    status_code = 500
    error = "Server error"


class WorkspaceNotFoundError(WallahError):
    status_code = 404
    error = "Workspace not found"


class GenerationInProgressError(WallahError):
    status_code = 409
    error = "Generation already in progress"


class MissingAPIKeyError(RuntimeError):
    """Raised at startup when GEMINI_API_KEY is not set"""
