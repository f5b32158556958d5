"""
LLM Service - Relays prompts to the Google Gemini text-generation API
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import aiohttp

from services.config_manager import ConfigManager, DEFAULT_MAX_OUTPUT_TOKENS, DEFAULT_MODEL, DEFAULT_TEMPERATURE

logger = logging.getLogger(__name__)

GEMINI_BASE_URL = "https://generativelanguage.googleapis.com/v1beta/models"


class GeminiAPIError(Exception):
    """Gemini answered with an error status or an unusable body"""

    def __init__(self, message: str, status: int | None = None):
        super().__init__(message)
        self.status = status


def build_system_instruction(prompt: str, platform: str | None = None) -> str:
    """Build the fixed instructional preamble sent ahead of every prompt"""
    platform = platform or sys.platform
    return f"""You are an expert AI assistant specializing in web development and programming. Operating System: {platform}

Key Principles:
1. Provide clear, structured responses
2. Break down complex problems into manageable steps
3. Include code examples when relevant
4. Explain technical concepts in an accessible way
5. Focus on modern best practices and standards
6. Always consider security, performance, and accessibility

When providing code:
- Use modern syntax and patterns
- Include helpful comments
- Follow industry best practices
- Consider cross-browser compatibility
- Implement error handling
- Focus on clean, maintainable code

For web development:
- Recommend responsive design patterns
- Suggest semantic HTML structure
- Promote accessibility best practices
- Consider performance optimization
- Include security considerations

Current request: {prompt}

Please provide a detailed, well-structured response that addresses all aspects of the request."""


class LLMService:
    """Service for relaying prompts to Gemini"""

    def __init__(self, config: dict[str, Any]):
        self.config = config
        self.provider = config.get("provider", "gemini")

    # ========== Config Helpers ==========

    def _get_gemini_config(self, model: str | None = None) -> tuple[str, str, str]:
        """Get Gemini config: (api_key, model, url). Raises if api_key missing."""
        cfg = self.config.get("gemini", {})
        api_key = cfg.get("apiKey")
        if not api_key:
            raise ValueError("Gemini API key not configured")
        model = model or cfg.get("model", DEFAULT_MODEL)
        url = f"{GEMINI_BASE_URL}/{model}:generateContent"
        return api_key, model, url

    # ========== Payload / Response ==========

    def _build_gemini_payload(self, system_instruction: str, prompt: str) -> dict[str, Any]:
        """Build Gemini request payload: preamble and prompt as two text parts"""
        cfg = self.config.get("gemini", {})
        return {
            "contents": [
                {
                    "role": "user",
                    "parts": [{"text": system_instruction}, {"text": prompt}],
                }
            ],
            "generationConfig": {
                "temperature": cfg.get("temperature", DEFAULT_TEMPERATURE),
                "maxOutputTokens": cfg.get("maxOutputTokens", DEFAULT_MAX_OUTPUT_TOKENS),
            },
        }

    def _parse_gemini_response(self, data: dict[str, Any]) -> str:
        """Concatenate the text parts of the first candidate"""
        candidates = data.get("candidates") or []
        if not candidates:
            block_reason = (data.get("promptFeedback") or {}).get("blockReason")
            if block_reason:
                raise GeminiAPIError(f"Prompt blocked by Gemini: {block_reason}")
            raise GeminiAPIError("No valid response from Gemini API")

        parts = (candidates[0].get("content") or {}).get("parts") or []
        texts = [part["text"] for part in parts if "text" in part]
        if not texts:
            finish_reason = candidates[0].get("finishReason", "UNKNOWN")
            raise GeminiAPIError(f"Gemini returned no text (finishReason: {finish_reason})")
        return "".join(texts)

    async def _request_json(self, url: str, payload: dict[str, Any], headers: dict[str, str]) -> dict[str, Any]:
        """POST the payload and return the decoded JSON body; no timeout, no retry"""
        timeout = aiohttp.ClientTimeout(total=None)
        async with aiohttp.ClientSession(timeout=timeout) as session:
            async with session.post(url, json=payload, headers=headers) as response:
                if response.status != 200:
                    error_text = await response.text()
                    logger.error("[LLMService] Gemini API Error (%s): %s", response.status, error_text)
                    raise GeminiAPIError(f"Gemini API error ({response.status}): {error_text}", response.status)
                return await response.json()

    async def generate_response(self, prompt: str, model: str | None = None) -> str:
        """Relay a prompt to the configured provider and return its text verbatim"""
        if self.provider != "gemini":
            raise ValueError(f"Unsupported provider: {self.provider}")

        api_key, model, url = self._get_gemini_config(model)
        logger.info("[LLMService] Calling Gemini API with model: %s", model)

        payload = self._build_gemini_payload(build_system_instruction(prompt), prompt)
        headers = {"x-goog-api-key": api_key, "Content-Type": "application/json"}
        data = await self._request_json(url, payload, headers)
        text = self._parse_gemini_response(data)

        logger.info("[LLMService] Received response from %s (length: %d chars)", model, len(text))
        return text


def get_llm_service() -> LLMService:
    """FastAPI dependency building a service from the shared configuration"""
    return LLMService(ConfigManager.get_instance().get_config())
