"""
Configuration Manager - Process-wide backend settings
Values come from the environment (a local .env file is honoured).
"""

from __future__ import annotations

import os
from typing import Any

from dotenv import load_dotenv

from services.errors import MissingAPIKeyError

load_dotenv()

DEFAULT_MODEL = "gemini-2.5-flash"
DEFAULT_TEMPERATURE = 0.7
DEFAULT_MAX_OUTPUT_TOKENS = 4096


class ConfigManager:
    """Read-only configuration shared by every request"""

    _instance = None

    def __init__(self):
        self._config = self._load_config()

    @classmethod
    def get_instance(cls) -> "ConfigManager":
        """Get singleton instance"""
        if cls._instance is None:
            cls._instance = ConfigManager()
        return cls._instance

    @classmethod
    def reset_instance(cls):
        """Drop the cached instance so the environment is read again"""
        cls._instance = None

    def _load_config(self) -> dict[str, Any]:
        """Build configuration from environment variables"""
        config = self._default_config()
        config["gemini"]["apiKey"] = os.environ.get("GEMINI_API_KEY", "").strip()
        config["gemini"]["model"] = os.environ.get("GEMINI_MODEL") or DEFAULT_MODEL
        config["server"]["host"] = os.environ.get("HOST") or config["server"]["host"]

        port = os.environ.get("PORT")
        if port:
            try:
                config["server"]["port"] = int(port)
            except ValueError:
                raise ValueError(f"PORT must be an integer, got {port!r}")

        config["logLevel"] = (os.environ.get("LOG_LEVEL") or "INFO").upper()
        return config

    def _default_config(self) -> dict[str, Any]:
        """Get default configuration"""
        return {
            "provider": "gemini",
            "gemini": {
                "apiKey": "",
                "model": DEFAULT_MODEL,
                "temperature": DEFAULT_TEMPERATURE,
                "maxOutputTokens": DEFAULT_MAX_OUTPUT_TOKENS,
            },
            "server": {"host": "0.0.0.0", "port": 4000},
            "logLevel": "INFO",
        }

    def get_config(self) -> dict[str, Any]:
        """Get a copy of the current configuration"""
        config = self._config.copy()
        config["gemini"] = dict(self._config["gemini"])
        config["server"] = dict(self._config["server"])
        return config

    def get(self, key: str, default=None):
        """Get specific config value"""
        return self._config.get(key, default)

    def require_api_key(self) -> str:
        """Return the Gemini API key or fail loudly"""
        api_key = self._config["gemini"].get("apiKey")
        if not api_key:
            raise MissingAPIKeyError("GEMINI_API_KEY missing in environment!")
        return api_key
