# Role: Central configuration module. Loads .env into environment variables, computes runtime flags (DEBUG),
# and builds the Settings object that main.create_app() hands to every component at startup.
# Importers read chat_samples.config.DEBUG to control debug output without threading flags through every call.

from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

DEBUG: bool = False


def load_env() -> None:
    """
    Load .env into os.environ, then recompute DEBUG.
    This makes DEBUG correct even if load_env() is called after import.
    """
    global DEBUG
    load_dotenv()
    # Key line: accept common truthy values.
    DEBUG = os.getenv("DEBUG", "0").lower() in {"1", "true", "yes"}


@dataclass(frozen=True)
class Settings:
    """Configuration container for the model client, assistant history and the HTTP server."""

    gemini_api_key: str
    gemini_model: str
    temperature: float
    max_output_tokens: int
    assistant_name: str
    history_max_messages: int
    history_ttl_minutes: int
    host: str
    port: int


def load_settings() -> Settings:
    # Invalid numeric env values raise ValueError here, at startup, not on the first request.
    return Settings(
        gemini_api_key=os.getenv("GEMINI_API_KEY", ""),
        gemini_model=os.getenv("GEMINI_MODEL", "gemini-2.5-flash"),
        temperature=float(os.getenv("GEMINI_TEMPERATURE", "0.5")),
        max_output_tokens=int(os.getenv("GEMINI_MAX_OUTPUT_TOKENS", "1024")),
        assistant_name=os.getenv("ASSISTANT_NAME", "Jessica"),
        history_max_messages=int(os.getenv("HISTORY_MAX_MESSAGES", "50")),
        history_ttl_minutes=int(os.getenv("HISTORY_TTL_MINUTES", "1440")),
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", "8080")),
    )
