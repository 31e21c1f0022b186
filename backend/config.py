import os
from typing import Literal

from pydantic_settings import BaseSettings


def _parse_cors_origins() -> list[str] | None:
    """Parse CORS_ORIGINS env var as comma-separated string or JSON list."""
    raw = os.environ.get("CORS_ORIGINS")
    if not raw:
        return None
    if raw.startswith("["):
        import json
        return json.loads(raw)
    return [o.strip() for o in raw.split(",") if o.strip()]


class Settings(BaseSettings):
    cors_origins: list[str] = [
        "http://localhost:5173",
        "http://localhost:3000",
    ]
    debug: bool = False

    # Content quality classifier (text-generation collaborator)
    classifier_provider: Literal["gemini", "openai", "groq", "none"] = "gemini"
    classifier_model: str = ""  # empty = provider default
    gemini_api_key: str = ""
    openai_api_key: str = ""
    groq_api_key: str = ""
    classifier_timeout_seconds: float = 8.0
    content_confidence_threshold: float = 0.6
    max_section_chars: int = 4000

    # Scoring
    required_item_cap: float = 5.0  # sub-score ceiling when a required item fails

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


_cors_override = _parse_cors_origins()
settings = Settings(**{"cors_origins": _cors_override} if _cors_override else {})
