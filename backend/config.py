import os
from typing import Literal

from pydantic_settings import BaseSettings

AnalyzerStrategy = Literal["local", "gemini"]


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
    max_upload_size_mb: int = 5
    cors_origins: list[str] = [
        "http://localhost:5173",
        "http://localhost:3000",
        "http://localhost:8080",
    ]
    debug: bool = False
    log_level: str = "INFO"

    # Analyzer strategy settings
    analyzer_strategy: AnalyzerStrategy = "local"
    analyzer_strict: bool = False  # if True, don't fall back to local on remote failure

    # Remote (Gemini) analyzer
    gemini_api_key: str = ""
    gemini_model: str = "gemini-2.5-flash"
    gemini_timeout_s: float = 30.0
    gemini_max_retries: int = 2
    gemini_retry_backoff_s: float = 1.0

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


_cors_override = _parse_cors_origins()
settings = Settings(**{"cors_origins": _cors_override} if _cors_override else {})
