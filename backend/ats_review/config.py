"""
ATS Resume Review - configuration
Everything is read from the environment (and a local .env file) once at startup.
"""

import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

from backend.ats_review.errors import ConfigError

CATEGORIZER_MODES = ("legacy", "strict")


@dataclass(frozen=True)
class Settings:
    api_key: str = ""
    model_name: str = "gemini-2.5-flash"
    ai_timeout: float = 60.0
    upload_folder: str = "uploads"
    categorizer_mode: str = "legacy"
    cors_origins: list[str] = field(default_factory=lambda: ["*"])
    host: str = "0.0.0.0"
    port: int = 3000
    log_level: str = "INFO"
    log_file: str = ""

    def require_api_key(self) -> str:
        if not self.api_key:
            raise ConfigError("API_KEY is not set in .env")
        return self.api_key


def _number(name: str, default, cast):
    raw = (os.getenv(name) or "").strip()
    if not raw:
        return default
    try:
        value = cast(raw)
    except ValueError:
        raise ConfigError(f"{name} must be a number, got {raw!r}")
    if value <= 0:
        raise ConfigError(f"{name} must be positive, got {raw!r}")
    return value


def load_settings(dotenv: bool = True) -> Settings:
    """
    Build Settings from environment variables.

    Args:
        dotenv: Load a .env file from the working directory first

    Returns:
        Settings instance (the API key may still be empty; see require_api_key)
    """
    if dotenv:
        load_dotenv()

    mode = (os.getenv("CATEGORIZER_MODE") or "legacy").strip().lower()
    if mode not in CATEGORIZER_MODES:
        raise ConfigError(
            f"CATEGORIZER_MODE must be one of {', '.join(CATEGORIZER_MODES)}, got {mode!r}"
        )

    origins_raw = (os.getenv("CORS_ORIGINS") or "*").strip()
    origins = [o.strip() for o in origins_raw.split(",") if o.strip()] or ["*"]

    return Settings(
        api_key=(os.getenv("API_KEY") or "").strip(),
        model_name=(os.getenv("GEMINI_MODEL") or "gemini-2.5-flash").strip(),
        ai_timeout=_number("AI_TIMEOUT_SECONDS", 60.0, float),
        upload_folder=(os.getenv("UPLOAD_FOLDER") or "uploads").strip(),
        categorizer_mode=mode,
        cors_origins=origins,
        host=(os.getenv("HOST") or "0.0.0.0").strip(),
        port=_number("PORT", 3000, int),
        log_level=(os.getenv("LOG_LEVEL") or "INFO").strip(),
        log_file=(os.getenv("LOG_FILE") or "").strip(),
    )
