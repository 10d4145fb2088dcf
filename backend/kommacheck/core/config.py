from __future__ import annotations

from dataclasses import dataclass
import os


DEFAULT_CORS_ORIGINS = ("http://127.0.0.1:4173", "http://localhost:4173")
DEFAULT_NLP_MODEL = "de_core_news_sm"
FALSE_VALUES = {"0", "false", "no"}


@dataclass(frozen=True)
class Settings:
    environment: str
    app_name: str
    host: str
    port: int
    nlp_model: str
    cors_origins: tuple[str, ...] = DEFAULT_CORS_ORIGINS
    comma_after_enabled: bool = False
    max_text_chars: int = 50_000
    log_level: str = "INFO"


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() not in FALSE_VALUES


def load_settings() -> Settings:
    raw_cors_origins = os.getenv("KOMMACHECK_CORS_ORIGINS", "")
    parsed_cors_origins = tuple(
        origin.strip()
        for origin in raw_cors_origins.split(",")
        if origin.strip()
    )
    return Settings(
        environment=os.getenv("KOMMACHECK_ENV", "development"),
        app_name=os.getenv("KOMMACHECK_APP_NAME", "kommacheck-backend"),
        host=os.getenv("KOMMACHECK_HOST", "127.0.0.1"),
        port=int(os.getenv("KOMMACHECK_PORT", "8000")),
        nlp_model=os.getenv("KOMMACHECK_NLP_MODEL", DEFAULT_NLP_MODEL),
        cors_origins=parsed_cors_origins or DEFAULT_CORS_ORIGINS,
        comma_after_enabled=_env_flag("KOMMACHECK_COMMA_AFTER_ENABLED", "0"),
        max_text_chars=int(os.getenv("KOMMACHECK_MAX_TEXT_CHARS", "50000")),
        log_level=os.getenv("KOMMACHECK_LOG_LEVEL", "INFO").upper(),
    )
