from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

PDF_OCR_MODES = {"auto", "force", "off"}


def _get_env(name: str, default: str | None = None) -> str | None:
    value = os.getenv(name)
    if value is None or value == "":
        return default
    return value


def _get_env_bool(name: str, default: bool) -> bool:
    raw = _get_env(name, None)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _get_env_int(name: str, default: int) -> int:
    raw = _get_env(name, None)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _get_env_list(name: str, default: list[str]) -> tuple[str, ...]:
    raw = _get_env(name, None)
    if raw is None:
        return tuple(default)
    values = [item.strip() for item in raw.split(",")]
    clean = [item for item in values if item]
    return tuple(clean) if clean else tuple(default)


def _get_secret(name: str) -> str | None:
    raw = _get_env(name, None)
    if raw is None:
        return None
    value = raw.strip().strip('"').strip("'").strip()
    return value or None


def _pdf_ocr_mode(raw: str | None) -> str:
    value = (raw or "").strip().lower()
    if value == "force":
        return "force"
    if value in {"false", "0", "off", "no", "disabled"}:
        return "off"
    return "auto"


@dataclass(frozen=True)
class StoragePaths:
    data_dir: Path

    @property
    def uploads_dir(self) -> Path:
        return self.data_dir / "uploads"

    @property
    def extracted_dir(self) -> Path:
        return self.data_dir / "extracted"

    def ensure(self) -> None:
        for directory in (self.data_dir, self.uploads_dir, self.extracted_dir):
            directory.mkdir(parents=True, exist_ok=True)


@dataclass(frozen=True)
class ExtractionConfig:
    pdf_ocr_mode: str = "auto"
    pdf_ocr_min_chars: int = 200
    image_ocr_min_chars: int = 100
    ocr_language: str = "eng"
    ocr_dpi: int = 200

    def __post_init__(self) -> None:
        if self.pdf_ocr_mode not in PDF_OCR_MODES:
            raise ValueError(f"pdf_ocr_mode must be one of {sorted(PDF_OCR_MODES)}")


@dataclass(frozen=True)
class Settings:
    host: str
    port: int
    log_level: str
    sentry_dsn: str | None
    cors_allowed_origins: tuple[str, ...]
    rate_limit: str
    rate_limit_enabled: bool
    max_upload_bytes: int
    chat_excerpt_chars: int
    upload_llm_scoring: bool
    ai_provider: str
    ai_model: str | None
    gemini_api_key: str | None
    openai_api_key: str | None
    openai_base_url: str | None
    storage: StoragePaths
    extraction: ExtractionConfig


def load_settings() -> Settings:
    return Settings(
        host=_get_env("HOST", "0.0.0.0") or "0.0.0.0",
        port=_get_env_int("PORT", 4000),
        log_level=_get_env("LOG_LEVEL", "INFO") or "INFO",
        sentry_dsn=_get_env("SENTRY_DSN"),
        cors_allowed_origins=_get_env_list(
            "CORS_ALLOWED_ORIGINS",
            [
                "http://localhost:5173",
                "http://127.0.0.1:5173",
                "http://localhost:3000",
            ],
        ),
        rate_limit=_get_env("RATE_LIMIT", "60/minute") or "60/minute",
        rate_limit_enabled=_get_env_bool("RATE_LIMIT_ENABLED", True),
        max_upload_bytes=max(1, _get_env_int("MAX_UPLOAD_MB", 10)) * 1024 * 1024,
        chat_excerpt_chars=_get_env_int("CHAT_EXCERPT_CHARS", 4000),
        upload_llm_scoring=_get_env_bool("UPLOAD_LLM_SCORING", False),
        ai_provider=(_get_env("AI_PROVIDER", "gemini") or "gemini").strip().lower(),
        ai_model=_get_env("AI_MODEL"),
        gemini_api_key=_get_secret("GEMINI_API_KEY"),
        openai_api_key=_get_secret("OPENAI_API_KEY"),
        openai_base_url=_get_env("OPENAI_BASE_URL"),
        storage=StoragePaths(data_dir=Path(_get_env("DATA_DIR", "data") or "data").resolve()),
        extraction=ExtractionConfig(
            pdf_ocr_mode=_pdf_ocr_mode(_get_env("ENABLE_PDF_OCR")),
            pdf_ocr_min_chars=_get_env_int("PDF_OCR_MIN_CHARS", 200),
            image_ocr_min_chars=_get_env_int("IMAGE_OCR_MIN_CHARS", 100),
            ocr_language=_get_env("OCR_LANGUAGE", "eng") or "eng",
            ocr_dpi=_get_env_int("OCR_DPI", 200),
        ),
    )


settings = load_settings()
