from __future__ import annotations

from dataclasses import dataclass

from app.core.config import Settings, settings as default_settings

DEFAULT_MODELS = {
    "gemini": "gemini-2.5-pro",
    "openai": "gpt-4o-mini",
}


@dataclass(frozen=True)
class AIConfig:
    provider: str
    model: str
    api_key: str | None
    base_url: str | None = None

    @property
    def configured(self) -> bool:
        return bool(self.api_key) and not _looks_like_placeholder(self.api_key or "")


def _looks_like_placeholder(value: str) -> bool:
    lower = value.strip().lower()
    return lower.startswith("your_") or lower.startswith("replace_") or lower in {"changeme", "todo"}


def load_ai_config(settings: Settings | None = None) -> AIConfig:
    cfg = settings or default_settings
    provider = cfg.ai_provider
    model = (cfg.ai_model or DEFAULT_MODELS.get(provider, "")).strip()
    if provider == "openai":
        return AIConfig(
            provider=provider,
            model=model,
            api_key=cfg.openai_api_key,
            base_url=cfg.openai_base_url,
        )
    return AIConfig(provider=provider, model=model, api_key=cfg.gemini_api_key)
