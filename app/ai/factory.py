from __future__ import annotations

import logging

from app.ai.config import AIConfig, load_ai_config
from app.ai.types import AIClient

from app.ai.providers.openai_provider import OpenAIProvider
from app.ai.providers.gemini_provider import GeminiProvider

logger = logging.getLogger(__name__)


def get_ai_client(cfg: AIConfig | None = None) -> AIClient | None:
    """Return the configured generation client, or None when no credential is set."""
    cfg = cfg or load_ai_config()

    if cfg.provider not in {"openai", "gemini"}:
        raise ValueError(f"Unsupported AI_PROVIDER='{cfg.provider}'")

    if not cfg.configured:
        logger.debug("ai_client_unconfigured provider=%s", cfg.provider)
        return None

    if cfg.provider == "openai":
        return OpenAIProvider(model=cfg.model, api_key=cfg.api_key, base_url=cfg.base_url)

    return GeminiProvider(model=cfg.model, api_key=cfg.api_key)
