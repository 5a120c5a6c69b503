from __future__ import annotations

from functools import lru_cache

from fastapi import Depends

from app.ai.factory import get_ai_client
from app.ai.types import AIClient
from app.core.config import settings
from app.core.context_store import ContextStore
from app.parsing.parse import TextExtractor
from app.services.chat_service import ChatResponder
from app.services.resume_service import ResumeProcessor


@lru_cache(maxsize=1)
def get_generation_client() -> AIClient | None:
    return get_ai_client()


def get_context_store() -> ContextStore:
    return ContextStore(settings.storage)


def get_text_extractor(ai_client: AIClient | None = Depends(get_generation_client)) -> TextExtractor:
    return TextExtractor(settings.extraction, ai_client=ai_client)


def get_resume_processor(
    store: ContextStore = Depends(get_context_store),
    extractor: TextExtractor = Depends(get_text_extractor),
    ai_client: AIClient | None = Depends(get_generation_client),
) -> ResumeProcessor:
    return ResumeProcessor(
        store,
        extractor,
        ai_client=ai_client,
        llm_scoring=settings.upload_llm_scoring,
        max_upload_bytes=settings.max_upload_bytes,
    )


def get_chat_responder(ai_client: AIClient | None = Depends(get_generation_client)) -> ChatResponder:
    return ChatResponder(ai_client, excerpt_chars=settings.chat_excerpt_chars)
