from __future__ import annotations

import hashlib
import json
import logging
import time

from app.ai.types import AIClient, ChatMessage, LLMError
from app.core.context_store import ContextStore
from app.schemas.resume import ScoreResult

logger = logging.getLogger("app.chat")

DEV_MODE_PREFIX = "[DEV MODE]"
DEV_MODE_USER_PROMPT_CHARS = 500


class ChatError(RuntimeError):
    pass


def _short_hash(value: str | None) -> str:
    normalized = (value or "").strip()
    if not normalized:
        return ""
    return hashlib.sha256(normalized.encode("utf-8")).hexdigest()[:12]


def build_system_prompt(score: ScoreResult) -> str:
    signals = json.dumps(score.signals, separators=(",", ":"))
    return (
        "You are a helpful career assistant.\n"
        "You have access to the student's resume content below and a heuristic score.\n"
        f"- Resume score: {score.score}/100\n"
        f"- Signals: {signals}\n\n"
        "Use the resume to tailor advice, examples, and suggestions. When asked to write bullets, "
        "produce concise, quantified bullets. If information is missing, ask clarifying questions."
    )


def build_user_prompt(message: str, resume_text: str, excerpt_chars: int) -> str:
    excerpt = (resume_text or "")[: max(0, excerpt_chars)]
    return (
        f"User message: {message}\n\n"
        f"Relevant resume excerpt (may be empty):\n\n{excerpt}\n\n"
        "Based on the resume, provide tailored guidance."
    )


class ChatResponder:
    def __init__(self, ai_client: AIClient | None, *, excerpt_chars: int = 4000):
        self._ai_client = ai_client
        self._excerpt_chars = excerpt_chars

    def build_messages(self, context_text: str, score: ScoreResult, message: str) -> list[ChatMessage]:
        return [
            ChatMessage(role="system", content=build_system_prompt(score)),
            ChatMessage(role="user", content=build_user_prompt(message, context_text, self._excerpt_chars)),
        ]

    def respond(self, context_text: str | None, score: ScoreResult | None, message: str) -> str:
        resolved_score = score or ScoreResult(score=0)
        system, user = self.build_messages(context_text or "", resolved_score, message)

        if self._ai_client is None:
            return f"{DEV_MODE_PREFIX} {system.content}\n\n{user.content[:DEV_MODE_USER_PROMPT_CHARS]}"

        try:
            return self._ai_client.complete([system, user])
        except LLMError as exc:
            raise ChatError("Chat generation failed.") from exc


def answer_chat(
    store: ContextStore,
    responder: ChatResponder,
    *,
    message: str,
    context_id: str | None = None,
) -> str:
    started_at = time.perf_counter()
    resume_text = ""
    score: ScoreResult | None = None

    if context_id:
        context = store.read(context_id)
        if context is not None:
            text = store.read_text(context)
            if text is not None:
                resume_text = text
                score = context.score

    logger.info(
        json.dumps(
            {
                "event": "chat_request",
                "context_hash": _short_hash(context_id),
                "context_found": score is not None,
                "message_len": len(message),
                "message_hash": _short_hash(message),
                "resume_len": len(resume_text),
            }
        )
    )

    reply = responder.respond(resume_text, score, message)
    logger.info(
        json.dumps(
            {
                "event": "chat_complete",
                "reply_len": len(reply),
                "duration_ms": int((time.perf_counter() - started_at) * 1000),
            }
        )
    )
    return reply
