from __future__ import annotations

import base64
from typing import Optional, Sequence

from openai import OpenAI

from app.ai.types import ChatMessage, LLMError


class OpenAIProvider:
    def __init__(
        self,
        model: str,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout_s: float = 30.0,
        temperature: float = 0.2,
    ):
        key = (api_key or "").strip()
        if not key:
            raise LLMError("OPENAI_API_KEY is missing", code="llm_disabled")
        self._model = model
        self._temperature = temperature
        self._client = OpenAI(
            api_key=key,
            base_url=base_url or None,
            timeout=timeout_s,
            max_retries=0,
        )

    def complete(self, messages: Sequence[ChatMessage]) -> str:
        payload = [{"role": m.role, "content": m.content} for m in messages]
        try:
            response = self._client.chat.completions.create(
                model=self._model,
                messages=payload,
                temperature=self._temperature,
            )
        except Exception as exc:
            raise LLMError(f"OpenAI request failed: {exc}", code="llm_exception") from exc
        content = response.choices[0].message.content if response.choices else ""
        return (content or "").strip()

    def extract_image_text(self, content: bytes, mime_type: str, instruction: str) -> str:
        encoded = base64.b64encode(content).decode("utf-8")
        try:
            response = self._client.chat.completions.create(
                model=self._model,
                messages=[
                    {
                        "role": "user",
                        "content": [
                            {"type": "text", "text": instruction},
                            {"type": "image_url", "image_url": {"url": f"data:{mime_type};base64,{encoded}"}},
                        ],
                    },
                ],
                temperature=0.0,
            )
        except Exception as exc:
            raise LLMError(f"OpenAI vision request failed: {exc}", code="llm_exception") from exc
        text = response.choices[0].message.content if response.choices else ""
        return (text or "").strip()
