from __future__ import annotations

from typing import Sequence

from google import genai
from google.genai import types

from app.ai.types import ChatMessage, LLMError


class GeminiProvider:
    def __init__(self, model: str, api_key: str | None, temperature: float = 0.2):
        key = (api_key or "").strip()
        if not key:
            raise LLMError("GEMINI_API_KEY is missing", code="llm_disabled")
        self._model = model
        self._temperature = temperature
        self._client = genai.Client(api_key=key)

    def complete(self, messages: Sequence[ChatMessage]) -> str:
        # Gemini receives the whole conversation as a single user turn.
        prompt = "\n\n".join(m.content for m in messages if m.content)
        try:
            response = self._client.models.generate_content(
                model=self._model,
                contents=prompt,
                config=types.GenerateContentConfig(temperature=self._temperature),
            )
        except Exception as exc:
            raise LLMError(f"Gemini request failed: {exc}", code="llm_exception") from exc
        return (response.text or "").strip()

    def extract_image_text(self, content: bytes, mime_type: str, instruction: str) -> str:
        try:
            response = self._client.models.generate_content(
                model=self._model,
                contents=[
                    instruction,
                    types.Part.from_bytes(data=content, mime_type=mime_type),
                ],
                config=types.GenerateContentConfig(temperature=0.0),
            )
        except Exception as exc:
            raise LLMError(f"Gemini vision request failed: {exc}", code="llm_exception") from exc
        return (response.text or "").strip()
