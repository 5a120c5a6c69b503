from dataclasses import dataclass
from typing import Literal, Protocol, Sequence


Role = Literal["system", "user", "assistant"]


@dataclass(frozen=True)
class ChatMessage:
    role: Role
    content: str


class LLMError(RuntimeError):
    def __init__(self, message: str, *, code: str = "llm_unavailable"):
        super().__init__(message)
        self.code = code


class AIClient(Protocol):
    def complete(self, messages: Sequence[ChatMessage]) -> str: ...

    def extract_image_text(
        self, content: bytes, mime_type: str, instruction: str
    ) -> str: ...
