from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Literal, Optional

Role = Literal["system", "user", "assistant"]


class ProviderKind(str, Enum):
    OPENAI = "openai"
    MISTRAL = "mistral"
    GEMINI = "gemini"


@dataclass(frozen=True)
class LLMMessage:
    role: Role
    content: str

    def as_dict(self) -> dict[str, str]:
        return {"role": self.role, "content": self.content}


@dataclass(frozen=True)
class GenerationRequest:
    user_prompt: str
    credential: str
    system_prompt: Optional[str] = None

    def chat_messages(self) -> list[LLMMessage]:
        """System message first when present, then the user message."""
        messages = []
        if self.system_prompt:
            messages.append(LLMMessage(role="system", content=self.system_prompt))
        messages.append(LLMMessage(role="user", content=self.user_prompt))
        return messages


@dataclass(frozen=True)
class RepairRequest:
    raw_text: str
    schema: dict[str, Any]
    credential: str
