from typing import Any

from pydantic import BaseModel, ConfigDict, Field

OPTION_FIELDS = ("temperature", "max_tokens", "stream")


class ChatMessage(BaseModel):
    model_config = ConfigDict(extra="allow")

    role: str = Field(..., pattern="^(system|user|assistant)$")
    content: str


class CompletionRequest(BaseModel):
    """Chat completion request; unknown keys are kept as provider options."""

    model_config = ConfigDict(extra="allow")

    provider: str
    model: str | None = None
    messages: list[ChatMessage]
    temperature: float | None = None
    max_tokens: int | None = None
    stream: bool | None = None

    def options(self) -> dict[str, Any]:
        # Only what the caller actually sent, declared fields first
        declared = {
            name: getattr(self, name)
            for name in OPTION_FIELDS
            if name in self.model_fields_set
        }
        return {**declared, **(self.model_extra or {})}

    def message_dicts(self) -> list[dict[str, Any]]:
        return [message.model_dump() for message in self.messages]


class CompletionMessage(BaseModel):
    role: str = "assistant"
    content: str


class CompletionChoice(BaseModel):
    index: int = 0
    message: CompletionMessage
    finish_reason: Any


class CompletionResponse(BaseModel):
    """OpenAI-style envelope; upstream id, model and usage are carried as-is."""

    id: Any = None
    object: str = "chat.completion"
    created: int
    model: Any = None
    choices: list[CompletionChoice]
    usage: Any = None
