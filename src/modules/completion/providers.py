"""Per-provider request shaping and response normalization.

Each adapter knows the gateway path, credentials and body layout of one
provider, and how to turn that provider's reply into the OpenAI-style
``chat.completion`` envelope. The set of adapters is closed: anything not
registered in ``PROVIDER_ADAPTERS`` is rejected before a request is built.
"""

import time
from abc import ABC, abstractmethod
from typing import Any

from src.config.settings import Settings
from src.modules.catalog.models import default_model_for
from src.modules.completion.schemas import (
    CompletionChoice,
    CompletionMessage,
    CompletionResponse,
)
from src.modules.gateway import actions
from src.modules.gateway.client import build_headers
from src.modules.gateway.errors import UnsupportedProviderError

DEFAULT_ANTHROPIC_MAX_TOKENS = 1000
PASSTHROUGH_FIELDS = ("id", "model", "usage")


class ProviderAdapter(ABC):
    name: str
    path: str
    action_id: str

    @property
    def default_model(self) -> str:
        return default_model_for(self.name)

    @abstractmethod
    def connection_key(self, settings: Settings) -> str: ...

    def extra_headers(self, settings: Settings) -> dict[str, str]:
        return {}

    def headers(self, settings: Settings) -> dict[str, str]:
        return build_headers(
            settings.pica_secret_key,
            self.connection_key(settings),
            self.action_id,
            {"Content-Type": "application/json", **self.extra_headers(settings)},
        )

    def build_body(
        self,
        model: str | None,
        messages: list[dict[str, Any]],
        options: dict[str, Any],
    ) -> dict[str, Any]:
        return {"model": model or self.default_model, "messages": messages, **options}

    def normalize(self, data: Any) -> Any:
        return data


class PerplexityAdapter(ProviderAdapter):
    name = "perplexity"
    path = "/chat/completions"
    action_id = actions.PERPLEXITY_CHAT

    def connection_key(self, settings: Settings) -> str:
        return settings.pica_perplexity_connection_key


class OpenAIAdapter(ProviderAdapter):
    name = "openai"
    path = "/chat/completions"
    action_id = actions.OPENAI_CHAT

    def connection_key(self, settings: Settings) -> str:
        return settings.pica_openai_connection_key


class AnthropicAdapter(ProviderAdapter):
    name = "anthropic"
    path = "/messages"
    action_id = actions.ANTHROPIC

    def connection_key(self, settings: Settings) -> str:
        return settings.pica_anthropic_connection_key

    def extra_headers(self, settings: Settings) -> dict[str, str]:
        return {"anthropic-version": settings.anthropic_version}

    def build_body(
        self,
        model: str | None,
        messages: list[dict[str, Any]],
        options: dict[str, Any],
    ) -> dict[str, Any]:
        system = next((m for m in messages if m.get("role") == "system"), None)
        conversation = [m for m in messages if m.get("role") != "system"]

        body: dict[str, Any] = {
            "model": model or self.default_model,
            "max_tokens": resolve_max_tokens(options),
            "messages": conversation,
        }
        if system is not None:
            body["system"] = system.get("content")
        # Caller options are merged last and win over the fields above
        body.update(options)
        return body

    def normalize(self, data: Any) -> dict[str, Any]:
        response = CompletionResponse(
            id=data.get("id"),
            created=int(time.time()),
            model=data.get("model"),
            choices=[
                CompletionChoice(
                    index=0,
                    message=CompletionMessage(content=extract_text(data.get("content"))),
                    finish_reason=data.get("stop_reason") or "stop",
                )
            ],
            usage=data.get("usage"),
        )
        # Keys the upstream left out stay out of the envelope
        absent = {key for key in PASSTHROUGH_FIELDS if key not in data}
        return response.model_dump(exclude=absent)


def resolve_max_tokens(options: dict[str, Any]) -> Any:
    if options.get("max_tokens") is not None:
        return options["max_tokens"]
    if options.get("max_completion_tokens") is not None:
        return options["max_completion_tokens"]
    return DEFAULT_ANTHROPIC_MAX_TOKENS


def extract_text(content: Any) -> str:
    """First text block of an Anthropic ``content`` array, or ``""``."""
    if isinstance(content, list):
        first = content[0] if content else None
        text = first.get("text") if isinstance(first, dict) else None
        return text if isinstance(text, str) else ""
    if isinstance(content, str):
        return content
    return ""


PROVIDER_ADAPTERS: dict[str, ProviderAdapter] = {a.name: a for a in [
    PerplexityAdapter(),
    OpenAIAdapter(),
    AnthropicAdapter(),
]}


def get_provider_adapter(provider: str) -> ProviderAdapter:
    adapter = PROVIDER_ADAPTERS.get(provider)
    if adapter is None:
        raise UnsupportedProviderError(provider)
    return adapter
