import logging
from typing import Any

from src.config.settings import Settings
from src.modules.completion.providers import get_provider_adapter
from src.modules.completion.schemas import CompletionRequest
from src.modules.gateway.client import GatewayClient

logger = logging.getLogger(__name__)


async def complete(
    client: GatewayClient, settings: Settings, request: CompletionRequest
) -> Any:
    adapter = get_provider_adapter(request.provider)
    body = adapter.build_body(request.model, request.message_dicts(), request.options())
    logger.info(
        "Chat completion via %s (model=%s, %d messages)",
        adapter.name, body.get("model"), len(request.messages),
    )
    data = await client.post(adapter.path, adapter.headers(settings), body)
    return adapter.normalize(data)
