import logging
from typing import Any

from src.config.settings import Settings
from src.modules.gateway import actions
from src.modules.gateway.client import GatewayClient, build_headers

logger = logging.getLogger(__name__)

MODELS_PATH = "/models"
ANTHROPIC_PAGING_PARAMS = ("limit", "before_id", "after_id")


async def list_openai_models(client: GatewayClient, settings: Settings) -> Any:
    headers = build_headers(
        settings.pica_secret_key,
        settings.pica_openai_connection_key,
        actions.OPENAI_MODELS,
        {"Content-Type": "application/json"},
    )
    return await client.get(MODELS_PATH, headers)


async def list_anthropic_models(
    client: GatewayClient,
    settings: Settings,
    limit: str | None = None,
    before_id: str | None = None,
    after_id: str | None = None,
) -> Any:
    paging = {"limit": limit, "before_id": before_id, "after_id": after_id}
    params = {name: paging[name] for name in ANTHROPIC_PAGING_PARAMS if paging[name]}
    headers = build_headers(
        settings.pica_secret_key,
        settings.pica_anthropic_connection_key,
        actions.ANTHROPIC,
        {"anthropic-version": settings.anthropic_version},
    )
    logger.debug("Anthropic models paging: %s", params)
    return await client.get(MODELS_PATH, headers, params=params)
