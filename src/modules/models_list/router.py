from fastapi import APIRouter, Depends

from src.config.settings import Settings, get_settings
from src.modules.gateway.client import GatewayClient
from src.modules.gateway.dependencies import get_gateway_client
from src.modules.models_list import service

router = APIRouter()


@router.get("/openai-models")
async def openai_models(
    client: GatewayClient = Depends(get_gateway_client),
    settings: Settings = Depends(get_settings),
):
    return await service.list_openai_models(client, settings)


@router.get("/anthropic-models")
async def anthropic_models(
    limit: str | None = None,
    before_id: str | None = None,
    after_id: str | None = None,
    client: GatewayClient = Depends(get_gateway_client),
    settings: Settings = Depends(get_settings),
):
    return await service.list_anthropic_models(
        client, settings, limit=limit, before_id=before_id, after_id=after_id
    )
