from fastapi import APIRouter, Depends

from src.config.settings import Settings, get_settings
from src.modules.completion import service
from src.modules.completion.schemas import CompletionRequest
from src.modules.gateway.client import GatewayClient
from src.modules.gateway.dependencies import get_gateway_client

router = APIRouter()


@router.post("")
async def chat_completions(
    body: CompletionRequest,
    client: GatewayClient = Depends(get_gateway_client),
    settings: Settings = Depends(get_settings),
):
    return await service.complete(client, settings, body)
