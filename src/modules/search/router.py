from fastapi import APIRouter, Depends

from src.config.settings import Settings, get_settings
from src.modules.gateway.client import GatewayClient
from src.modules.gateway.dependencies import get_gateway_client
from src.modules.search import service
from src.modules.search.schemas import SearchRequest

router = APIRouter()


@router.post("")
async def web_search(
    body: SearchRequest,
    client: GatewayClient = Depends(get_gateway_client),
    settings: Settings = Depends(get_settings),
):
    return await service.search(client, settings, body)
