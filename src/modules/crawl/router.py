from fastapi import APIRouter, Depends, Header

from src.config.settings import Settings, get_settings
from src.modules.crawl import service
from src.modules.gateway.client import GatewayClient
from src.modules.gateway.dependencies import get_gateway_client

router = APIRouter()


@router.get("")
@router.get("/{crawl_path:path}")
async def crawl_status(
    crawl_path: str | None = None,
    authorization: str | None = Header(default=None),
    client: GatewayClient = Depends(get_gateway_client),
    settings: Settings = Depends(get_settings),
):
    return await service.crawl_status(
        client, settings, service.crawl_id_from_path(crawl_path), authorization
    )
