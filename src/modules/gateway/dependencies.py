from fastapi import Depends

from src.config.settings import Settings, get_settings
from src.modules.gateway.client import GatewayClient


def get_gateway_client(settings: Settings = Depends(get_settings)) -> GatewayClient:
    return GatewayClient.from_settings(settings)
