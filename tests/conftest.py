import json

import httpx
import pytest
from fastapi.testclient import TestClient

from src.config.settings import Settings, get_settings
from src.main import app
from src.modules.gateway.client import GatewayClient
from src.modules.gateway.dependencies import get_gateway_client

GATEWAY_URL = "https://gateway.test/v1/passthrough"


class GatewayRecorder:
    """Stands in for the passthrough gateway and remembers what it was sent."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.status_code = 200
        self.payload: object = {}

    def reply(self, payload: object, status_code: int = 200) -> None:
        self.payload = payload
        self.status_code = status_code

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(self.status_code, json=self.payload)

    def client(self) -> GatewayClient:
        return GatewayClient(GATEWAY_URL, transport=httpx.MockTransport(self.handler))

    @property
    def last(self) -> httpx.Request:
        assert self.requests, "no request reached the gateway"
        return self.requests[-1]

    def last_json(self) -> dict:
        return json.loads(self.last.content)


@pytest.fixture
def settings() -> Settings:
    return Settings(
        _env_file=None,
        pica_secret_key="test-secret",
        pica_openai_connection_key="openai-conn",
        pica_anthropic_connection_key="anthropic-conn",
        pica_perplexity_connection_key="perplexity-conn",
        pica_tavily_connection_key="tavily-conn",
        pica_firecrawl_connection_key="firecrawl-conn",
        gateway_base_url=GATEWAY_URL,
    )


@pytest.fixture
def gateway() -> GatewayRecorder:
    return GatewayRecorder()


@pytest.fixture
def client(settings: Settings, gateway: GatewayRecorder):
    app.dependency_overrides[get_settings] = lambda: settings
    app.dependency_overrides[get_gateway_client] = gateway.client
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
