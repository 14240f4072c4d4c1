import logging
from typing import Any

import httpx

from src.config.settings import Settings
from src.modules.gateway.errors import UpstreamRequestError

logger = logging.getLogger(__name__)

SECRET_HEADER = "x-pica-secret"
CONNECTION_KEY_HEADER = "x-pica-connection-key"
ACTION_ID_HEADER = "x-pica-action-id"


def build_headers(
    secret: str,
    connection_key: str,
    action_id: str,
    extra: dict[str, str] | None = None,
) -> dict[str, str]:
    headers = {
        SECRET_HEADER: secret,
        CONNECTION_KEY_HEADER: connection_key,
        ACTION_ID_HEADER: action_id,
    }
    if extra:
        headers.update(extra)
    return headers


class GatewayClient:
    """Single-shot JSON calls against the passthrough gateway.

    Every call opens and closes its own ``httpx.AsyncClient``: no connection,
    cookie or header state survives between invocations. There is no retry;
    a non-2xx answer raises ``UpstreamRequestError`` and transport failures
    propagate as ``httpx`` errors.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._transport = transport

    @classmethod
    def from_settings(cls, settings: Settings) -> "GatewayClient":
        return cls(settings.gateway_base_url, timeout=settings.gateway_timeout)

    async def request(
        self,
        method: str,
        path: str,
        headers: dict[str, str],
        json: dict[str, Any] | None = None,
        params: dict[str, str] | None = None,
        label: str = "API request",
    ) -> Any:
        url = f"{self._base_url}/{path.lstrip('/')}"
        logger.info("Gateway %s %s", method, path)
        async with httpx.AsyncClient(
            timeout=self._timeout, transport=self._transport
        ) as client:
            response = await client.request(
                method, url, headers=headers, json=json, params=params or None
            )

        if not response.is_success:
            logger.warning(
                "Gateway %s %s answered %d", method, path, response.status_code
            )
            raise UpstreamRequestError(
                label, response.status_code, response.reason_phrase
            )
        return response.json()

    async def get(self, path: str, headers: dict[str, str], **kwargs: Any) -> Any:
        return await self.request("GET", path, headers, **kwargs)

    async def post(
        self, path: str, headers: dict[str, str], body: dict[str, Any], **kwargs: Any
    ) -> Any:
        return await self.request("POST", path, headers, json=body, **kwargs)
