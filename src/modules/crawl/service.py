import logging
from typing import Any

from src.config.settings import Settings
from src.modules.gateway import actions
from src.modules.gateway.client import GatewayClient, build_headers
from src.modules.gateway.errors import MissingParameterError

logger = logging.getLogger(__name__)

BEARER_PREFIX = "Bearer "


def crawl_id_from_path(path: str | None) -> str | None:
    # Nested paths resolve to their last segment
    if not path:
        return None
    return path.split("/")[-1] or None


def bearer_token(authorization: str | None) -> str | None:
    if not authorization:
        return None
    return authorization.replace(BEARER_PREFIX, "", 1).strip() or None


async def crawl_status(
    client: GatewayClient,
    settings: Settings,
    crawl_id: str | None,
    authorization: str | None,
) -> Any:
    token = bearer_token(authorization)
    if not crawl_id or not token:
        raise MissingParameterError("Missing crawl ID or authorization token")

    headers = build_headers(
        settings.pica_secret_key,
        settings.pica_firecrawl_connection_key,
        actions.FIRECRAWL_CRAWL_STATUS,
        {"Authorization": f"{BEARER_PREFIX}{token}"},
    )
    logger.info("Crawl status lookup for %s", crawl_id)
    return await client.get(
        f"/crawl/{crawl_id}", headers, label="Crawl status request"
    )
