import logging
from typing import Any

from src.config.settings import Settings
from src.modules.gateway import actions
from src.modules.gateway.client import GatewayClient, build_headers
from src.modules.search.schemas import SearchRequest

logger = logging.getLogger(__name__)

SEARCH_PATH = "/search"
DEFAULT_SEARCH_DEPTH = "basic"
DEFAULT_MAX_RESULTS = 5


def build_search_body(request: SearchRequest) -> dict[str, Any]:
    return {
        "query": request.query,
        "search_depth": DEFAULT_SEARCH_DEPTH,
        "max_results": DEFAULT_MAX_RESULTS,
        **request.options(),
    }


async def search(client: GatewayClient, settings: Settings, request: SearchRequest) -> Any:
    headers = build_headers(
        settings.pica_secret_key,
        settings.pica_tavily_connection_key,
        actions.TAVILY_SEARCH,
        {"Content-Type": "application/json"},
    )
    body = build_search_body(request)
    logger.info("Web search (depth=%s, max_results=%s)", body["search_depth"], body["max_results"])
    return await client.post(SEARCH_PATH, headers, body, label="Search request")
