import logging

import httpx
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, PlainTextResponse, Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.modules.gateway.errors import GatewayError

logger = logging.getLogger(__name__)

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "authorization, x-client-info, apikey, content-type",
    "Access-Control-Allow-Methods": "GET, POST, OPTIONS",
}


def error_response(message: str) -> JSONResponse:
    return JSONResponse({"error": message}, status_code=500, headers=CORS_HEADERS)


class CORSPassthroughMiddleware(BaseHTTPMiddleware):
    """Answers preflight directly and stamps CORS headers on every response.

    Also the last line of defence: anything that escapes the exception
    handlers below is logged and turned into the same ``{"error": ...}`` body.
    """

    async def dispatch(self, request: Request, call_next) -> Response:
        if request.method == "OPTIONS":
            return PlainTextResponse("ok", headers=CORS_HEADERS)
        try:
            response = await call_next(request)
        except Exception as exc:
            logger.exception("Unhandled error on %s", request.url.path)
            return error_response(str(exc))
        response.headers.update(CORS_HEADERS)
        return response


async def _gateway_error_handler(request: Request, exc: GatewayError) -> JSONResponse:
    logger.error("Request to %s failed: %s", request.url.path, exc)
    return error_response(str(exc))


async def _network_error_handler(request: Request, exc: httpx.HTTPError) -> JSONResponse:
    logger.error("Gateway unreachable for %s: %s", request.url.path, exc)
    return error_response(str(exc) or exc.__class__.__name__)


async def _validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    details = "; ".join(
        f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
        for err in exc.errors()
    )
    logger.error("Invalid request to %s: %s", request.url.path, details)
    return error_response(f"Invalid request: {details}")


async def _http_error_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    logger.error("%s %s rejected: %s", request.method, request.url.path, exc.detail)
    return error_response(str(exc.detail))


def install_http_layer(app: FastAPI) -> None:
    app.add_middleware(CORSPassthroughMiddleware)
    app.add_exception_handler(StarletteHTTPException, _http_error_handler)
    app.add_exception_handler(GatewayError, _gateway_error_handler)
    app.add_exception_handler(httpx.HTTPError, _network_error_handler)
    app.add_exception_handler(RequestValidationError, _validation_error_handler)
