"""
HTTP transport for the tool server using FastAPI.

POST /mcp/jsonrpc accepts a single JSON-RPC message or a batch;
GET /health reports the registry sizes.
"""

import json
from contextlib import asynccontextmanager
from typing import Awaitable, Callable, Optional

from fastapi import APIRouter, FastAPI, Request
from fastapi.responses import JSONResponse, Response

from common.logging import get_logger

from .jsonrpc import INTERNAL_ERROR, PARSE_ERROR
from .server import ToolServer, error_reply

logger = get_logger(__name__)


def create_router(server: ToolServer) -> APIRouter:
    router = APIRouter(prefix="/mcp", tags=["MCP"])

    @router.post("/jsonrpc")
    async def handle_jsonrpc(request: Request) -> Response:
        """
        Main JSON-RPC endpoint.

        Notifications and cancelled calls produce no reply; they are answered
        with 202 Accepted and an empty body.
        """
        try:
            body = json.loads(await request.body())
        except ValueError as e:
            return JSONResponse(
                content=error_reply(None, PARSE_ERROR, f"Parse error: {e}"), status_code=400
            )

        try:
            reply = await server.handle_payload(body)
        except Exception as e:
            logger.error(event="jsonrpc_handler_error", error=str(e), error_type=type(e).__name__)
            return JSONResponse(
                content=error_reply(None, INTERNAL_ERROR, "Internal server error"),
                status_code=500,
            )

        if reply is None:
            return Response(status_code=202)
        return JSONResponse(content=reply)

    return router


def create_app(
    server: ToolServer, on_shutdown: Optional[Callable[[], Awaitable[None]]] = None
) -> FastAPI:
    """
    Create and configure the FastAPI application around a ToolServer.

    Args:
        server: Tool server handling decoded JSON-RPC payloads
        on_shutdown: Coroutine function awaited when the app stops, e.g.
            closing the backend transport
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        yield
        if on_shutdown is not None:
            await on_shutdown()

    app = FastAPI(
        title=server.server_info.name, version=server.server_info.version, lifespan=lifespan
    )
    app.include_router(create_router(server))

    @app.get("/health")
    async def health_check():
        return {
            "status": "healthy",
            "server": server.server_info.model_dump(),
            "tools_count": len(server.registry),
            "resources_count": len(server.resources) if server.resources is not None else 0,
            "in_flight": len(server.in_flight),
        }

    return app
