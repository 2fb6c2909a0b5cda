"""
MCP tool server.

Speaks the JSON-RPC 2.0 side of the Model Context Protocol on top of a sealed
ToolRegistry:
- initialize/capabilities handshake and ping
- tools/list with cursor-based pagination
- tools/call returning text content, with the error kind in `_meta`
- resources/list, resources/templates/list and resources/read when a
  ResourceRegistry is attached
- cancellation of in-flight calls via notifications/cancelled

The server is transport-agnostic; stdio and HTTP shells feed it decoded JSON.
"""

import asyncio
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Union

from common.config import ServerConfig
from common.logging import get_logger, log_startup_message
from engine.errors import ErrorKind, UnknownResource
from engine.registry import ToolRegistry
from engine.resources import ResourceRegistry
from engine.wrapper import CallResult

from .jsonrpc import (
    INTERNAL_ERROR,
    INVALID_PARAMS,
    INVALID_REQUEST,
    METHOD_NOT_FOUND,
    RESOURCE_NOT_FOUND,
    JSONRPCErrorResponse,
    JSONRPCHandler,
    JSONRPCNotification,
    JSONRPCReply,
    JSONRPCRequest,
    MCPCapabilities,
    MCPImplementation,
    MCPInitializeParams,
    MCPInitializeResult,
    MCPMethods,
    MCPPaginatedParams,
    MCPResourcesListResult,
    MCPResourcesReadParams,
    MCPResourcesReadResult,
    MCPResourceTemplatesListResult,
    MCPTextContent,
    MCPTextResourceContents,
    MCPToolsCallParams,
    MCPToolsCallResult,
    MCPToolsListResult,
    RequestId,
)

logger = get_logger(__name__)

MCP_PROTOCOL_VERSION = "2025-06-18"

INSTRUCTIONS = (
    "This server exposes ZenTao project-management operations as tools, and "
    "read-only ZenTao views as zentao:// resources. Tools and resources return "
    "the raw ZenTao JSON response as text."
)

# Failures caused by the URI variables rather than the backend
_ARGUMENT_ERROR_KINDS = frozenset(
    {
        ErrorKind.MISSING_REQUIRED_PARAMETER,
        ErrorKind.TYPE_MISMATCH,
        ErrorKind.ENUM_VIOLATION,
        ErrorKind.UNRESOLVED_PLACEHOLDER,
    }
)


class ToolServer:
    """
    MCP server over a ToolRegistry.

    Requests for different ids run concurrently; each tools/call and
    resources/read is tracked by request id so a cancellation notification
    can stop it.
    """

    def __init__(
        self,
        registry: ToolRegistry,
        config: Optional[ServerConfig] = None,
        resources: Optional[ResourceRegistry] = None,
    ):
        self.registry = registry
        self.resources = resources
        self.config = config or ServerConfig()
        self.capabilities = MCPCapabilities(tools={"listChanged": False})
        if resources is not None:
            self.capabilities.resources = {"subscribe": False, "listChanged": False}
        self.server_info = MCPImplementation(name=self.config.name, version=self.config.version)
        self._in_flight: Dict[RequestId, asyncio.Task] = {}

        log_startup_message(
            "MCP Tool Server Initialized",
            protocol_version=MCP_PROTOCOL_VERSION,
            tools_count=len(registry),
            resources_count=len(resources) if resources is not None else 0,
            page_size=self.config.page_size,
        )

    @property
    def in_flight(self) -> List[RequestId]:
        """Ids of tool calls and resource reads currently executing."""
        return list(self._in_flight)

    async def handle_payload(self, data: Any) -> Optional[Union[Dict[str, Any], List[Dict[str, Any]]]]:
        """
        Handle one decoded JSON value: a single message or a batch.

        Returns:
            The serialized reply, a list of replies for a batch, or None when
            nothing should be sent back (notifications, cancelled calls)
        """
        if JSONRPCHandler.is_batch(data):
            if not data:
                return JSONRPCHandler.create_error_response(
                    None, INVALID_REQUEST, "Empty batch"
                ).model_dump()

            replies = await asyncio.gather(*(self.handle_message(item) for item in data))
            serialized = [reply.model_dump() for reply in replies if reply is not None]
            return serialized or None

        reply = await self.handle_message(data)
        return reply.model_dump() if reply is not None else None

    async def handle_message(self, data: Any) -> Optional[JSONRPCReply]:
        """Handle a single decoded JSON-RPC message."""
        try:
            message = JSONRPCHandler.parse_message(data)
        except ValueError as e:
            return JSONRPCHandler.create_error_response(
                JSONRPCHandler.request_id_of(data), INVALID_REQUEST, f"Invalid request: {e}"
            )

        if isinstance(message, JSONRPCRequest):
            return await self.handle_request(message)
        if isinstance(message, JSONRPCNotification):
            await self.handle_notification(message)
            return None

        # Replies from the client; this server never issues requests
        logger.debug(event="jsonrpc_reply_ignored", id=message.id)
        return None

    async def handle_request(self, request: JSONRPCRequest) -> Optional[JSONRPCReply]:
        """Route a JSON-RPC request to its handler."""
        logger.debug(event="jsonrpc_request", method=request.method, id=request.id)
        try:
            if request.method == MCPMethods.INITIALIZE:
                return self._handle_initialize(request)
            elif request.method == MCPMethods.PING:
                return self._handle_ping(request)
            elif request.method == MCPMethods.TOOLS_LIST:
                return self._handle_tools_list(request)
            elif request.method == MCPMethods.TOOLS_CALL:
                return await self._handle_tools_call(request)
            elif request.method == MCPMethods.RESOURCES_LIST and self.resources is not None:
                return self._handle_resources_list(request)
            elif (
                request.method == MCPMethods.RESOURCES_TEMPLATES_LIST
                and self.resources is not None
            ):
                return self._handle_resource_templates_list(request)
            elif request.method == MCPMethods.RESOURCES_READ and self.resources is not None:
                return await self._handle_resources_read(request)
            else:
                return JSONRPCHandler.create_error_response(
                    request.id, METHOD_NOT_FOUND, f"Method '{request.method}' not found"
                )
        except Exception as e:
            logger.error(
                event="request_handler_error",
                method=request.method,
                error=str(e),
                error_type=type(e).__name__,
            )
            return JSONRPCHandler.create_error_response(
                request.id, INTERNAL_ERROR, f"Internal error: {e}"
            )

    async def handle_notification(self, notification: JSONRPCNotification) -> None:
        logger.debug(event="jsonrpc_notification", method=notification.method)

        if notification.method == MCPMethods.INITIALIZED:
            logger.info(event="client_ready")
        elif notification.method == MCPMethods.CANCEL:
            self._handle_cancel(notification)
        else:
            logger.warning(event="unknown_notification", method=notification.method)

    def _handle_initialize(self, request: JSONRPCRequest) -> JSONRPCReply:
        """Handle initialize request - capability negotiation."""
        if not request.params:
            return JSONRPCHandler.create_error_response(
                request.id, INVALID_PARAMS, "Initialize requires params"
            )
        try:
            params = MCPInitializeParams.model_validate(request.params)
        except ValueError as e:
            return JSONRPCHandler.create_error_response(
                request.id, INVALID_PARAMS, f"Invalid initialize params: {e}"
            )

        if params.protocolVersion != MCP_PROTOCOL_VERSION:
            logger.warning(
                event="protocol_version_mismatch",
                client_version=params.protocolVersion,
                server_version=MCP_PROTOCOL_VERSION,
            )

        result = MCPInitializeResult(
            protocolVersion=MCP_PROTOCOL_VERSION,
            capabilities=self.capabilities,
            serverInfo=self.server_info,
            instructions=INSTRUCTIONS,
        )

        logger.info(
            event="client_initialized",
            client_info=params.clientInfo.model_dump() if params.clientInfo else None,
            protocol_version=params.protocolVersion,
        )
        return JSONRPCHandler.create_response(request.id, result.model_dump(exclude_none=True))

    def _handle_ping(self, request: JSONRPCRequest) -> JSONRPCReply:
        return JSONRPCHandler.create_response(
            request.id,
            {
                "timestamp": datetime.now(timezone.utc).isoformat(),
                "server": self.server_info.model_dump(),
            },
        )

    def _paginate(self, request: JSONRPCRequest, items: List[Dict[str, Any]]):
        """
        Cut one page out of items using the request's cursor.

        Returns:
            (page, next_cursor, None), or (None, None, error reply) for
            invalid params or cursor
        """
        try:
            params = MCPPaginatedParams.model_validate(request.params or {})
        except ValueError as e:
            return None, None, JSONRPCHandler.create_error_response(
                request.id, INVALID_PARAMS, f"Invalid {request.method} params: {e}"
            )

        start_index = 0
        if params.cursor:
            try:
                start_index = int(params.cursor)
            except ValueError:
                start_index = -1
            if start_index < 0 or start_index > len(items):
                return None, None, JSONRPCHandler.create_error_response(
                    request.id, INVALID_PARAMS, "Invalid cursor format"
                )

        end_index = start_index + self.config.page_size
        page = items[start_index:end_index]
        next_cursor = str(end_index) if end_index < len(items) else None

        logger.debug(
            event="list_page",
            method=request.method,
            total=len(items),
            returned=len(page),
            cursor=params.cursor,
            next_cursor=next_cursor,
        )
        return page, next_cursor, None

    def _handle_tools_list(self, request: JSONRPCRequest) -> JSONRPCReply:
        """Handle tools/list request with cursor-based pagination."""
        page, next_cursor, error = self._paginate(request, self.registry.manifest())
        if error is not None:
            return error

        result = MCPToolsListResult(tools=page, nextCursor=next_cursor)
        return JSONRPCHandler.create_response(request.id, result.model_dump(exclude_none=True))

    def _handle_resources_list(self, request: JSONRPCRequest) -> JSONRPCReply:
        entries = [spec.to_manifest_entry() for spec in self.resources.list_resources()]
        page, next_cursor, error = self._paginate(request, entries)
        if error is not None:
            return error

        result = MCPResourcesListResult(resources=page, nextCursor=next_cursor)
        return JSONRPCHandler.create_response(request.id, result.model_dump(exclude_none=True))

    def _handle_resource_templates_list(self, request: JSONRPCRequest) -> JSONRPCReply:
        entries = [spec.to_manifest_entry() for spec in self.resources.list_templates()]
        page, next_cursor, error = self._paginate(request, entries)
        if error is not None:
            return error

        result = MCPResourceTemplatesListResult(resourceTemplates=page, nextCursor=next_cursor)
        return JSONRPCHandler.create_response(request.id, result.model_dump(exclude_none=True))

    async def _run_tracked(self, request_id: RequestId, coro) -> Optional[CallResult]:
        """
        Run coro as the in-flight work of request_id.

        Returns:
            The CallResult, or None when the client cancelled the request
        """
        task = asyncio.ensure_future(coro)
        self._in_flight[request_id] = task
        try:
            await asyncio.wait({task})
        finally:
            self._in_flight.pop(request_id, None)
            if not task.done():
                task.cancel()

        if task.cancelled():
            return None
        return task.result()

    def _id_in_use(self, request: JSONRPCRequest) -> Optional[JSONRPCReply]:
        if request.id in self._in_flight:
            return JSONRPCHandler.create_error_response(
                request.id, INVALID_REQUEST, f"Request id {request.id!r} is already in use"
            )
        return None

    async def _handle_tools_call(self, request: JSONRPCRequest) -> Optional[JSONRPCReply]:
        """
        Handle tools/call request.

        Tool failures are reported as a result with isError set, never as a
        JSON-RPC error. A call cancelled by the client gets no reply.
        """
        if not request.params:
            return JSONRPCHandler.create_error_response(
                request.id, INVALID_PARAMS, "Tool call requires params"
            )
        try:
            params = MCPToolsCallParams.model_validate(request.params)
        except ValueError as e:
            return JSONRPCHandler.create_error_response(
                request.id, INVALID_PARAMS, f"Invalid tools/call params: {e}"
            )

        in_use = self._id_in_use(request)
        if in_use is not None:
            return in_use

        call_result = await self._run_tracked(
            request.id, self.registry.dispatch(params.name, params.arguments)
        )
        if call_result is None:
            logger.info(event="tool_call_cancelled", tool_name=params.name, id=request.id)
            return None

        meta = None
        if not call_result.ok and call_result.error_kind is not None:
            meta = {"errorKind": call_result.error_kind.value}

        result = MCPToolsCallResult(
            content=[MCPTextContent(text=call_result.to_text())],
            isError=not call_result.ok,
            meta=meta,
        )

        return JSONRPCHandler.create_response(request.id, result.to_wire())

    async def _handle_resources_read(self, request: JSONRPCRequest) -> Optional[JSONRPCReply]:
        """
        Handle resources/read request.

        An unknown URI is RESOURCE_NOT_FOUND; a URI variable outside its
        allowed values is INVALID_PARAMS; a backend failure is INTERNAL_ERROR.
        """
        try:
            params = MCPResourcesReadParams.model_validate(request.params or {})
        except ValueError as e:
            return JSONRPCHandler.create_error_response(
                request.id, INVALID_PARAMS, f"Invalid resources/read params: {e}"
            )

        try:
            spec, variables = self.resources.resolve(params.uri)
        except UnknownResource as e:
            return JSONRPCHandler.create_error_response(
                request.id, RESOURCE_NOT_FOUND, e.message, {"uri": params.uri}
            )

        in_use = self._id_in_use(request)
        if in_use is not None:
            return in_use

        call_result = await self._run_tracked(request.id, self.resources.read(spec, variables))
        if call_result is None:
            logger.info(event="resource_read_cancelled", uri_template=spec.uri_template, id=request.id)
            return None

        if not call_result.ok:
            kind = call_result.error_kind
            code = INVALID_PARAMS if kind in _ARGUMENT_ERROR_KINDS else INTERNAL_ERROR
            return JSONRPCHandler.create_error_response(
                request.id,
                code,
                call_result.to_text(),
                {"uri": params.uri, "errorKind": kind.value if kind is not None else None},
            )

        result = MCPResourcesReadResult(
            contents=[
                MCPTextResourceContents(
                    uri=params.uri, mimeType=spec.mime_type, text=call_result.payload or ""
                )
            ]
        )
        return JSONRPCHandler.create_response(request.id, result.model_dump())

    def _handle_cancel(self, notification: JSONRPCNotification) -> None:
        params = notification.params or {}
        request_id = params.get("requestId")
        task = self._in_flight.get(request_id) if isinstance(request_id, (str, int)) else None

        if task is None:
            logger.debug(event="cancel_ignored", request_id=request_id)
            return

        task.cancel()
        logger.info(event="request_cancelled", request_id=request_id, reason=params.get("reason"))


def error_reply(request_id: Optional[RequestId], code: int, message: str) -> Dict[str, Any]:
    """Serialized JSON-RPC error, for transports that fail before the server is reached."""
    response: JSONRPCErrorResponse = JSONRPCHandler.create_error_response(request_id, code, message)
    return response.model_dump()
