"""
JSON-RPC 2.0 message layer for the tool server.

Every MCP message travels inside a JSON-RPC envelope; this module holds the
envelope models, the MCP payload models the server uses, and a small handler
for building and parsing messages.

Reference: https://www.jsonrpc.org/specification
"""

from typing import Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel

JSONRPC_VERSION = "2.0"

# Standard JSON-RPC error codes
PARSE_ERROR = -32700
INVALID_REQUEST = -32600
METHOD_NOT_FOUND = -32601
INVALID_PARAMS = -32602
INTERNAL_ERROR = -32603

# MCP-specific error codes
RESOURCE_NOT_FOUND = -32002

RequestId = Union[str, int]


class JSONRPCError(BaseModel):
    """JSON-RPC 2.0 error object."""

    code: int
    message: str
    data: Optional[Any] = None


class JSONRPCRequest(BaseModel):
    """JSON-RPC 2.0 request message."""

    jsonrpc: Literal["2.0"] = "2.0"
    id: RequestId
    method: str
    params: Optional[Dict[str, Any]] = None


class JSONRPCResponse(BaseModel):
    """JSON-RPC 2.0 response message (success)."""

    jsonrpc: Literal["2.0"] = "2.0"
    id: RequestId
    result: Any


class JSONRPCErrorResponse(BaseModel):
    """JSON-RPC 2.0 response message (error)."""

    jsonrpc: Literal["2.0"] = "2.0"
    id: Optional[RequestId]
    error: JSONRPCError


class JSONRPCNotification(BaseModel):
    """JSON-RPC 2.0 notification message (no response expected)."""

    jsonrpc: Literal["2.0"] = "2.0"
    method: str
    params: Optional[Dict[str, Any]] = None


JSONRPCMessage = Union[JSONRPCRequest, JSONRPCResponse, JSONRPCErrorResponse, JSONRPCNotification]
JSONRPCReply = Union[JSONRPCResponse, JSONRPCErrorResponse]


class MCPMethods:
    """MCP method names handled by the tool server."""

    INITIALIZE = "initialize"
    INITIALIZED = "notifications/initialized"
    PING = "ping"

    TOOLS_LIST = "tools/list"
    TOOLS_CALL = "tools/call"

    RESOURCES_LIST = "resources/list"
    RESOURCES_TEMPLATES_LIST = "resources/templates/list"
    RESOURCES_READ = "resources/read"

    CANCEL = "notifications/cancelled"


class MCPCapabilities(BaseModel):
    """MCP server capabilities."""

    experimental: Optional[Dict[str, Any]] = None
    logging: Optional[Dict[str, Any]] = None
    resources: Optional[Dict[str, Any]] = None
    tools: Optional[Dict[str, Any]] = None


class MCPClientCapabilities(BaseModel):
    """MCP client capabilities."""

    experimental: Optional[Dict[str, Any]] = None
    roots: Optional[Dict[str, Any]] = None
    sampling: Optional[Dict[str, Any]] = None
    elicitation: Optional[Dict[str, Any]] = None


class MCPImplementation(BaseModel):
    """MCP implementation info."""

    name: str
    version: str


class MCPInitializeParams(BaseModel):
    """Parameters for initialize request."""

    protocolVersion: str
    capabilities: MCPClientCapabilities = MCPClientCapabilities()
    clientInfo: Optional[MCPImplementation] = None


class MCPInitializeResult(BaseModel):
    """Result for initialize response."""

    protocolVersion: str
    capabilities: MCPCapabilities
    serverInfo: MCPImplementation
    instructions: Optional[str] = None


class MCPPaginatedParams(BaseModel):
    """Params of the list methods: an opaque cursor from the previous page."""

    cursor: Optional[str] = None


class MCPToolsListResult(BaseModel):
    tools: List[Dict[str, Any]]
    nextCursor: Optional[str] = None


class MCPToolsCallParams(BaseModel):
    name: str
    arguments: Optional[Dict[str, Any]] = None


class MCPTextContent(BaseModel):
    """Text content for tool results."""

    type: Literal["text"] = "text"
    text: str


class MCPResourcesListResult(BaseModel):
    resources: List[Dict[str, Any]]
    nextCursor: Optional[str] = None


class MCPResourceTemplatesListResult(BaseModel):
    resourceTemplates: List[Dict[str, Any]]
    nextCursor: Optional[str] = None


class MCPResourcesReadParams(BaseModel):
    uri: str


class MCPTextResourceContents(BaseModel):
    """Text contents of a read resource."""

    uri: str
    mimeType: str
    text: str


class MCPResourcesReadResult(BaseModel):
    contents: List[MCPTextResourceContents]


class MCPToolsCallResult(BaseModel):
    """Result for tools/call response."""

    content: List[MCPTextContent]
    isError: bool = False
    meta: Optional[Dict[str, Any]] = None

    def to_wire(self) -> Dict[str, Any]:
        """Serialize with the reserved `_meta` key, omitted when empty."""
        data: Dict[str, Any] = {
            "content": [item.model_dump() for item in self.content],
            "isError": self.isError,
        }
        if self.meta:
            data["_meta"] = self.meta
        return data


class JSONRPCHandler:
    """Handler for JSON-RPC message processing."""

    @staticmethod
    def create_request(
        id: RequestId, method: str, params: Optional[Dict[str, Any]] = None
    ) -> JSONRPCRequest:
        return JSONRPCRequest(id=id, method=method, params=params)

    @staticmethod
    def create_response(id: RequestId, result: Any) -> JSONRPCResponse:
        return JSONRPCResponse(id=id, result=result)

    @staticmethod
    def create_error_response(
        id: Optional[RequestId], code: int, message: str, data: Optional[Any] = None
    ) -> JSONRPCErrorResponse:
        error = JSONRPCError(code=code, message=message, data=data)
        return JSONRPCErrorResponse(id=id, error=error)

    @staticmethod
    def create_notification(
        method: str, params: Optional[Dict[str, Any]] = None
    ) -> JSONRPCNotification:
        return JSONRPCNotification(method=method, params=params)

    @staticmethod
    def parse_message(data: Any) -> JSONRPCMessage:
        """
        Parse a raw JSON object into a JSON-RPC message.

        Raises:
            ValueError: The object is not a valid JSON-RPC message (pydantic
                ValidationError is a ValueError)
        """
        if not isinstance(data, dict):
            raise ValueError(f"Invalid JSON-RPC message: expected object, got {type(data).__name__}")

        if "id" in data:
            if "method" in data:
                return JSONRPCRequest.model_validate(data)
            elif "result" in data:
                return JSONRPCResponse.model_validate(data)
            elif "error" in data:
                return JSONRPCErrorResponse.model_validate(data)
        elif "method" in data:
            return JSONRPCNotification.model_validate(data)

        raise ValueError("Invalid JSON-RPC message: no method, result or error")

    @staticmethod
    def is_batch(data: Any) -> bool:
        return isinstance(data, list)

    @staticmethod
    def request_id_of(data: Any) -> Optional[RequestId]:
        """Best-effort id of a raw message, used when replying to an invalid one."""
        if isinstance(data, dict):
            request_id = data.get("id")
            if isinstance(request_id, (str, int)) and not isinstance(request_id, bool):
                return request_id
        return None
