"""
Tests for the MCP protocol layer.

Tests the JSON-RPC message handling, capabilities handshake, cursor
pagination, tool calls, resource reads, cancellation, and the stdio and HTTP
transports.
"""

import asyncio
import io
import json

import pytest
from fastapi.testclient import TestClient
from unittest.mock import AsyncMock

from catalog.base import endpoint, resource
from common.config import ServerConfig
from engine.registry import ToolRegistry
from engine.errors import TransportError
from engine.resources import ResourceRegistry
from engine.schema import ParameterKind, ParameterSpec, ToolSpec
from engine.transport import TransportClient
from protocol.http import create_app
from protocol.jsonrpc import (
    INTERNAL_ERROR,
    INVALID_PARAMS,
    INVALID_REQUEST,
    METHOD_NOT_FOUND,
    PARSE_ERROR,
    RESOURCE_NOT_FOUND,
    JSONRPCErrorResponse,
    JSONRPCHandler,
    JSONRPCNotification,
    JSONRPCRequest,
    JSONRPCResponse,
    MCPMethods,
    MCPToolsCallResult,
    MCPTextContent,
)
from protocol.server import MCP_PROTOCOL_VERSION, ToolServer
from protocol.stdio import StdioTransport


def user_tool(index: int) -> ToolSpec:
    return ToolSpec(
        name=f"tool_{index:02d}",
        description=f"Tool number {index}",
        path_template=f"/index.php?m=demo&f=tool{index}&t=json",
        params=(ParameterSpec(name="userID", kind=ParameterKind.INTEGER, required=True),),
        action=f"run tool {index}",
    )


@pytest.fixture
def transport():
    spy = AsyncMock(spec=TransportClient)
    spy.get.return_value = b'{"status":"success"}'
    return spy


@pytest.fixture
def registry(transport):
    registry = ToolRegistry(transport)
    registry.register_all([(user_tool(index), None) for index in range(5)])
    registry.seal()
    return registry


@pytest.fixture
def server(registry):
    return ToolServer(registry, ServerConfig(page_size=2))


@pytest.fixture
def resource_server(registry, transport):
    resources = ResourceRegistry(transport)
    resources.register_all(
        [
            resource("zentao://products", "Products", endpoint("product", "browse"), "All products"),
            resource("zentao://programs/kanban", "Programs Kanban", endpoint("program", "kanban")),
            resource(
                "zentao://programs/{id}",
                "Program",
                endpoint("program", "view"),
                keys={"id": "programID"},
            ),
            resource(
                "zentao://{objectType}/{objectID}/testreports",
                "Test Reports",
                endpoint("testreport", "browse"),
                enums={"objectType": ("projects", "products")},
            ),
        ]
    )
    resources.seal()
    return ToolServer(registry, ServerConfig(page_size=2), resources=resources)


def request(id, method, params=None):
    return JSONRPCHandler.create_request(id=id, method=method, params=params).model_dump()


def call(id, name, arguments):
    return request(id, MCPMethods.TOOLS_CALL, {"name": name, "arguments": arguments})


class TestJSONRPCProtocol:
    """Test JSON-RPC 2.0 protocol compliance."""

    def test_create_request(self):
        message = JSONRPCHandler.create_request(id="test-123", method="test/method", params={"a": 1})

        assert message.jsonrpc == "2.0"
        assert message.id == "test-123"
        assert message.params == {"a": 1}

    def test_create_error_response(self):
        error_response = JSONRPCHandler.create_error_response(
            id="test-123", code=-32602, message="Invalid params"
        )

        assert error_response.error.code == -32602
        assert error_response.error.message == "Invalid params"

    def test_parse_messages(self):
        assert isinstance(
            JSONRPCHandler.parse_message({"jsonrpc": "2.0", "id": 1, "method": "ping"}),
            JSONRPCRequest,
        )
        assert isinstance(
            JSONRPCHandler.parse_message({"jsonrpc": "2.0", "method": "notifications/initialized"}),
            JSONRPCNotification,
        )
        assert isinstance(
            JSONRPCHandler.parse_message({"jsonrpc": "2.0", "id": 1, "result": {}}),
            JSONRPCResponse,
        )
        assert isinstance(
            JSONRPCHandler.parse_message(
                {"jsonrpc": "2.0", "id": 1, "error": {"code": -1, "message": "x"}}
            ),
            JSONRPCErrorResponse,
        )

    @pytest.mark.parametrize(
        "data",
        [
            {"jsonrpc": "2.0"},
            {"jsonrpc": "1.0", "id": 1, "method": "ping"},
            {"jsonrpc": "2.0", "id": 1},
            "ping",
        ],
    )
    def test_parse_invalid(self, data):
        with pytest.raises(ValueError):
            JSONRPCHandler.parse_message(data)

    def test_batch_detection(self):
        assert not JSONRPCHandler.is_batch({"jsonrpc": "2.0", "id": "1", "method": "test"})
        assert JSONRPCHandler.is_batch([{"jsonrpc": "2.0", "id": "1", "method": "test"}])

    def test_call_result_meta(self):
        result = MCPToolsCallResult(
            content=[MCPTextContent(text="boom")], isError=True, meta={"errorKind": "transport_error"}
        )

        assert result.to_wire() == {
            "content": [{"type": "text", "text": "boom"}],
            "isError": True,
            "_meta": {"errorKind": "transport_error"},
        }
        assert "_meta" not in MCPToolsCallResult(content=[]).to_wire()


class TestServer:
    @pytest.mark.asyncio
    async def test_initialize(self, server):
        reply = await server.handle_payload(
            request(
                "init-1",
                MCPMethods.INITIALIZE,
                {
                    "protocolVersion": MCP_PROTOCOL_VERSION,
                    "capabilities": {"roots": {"listChanged": True}},
                    "clientInfo": {"name": "TestClient", "version": "1.0.0"},
                },
            )
        )

        result = reply["result"]
        assert reply["id"] == "init-1"
        assert result["protocolVersion"] == MCP_PROTOCOL_VERSION
        assert "tools" in result["capabilities"]
        assert result["serverInfo"]["name"] == "ZenTao MCP Server"

    @pytest.mark.asyncio
    async def test_initialize_without_params(self, server):
        reply = await server.handle_payload(request(1, MCPMethods.INITIALIZE))

        assert reply["error"]["code"] == INVALID_PARAMS

    @pytest.mark.asyncio
    async def test_ping(self, server):
        reply = await server.handle_payload(request(2, MCPMethods.PING))

        assert "timestamp" in reply["result"]

    @pytest.mark.asyncio
    async def test_unknown_method(self, server):
        reply = await server.handle_payload(request(3, "resources/list"))

        assert reply["error"]["code"] == METHOD_NOT_FOUND

    @pytest.mark.asyncio
    async def test_invalid_request(self, server):
        reply = await server.handle_payload({"jsonrpc": "2.0", "id": 4})

        assert reply["id"] == 4
        assert reply["error"]["code"] == INVALID_REQUEST

    @pytest.mark.asyncio
    async def test_notification_has_no_reply(self, server):
        reply = await server.handle_payload(
            JSONRPCHandler.create_notification(MCPMethods.INITIALIZED).model_dump()
        )

        assert reply is None

    @pytest.mark.asyncio
    async def test_tools_list_pagination(self, server):
        names = []
        cursor = None
        pages = 0
        while True:
            params = {"cursor": cursor} if cursor else {}
            reply = await server.handle_payload(request(pages, MCPMethods.TOOLS_LIST, params))
            result = reply["result"]
            names.extend(tool["name"] for tool in result["tools"])
            pages += 1
            cursor = result.get("nextCursor")
            if cursor is None:
                break

        assert pages == 3
        assert names == [f"tool_{index:02d}" for index in range(5)]

    @pytest.mark.asyncio
    async def test_tools_list_entry_shape(self, server):
        reply = await server.handle_payload(request(1, MCPMethods.TOOLS_LIST))
        tool = reply["result"]["tools"][0]

        assert tool["name"] == "tool_00"
        assert tool["inputSchema"]["required"] == ["userID"]

    @pytest.mark.parametrize("cursor", ["abc", "-1", "99"])
    @pytest.mark.asyncio
    async def test_tools_list_invalid_cursor(self, server, cursor):
        reply = await server.handle_payload(request(1, MCPMethods.TOOLS_LIST, {"cursor": cursor}))

        assert reply["error"]["code"] == INVALID_PARAMS

    @pytest.mark.asyncio
    async def test_tools_call_success(self, server, transport):
        reply = await server.handle_payload(call(5, "tool_01", {"userID": 42.0}))

        assert reply["result"] == {
            "content": [{"type": "text", "text": '{"status":"success"}'}],
            "isError": False,
        }
        transport.get.assert_awaited_once_with("/index.php?m=demo&f=tool1&t=json&userID=42")

    @pytest.mark.asyncio
    async def test_tools_call_validation_failure(self, server, transport):
        reply = await server.handle_payload(call(6, "tool_01", {}))

        result = reply["result"]
        assert result["isError"] is True
        assert "userID" in result["content"][0]["text"]
        assert result["_meta"] == {"errorKind": "missing_required_parameter"}
        transport.get.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_tools_call_unknown_tool(self, server):
        reply = await server.handle_payload(call(7, "nope", {}))

        assert reply["result"]["isError"] is True
        assert reply["result"]["_meta"] == {"errorKind": "unknown_tool"}

    @pytest.mark.asyncio
    async def test_tools_call_requires_name(self, server):
        reply = await server.handle_payload(request(8, MCPMethods.TOOLS_CALL, {"arguments": {}}))

        assert reply["error"]["code"] == INVALID_PARAMS

    @pytest.mark.asyncio
    async def test_batch(self, server):
        replies = await server.handle_payload(
            [
                request(1, MCPMethods.PING),
                JSONRPCHandler.create_notification(MCPMethods.INITIALIZED).model_dump(),
                call(2, "tool_00", {"userID": 1}),
            ]
        )

        assert sorted(reply["id"] for reply in replies) == [1, 2]

    @pytest.mark.asyncio
    async def test_empty_batch(self, server):
        reply = await server.handle_payload([])

        assert reply["error"]["code"] == INVALID_REQUEST

    @pytest.mark.asyncio
    async def test_cancellation(self, server, transport):
        started = asyncio.Event()

        async def slow_get(path):
            started.set()
            await asyncio.sleep(10)
            return b"{}"

        transport.get.side_effect = slow_get

        pending = asyncio.create_task(server.handle_payload(call("slow", "tool_00", {"userID": 1})))
        await started.wait()
        assert server.in_flight == ["slow"]

        await server.handle_payload(
            JSONRPCHandler.create_notification(
                MCPMethods.CANCEL, {"requestId": "slow", "reason": "user abort"}
            ).model_dump()
        )

        assert await asyncio.wait_for(pending, timeout=1) is None
        assert server.in_flight == []

    @pytest.mark.asyncio
    async def test_cancel_unknown_request_is_ignored(self, server):
        reply = await server.handle_payload(
            JSONRPCHandler.create_notification(MCPMethods.CANCEL, {"requestId": 99}).model_dump()
        )

        assert reply is None


class TestResources:
    @pytest.mark.asyncio
    async def test_capability_advertised(self, resource_server, server):
        params = {"protocolVersion": MCP_PROTOCOL_VERSION}
        with_resources = await resource_server.handle_payload(
            request(1, MCPMethods.INITIALIZE, params)
        )
        without_resources = await server.handle_payload(request(1, MCPMethods.INITIALIZE, params))

        assert with_resources["result"]["capabilities"]["resources"] == {
            "subscribe": False,
            "listChanged": False,
        }
        assert "resources" not in without_resources["result"]["capabilities"]

    @pytest.mark.asyncio
    async def test_resources_list(self, resource_server):
        reply = await resource_server.handle_payload(request(1, MCPMethods.RESOURCES_LIST))

        assert reply["result"]["resources"] == [
            {
                "uri": "zentao://products",
                "name": "Products",
                "mimeType": "application/json",
                "description": "All products",
            },
            {
                "uri": "zentao://programs/kanban",
                "name": "Programs Kanban",
                "mimeType": "application/json",
            },
        ]
        assert "nextCursor" not in reply["result"]

    @pytest.mark.asyncio
    async def test_templates_list(self, resource_server):
        reply = await resource_server.handle_payload(
            request(1, MCPMethods.RESOURCES_TEMPLATES_LIST)
        )

        templates = reply["result"]["resourceTemplates"]
        assert [entry["uriTemplate"] for entry in templates] == [
            "zentao://programs/{id}",
            "zentao://{objectType}/{objectID}/testreports",
        ]

    @pytest.mark.asyncio
    async def test_templates_list_invalid_cursor(self, resource_server):
        reply = await resource_server.handle_payload(
            request(1, MCPMethods.RESOURCES_TEMPLATES_LIST, {"cursor": "x"})
        )

        assert reply["error"]["code"] == INVALID_PARAMS

    @pytest.mark.asyncio
    async def test_read_concrete_resource(self, resource_server, transport):
        reply = await resource_server.handle_payload(
            request(1, MCPMethods.RESOURCES_READ, {"uri": "zentao://products"})
        )

        assert reply["result"] == {
            "contents": [
                {
                    "uri": "zentao://products",
                    "mimeType": "application/json",
                    "text": '{"status":"success"}',
                }
            ]
        }
        transport.get.assert_awaited_once_with("/index.php?m=product&f=browse&t=json")

    @pytest.mark.asyncio
    async def test_read_template(self, resource_server, transport):
        reply = await resource_server.handle_payload(
            request(1, MCPMethods.RESOURCES_READ, {"uri": "zentao://programs/12"})
        )

        assert reply["result"]["contents"][0]["uri"] == "zentao://programs/12"
        transport.get.assert_awaited_once_with(
            "/index.php?m=program&f=view&t=json&programID=12"
        )

    @pytest.mark.asyncio
    async def test_concrete_resource_wins_over_template(self, resource_server, transport):
        await resource_server.handle_payload(
            request(1, MCPMethods.RESOURCES_READ, {"uri": "zentao://programs/kanban"})
        )

        transport.get.assert_awaited_once_with("/index.php?m=program&f=kanban&t=json")

    @pytest.mark.asyncio
    async def test_read_unknown_uri(self, resource_server, transport):
        reply = await resource_server.handle_payload(
            request(1, MCPMethods.RESOURCES_READ, {"uri": "zentao://nothing/here"})
        )

        assert reply["error"]["code"] == RESOURCE_NOT_FOUND
        assert reply["error"]["data"] == {"uri": "zentao://nothing/here"}
        transport.get.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_read_variable_outside_enum(self, resource_server, transport):
        reply = await resource_server.handle_payload(
            request(1, MCPMethods.RESOURCES_READ, {"uri": "zentao://bugs/3/testreports"})
        )

        assert reply["error"]["code"] == INVALID_PARAMS
        assert reply["error"]["data"]["errorKind"] == "enum_violation"
        transport.get.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_read_backend_failure(self, resource_server, transport):
        transport.get.side_effect = TransportError("ZenTao returned HTTP 500", status_code=500)

        reply = await resource_server.handle_payload(
            request(1, MCPMethods.RESOURCES_READ, {"uri": "zentao://products"})
        )

        assert reply["error"]["code"] == INTERNAL_ERROR
        assert reply["error"]["message"].startswith("Failed to read Products")
        assert reply["error"]["data"]["errorKind"] == "transport_error"

    @pytest.mark.asyncio
    async def test_read_requires_uri(self, resource_server):
        reply = await resource_server.handle_payload(request(1, MCPMethods.RESOURCES_READ, {}))

        assert reply["error"]["code"] == INVALID_PARAMS

    @pytest.mark.asyncio
    async def test_read_cancellation(self, resource_server, transport):
        started = asyncio.Event()

        async def slow_get(path):
            started.set()
            await asyncio.sleep(10)
            return b"{}"

        transport.get.side_effect = slow_get

        pending = asyncio.create_task(
            resource_server.handle_payload(
                request("read", MCPMethods.RESOURCES_READ, {"uri": "zentao://products"})
            )
        )
        await started.wait()
        assert resource_server.in_flight == ["read"]

        await resource_server.handle_payload(
            JSONRPCHandler.create_notification(MCPMethods.CANCEL, {"requestId": "read"}).model_dump()
        )

        assert await asyncio.wait_for(pending, timeout=1) is None
        assert resource_server.in_flight == []


class TestStdioTransport:
    @pytest.mark.asyncio
    async def test_round_trip(self, server):
        lines = [
            json.dumps(request(1, MCPMethods.PING)),
            "",
            json.dumps(call(2, "tool_03", {"userID": 3})),
            json.dumps(JSONRPCHandler.create_notification(MCPMethods.INITIALIZED).model_dump()),
            "{not json",
        ]
        stdin = io.StringIO("\n".join(lines) + "\n")
        stdout = io.StringIO()

        await StdioTransport(server, stdin=stdin, stdout=stdout).run()

        replies = [json.loads(line) for line in stdout.getvalue().splitlines()]
        by_id = {reply["id"]: reply for reply in replies}

        assert len(replies) == 3
        assert "timestamp" in by_id[1]["result"]
        assert by_id[2]["result"]["isError"] is False
        assert by_id[None]["error"]["code"] == PARSE_ERROR

    @pytest.mark.asyncio
    async def test_empty_input(self, server):
        stdout = io.StringIO()

        await StdioTransport(server, stdin=io.StringIO(""), stdout=stdout).run()

        assert stdout.getvalue() == ""


class TestHttpApp:
    @pytest.fixture
    def client(self, server):
        return TestClient(create_app(server))

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"
        assert response.json()["tools_count"] == 5
        assert response.json()["resources_count"] == 0

    def test_health_counts_resources(self, resource_server):
        response = TestClient(create_app(resource_server)).get("/health")

        assert response.json()["resources_count"] == 4

    def test_single_request(self, client):
        response = client.post("/mcp/jsonrpc", json=call(1, "tool_02", {"userID": 2}))

        assert response.status_code == 200
        assert response.json()["result"]["isError"] is False

    def test_batch_request(self, client):
        response = client.post(
            "/mcp/jsonrpc", json=[request(1, MCPMethods.PING), request(2, MCPMethods.TOOLS_LIST)]
        )

        assert response.status_code == 200
        assert len(response.json()) == 2

    def test_notification_is_accepted(self, client):
        response = client.post(
            "/mcp/jsonrpc",
            json=JSONRPCHandler.create_notification(MCPMethods.INITIALIZED).model_dump(),
        )

        assert response.status_code == 202
        assert response.content == b""

    def test_parse_error(self, client):
        response = client.post(
            "/mcp/jsonrpc", content=b"{oops", headers={"content-type": "application/json"}
        )

        assert response.status_code == 400
        assert response.json()["error"]["code"] == PARSE_ERROR

    def test_shutdown_hook(self, server):
        closed = []

        async def on_shutdown():
            closed.append(True)

        with TestClient(create_app(server, on_shutdown=on_shutdown)) as client:
            client.get("/health")

        assert closed == [True]
