"""
Tests for the tool registry: registration checks and the dispatch pipeline
against a spy transport.
"""

import asyncio

import pytest
from unittest.mock import AsyncMock

from engine.errors import ConfigurationError, ErrorKind, TransportError
from engine.registry import VALIDATION_CONTEXT, ToolRegistry
from engine.schema import BindingRule, HttpMethod, ParameterKind, ParameterSpec, ToolSpec
from engine.transport import TransportClient


def param(name, kind=ParameterKind.STRING, **kwargs):
    return ParameterSpec(name=name, kind=kind, **kwargs)


DELETE_USER = ToolSpec(
    name="delete_user",
    description="Delete a user from ZenTao",
    path_template="/index.php?m=user&f=delete&t=json",
    params=(param("userID", ParameterKind.INTEGER, required=True),),
    action="delete user",
)

CREATE_TASK = ToolSpec(
    name="create_task",
    description="Create a task",
    method=HttpMethod.POST,
    path_template="/executions/{execution}/tasks",
    params=(
        param("execution", ParameterKind.INTEGER, required=True),
        param("name", required=True),
        param("type", enum=("devel", "test")),
        param("assignedTo", ParameterKind.STRING_ARRAY),
    ),
    action="create task",
)
CREATE_TASK_RULE = BindingRule(body_fields=("name", "type", "assignedTo"))


@pytest.fixture
def transport():
    spy = AsyncMock(spec=TransportClient)
    spy.get.return_value = b'{"result":"success"}'
    spy.post.return_value = b'{"id":12}'
    return spy


@pytest.fixture
def registry(transport):
    registry = ToolRegistry(transport)
    registry.register(DELETE_USER)
    registry.register(CREATE_TASK, CREATE_TASK_RULE)
    registry.seal()
    return registry


class TestRegistration:
    def test_listing(self, registry):
        assert len(registry) == 2
        assert "delete_user" in registry
        assert "missing" not in registry
        assert [spec.name for spec in registry.list_tools()] == ["create_task", "delete_user"]
        assert registry.get_tool("create_task").rule == CREATE_TASK_RULE
        assert registry.get_tool("delete_user").rule == BindingRule()
        assert registry.get_tool("missing") is None

    def test_manifest(self, registry):
        manifest = registry.manifest()

        assert [entry["name"] for entry in manifest] == ["create_task", "delete_user"]
        schema = manifest[0]["inputSchema"]
        assert schema["required"] == ["execution", "name"]
        assert schema["properties"]["type"]["enum"] == ["devel", "test"]

    def test_duplicate_name(self, transport):
        registry = ToolRegistry(transport)
        registry.register(DELETE_USER)

        with pytest.raises(ConfigurationError, match="already registered"):
            registry.register(DELETE_USER)

    def test_register_after_seal(self, registry):
        assert registry.sealed
        other = DELETE_USER.model_copy(update={"name": "delete_user_again"})

        with pytest.raises(ConfigurationError, match="sealed"):
            registry.register(other)

    def test_registration_order_irrelevant(self, transport):
        forward = ToolRegistry(transport)
        forward.register_all([(DELETE_USER, None), (CREATE_TASK, CREATE_TASK_RULE)])
        backward = ToolRegistry(transport)
        backward.register_all([(CREATE_TASK, CREATE_TASK_RULE), (DELETE_USER, None)])

        assert forward.manifest() == backward.manifest()

    def test_rule_is_checked(self, transport):
        registry = ToolRegistry(transport)

        with pytest.raises(ConfigurationError, match="body fields require a POST tool"):
            registry.register(DELETE_USER, BindingRule(body_fields=("userID",)))

    def test_required_parameter_with_default(self, transport):
        spec = ToolSpec(
            name="t",
            description="d",
            path_template="/x",
            params=(param("limit", ParameterKind.INTEGER, required=True, default=10),),
        )
        with pytest.raises(ConfigurationError, match="cannot have a default"):
            ToolRegistry(transport).register(spec)

    def test_default_must_match_kind(self, transport):
        spec = ToolSpec(
            name="t",
            description="d",
            path_template="/x",
            params=(param("limit", ParameterKind.INTEGER, default="ten"),),
        )
        with pytest.raises(ConfigurationError, match="invalid default for 'limit'"):
            ToolRegistry(transport).register(spec)

    def test_default_must_match_enum(self, transport):
        spec = ToolSpec(
            name="t",
            description="d",
            path_template="/x",
            params=(param("confirm", enum=("yes", "no"), default="maybe"),),
        )
        with pytest.raises(ConfigurationError):
            ToolRegistry(transport).register(spec)


class TestDispatch:
    @pytest.mark.asyncio
    async def test_delete_user(self, registry, transport):
        result = await registry.dispatch("delete_user", {"userID": 42.0})

        assert result.ok is True
        assert result.payload == '{"result":"success"}'
        assert result.elapsed_ms is not None
        transport.get.assert_awaited_once_with("/index.php?m=user&f=delete&t=json&userID=42")
        transport.post.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_missing_required_makes_no_request(self, registry, transport):
        result = await registry.dispatch("delete_user", {})

        assert result.ok is False
        assert result.error_kind == ErrorKind.MISSING_REQUIRED_PARAMETER
        assert "userID" in result.error_message
        assert result.error_message.startswith(VALIDATION_CONTEXT)
        transport.get.assert_not_awaited()
        transport.post.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_type_mismatch(self, registry, transport):
        result = await registry.dispatch("delete_user", {"userID": 3.5})

        assert result.error_kind == ErrorKind.TYPE_MISMATCH
        transport.get.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_enum_violation(self, registry, transport):
        result = await registry.dispatch(
            "create_task", {"execution": 3, "name": "Fix login", "type": "maybe"}
        )

        assert result.error_kind == ErrorKind.ENUM_VIOLATION
        transport.post.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_post_with_path_and_body(self, registry, transport):
        result = await registry.dispatch(
            "create_task",
            {"execution": 3.0, "name": "Fix login", "assignedTo": ["admin", "dev1"], "other": 1},
        )

        assert result.ok is True
        assert result.payload == '{"id":12}'
        transport.post.assert_awaited_once_with(
            "/executions/3/tasks", {"name": "Fix login", "assignedTo": ["admin", "dev1"]}
        )

    @pytest.mark.asyncio
    async def test_unknown_tool(self, registry, transport):
        result = await registry.dispatch("drop_database", {})

        assert result.ok is False
        assert result.error_kind == ErrorKind.UNKNOWN_TOOL
        assert "drop_database" in result.error_message
        transport.get.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_transport_failure(self, registry, transport):
        transport.get.side_effect = TransportError("HTTP 502: Bad Gateway", status_code=502)

        result = await registry.dispatch("delete_user", {"userID": 1})

        assert result.ok is False
        assert result.error_kind == ErrorKind.TRANSPORT
        assert result.error_message == "Failed to delete user: HTTP 502: Bad Gateway"

    @pytest.mark.asyncio
    async def test_unexpected_transport_exception(self, registry, transport):
        transport.get.side_effect = RuntimeError("connection pool closed")

        result = await registry.dispatch("delete_user", {"userID": 1})

        assert result.ok is False
        assert result.error_kind == ErrorKind.INTERNAL
        assert "connection pool closed" in result.error_message

    @pytest.mark.asyncio
    async def test_cancellation_propagates(self, registry, transport):
        started = asyncio.Event()

        async def slow_get(path):
            started.set()
            await asyncio.sleep(10)
            return b"{}"

        transport.get.side_effect = slow_get

        task = asyncio.create_task(registry.dispatch("delete_user", {"userID": 1}))
        await started.wait()
        task.cancel()

        with pytest.raises(asyncio.CancelledError):
            await task

    @pytest.mark.asyncio
    async def test_concurrent_dispatch(self, registry, transport):
        results = await asyncio.gather(
            *(registry.dispatch("delete_user", {"userID": user_id}) for user_id in range(1, 6))
        )

        assert all(result.ok for result in results)
        assert transport.get.await_count == 5
