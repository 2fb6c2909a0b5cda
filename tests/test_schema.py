"""
Tests for the declarative tool schema: parameter and tool checks, binding
rule checks and the JSON Schema manifest.
"""

import pytest
from pydantic import ValidationError

from engine.errors import ConfigurationError, ErrorKind
from engine.schema import (
    BindingRule,
    HttpMethod,
    ParameterKind,
    ParameterLocation,
    ParameterSpec,
    ToolSpec,
)


def param(name, kind=ParameterKind.STRING, **kwargs):
    return ParameterSpec(name=name, kind=kind, **kwargs)


class TestParameterSpec:
    def test_enum_on_string(self):
        spec = param("confirm", enum=("yes", "no"))
        assert spec.enum == ("yes", "no")

    def test_enum_on_non_string_is_rejected(self):
        with pytest.raises(ConfigurationError) as exc_info:
            param("pri", ParameterKind.INTEGER, enum=("1", "2"))
        assert exc_info.value.kind == ErrorKind.CONFIGURATION

    def test_empty_enum_is_rejected(self):
        with pytest.raises(ConfigurationError):
            param("confirm", enum=())

    def test_non_string_enum_value_is_rejected(self):
        with pytest.raises(ConfigurationError) as exc_info:
            param("confirm", enum=("yes", 1))
        assert exc_info.value.kind == ErrorKind.CONFIGURATION
        assert "enum values must be strings" in exc_info.value.message

    def test_unknown_kind_is_rejected(self):
        with pytest.raises(ValidationError):
            ParameterSpec(name="x", kind="object")

    def test_frozen(self):
        spec = param("name")
        with pytest.raises(ValidationError):
            spec.required = True

    def test_json_schema(self):
        assert param("confirm", description="Confirm", enum=("yes", "no")).to_json_schema() == {
            "type": "string",
            "description": "Confirm",
            "enum": ["yes", "no"],
        }
        assert param("ids", ParameterKind.STRING_ARRAY).to_json_schema() == {
            "type": "array",
            "items": {"type": "string"},
        }
        assert param("limit", ParameterKind.INTEGER, default=100).to_json_schema() == {
            "type": "integer",
            "default": 100,
        }


class TestToolSpec:
    def test_duplicate_parameter_is_rejected(self):
        with pytest.raises(ConfigurationError) as exc_info:
            ToolSpec(
                name="t",
                description="d",
                path_template="/x",
                params=(param("a"), param("a", ParameterKind.INTEGER)),
            )
        assert "duplicate parameter 'a'" in exc_info.value.message

    def test_placeholder_must_be_declared(self):
        with pytest.raises(ConfigurationError) as exc_info:
            ToolSpec(name="get_user", description="d", path_template="/user/{id}")
        assert exc_info.value.details["placeholder"] == "id"

    def test_placeholders_and_required(self):
        spec = ToolSpec(
            name="get_plan",
            description="d",
            path_template="/products/{product}/plans/{plan}",
            params=(
                param("product", ParameterKind.INTEGER, required=True),
                param("plan", ParameterKind.INTEGER, required=True),
                param("title"),
            ),
        )
        assert spec.placeholders == ("product", "plan")
        assert spec.required_params == ["product", "plan"]
        assert spec.get_param("title").kind == ParameterKind.STRING
        assert spec.get_param("missing") is None

    def test_failure_context(self):
        with_action = ToolSpec(name="delete_user", description="d", path_template="/x", action="delete user")
        without_action = ToolSpec(name="delete_user", description="d", path_template="/x")

        assert with_action.failure_context == "Failed to delete user"
        assert without_action.failure_context == "Failed to execute delete_user"

    def test_manifest_entry(self):
        spec = ToolSpec(
            name="delete_user",
            description="Delete a user",
            path_template="/index.php?m=user&f=delete&t=json",
            params=(param("userID", ParameterKind.INTEGER, required=True, description="User ID"),),
        )

        assert spec.to_manifest_entry() == {
            "name": "delete_user",
            "description": "Delete a user",
            "inputSchema": {
                "type": "object",
                "properties": {"userID": {"type": "integer", "description": "User ID"}},
                "required": ["userID"],
            },
        }

    def test_empty_name_is_rejected(self):
        with pytest.raises(ValidationError):
            ToolSpec(name="", description="d", path_template="/x")


class TestBindingRule:
    @pytest.fixture
    def post_spec(self):
        return ToolSpec(
            name="create_plan",
            description="d",
            method=HttpMethod.POST,
            path_template="/products/{product}/plans",
            params=(
                param("product", ParameterKind.INTEGER, required=True),
                param("title", required=True),
                param("tags", ParameterKind.STRING_ARRAY),
            ),
        )

    def test_location_of(self, post_spec):
        rule = BindingRule(body_fields=("title",))
        placeholders = post_spec.placeholders

        assert rule.location_of("product", placeholders) == ParameterLocation.PATH
        assert rule.location_of("title", placeholders) == ParameterLocation.BODY
        assert rule.location_of("tags", placeholders) == ParameterLocation.QUERY

    def test_valid_rule(self, post_spec):
        BindingRule(body_fields=("title",), repeated_keys=("tags",)).check_against(post_spec)

    def test_undeclared_field(self, post_spec):
        with pytest.raises(ConfigurationError, match="undeclared parameter 'name'"):
            BindingRule(body_fields=("name",)).check_against(post_spec)

    def test_body_on_get_tool(self):
        spec = ToolSpec(name="t", description="d", path_template="/x", params=(param("a"),))
        with pytest.raises(ConfigurationError, match="require a POST tool"):
            BindingRule(body_fields=("a",)).check_against(spec)

    def test_placeholder_in_body(self, post_spec):
        with pytest.raises(ConfigurationError, match="both a path placeholder and a body field"):
            BindingRule(body_fields=("product",)).check_against(post_spec)

    def test_repeated_key_must_be_array(self, post_spec):
        with pytest.raises(ConfigurationError, match="must be an array parameter"):
            BindingRule(repeated_keys=("title",)).check_against(post_spec)

    def test_repeated_key_must_be_in_query(self, post_spec):
        rule = BindingRule(body_fields=("tags",), repeated_keys=("tags",))
        with pytest.raises(ConfigurationError, match="must be a query parameter"):
            rule.check_against(post_spec)

    def test_duplicate_wire_key_in_one_location(self, post_spec):
        rule = BindingRule(wire_names={"tags": "title"}, body_fields=())
        with pytest.raises(ConfigurationError, match="share the query key 'title'"):
            rule.check_against(post_spec)

    def test_same_wire_key_in_query_and_body(self):
        spec = ToolSpec(
            name="batch_edit",
            description="d",
            method=HttpMethod.POST,
            path_template="/x",
            params=(param("status"), param("newStatus")),
        )
        rule = BindingRule(body_fields=("newStatus",), wire_names={"newStatus": "status"})

        rule.check_against(spec)
        assert rule.wire_name("newStatus") == "status"
        assert rule.wire_name("status") == "status"
