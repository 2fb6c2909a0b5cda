"""
Tests for request construction: path filling, query order and encoding, and
body placement.
"""

import pytest

from engine.binder import ArgumentBinder
from engine.builder import RequestBuilder, RequestDescriptor, format_value
from engine.errors import ErrorKind, UnresolvedPlaceholder
from engine.schema import BindingRule, HttpMethod, ParameterKind, ParameterSpec, ToolSpec


def param(name, kind=ParameterKind.STRING, **kwargs):
    return ParameterSpec(name=name, kind=kind, **kwargs)


DELETE_USER = ToolSpec(
    name="delete_user",
    description="Delete a user",
    path_template="/index.php?m=user&f=delete&t=json",
    params=(param("userID", ParameterKind.INTEGER, required=True),),
)

CREATE_TODO = ToolSpec(
    name="create_todo",
    description="Create a todo",
    method=HttpMethod.POST,
    path_template="/index.php?m=todo&f=create&t=json",
    params=(
        param("date"),
        param("name", required=True),
        param("pri", ParameterKind.INTEGER),
        param("private", ParameterKind.BOOLEAN),
    ),
)
CREATE_TODO_RULE = BindingRule(body_fields=("name", "pri", "private"))


def build(spec, raw, rule=None):
    return RequestBuilder.build(spec, ArgumentBinder.bind(spec.params, raw), rule)


class TestFormatValue:
    @pytest.mark.parametrize(
        "value,expected",
        [
            (True, "true"),
            (False, "false"),
            (42, "42"),
            (42.0, "42"),
            (2.5, "2.5"),
            (0.1, "0.1"),
            (["a", "b"], "a,b"),
            ("text", "text"),
        ],
    )
    def test_encoding(self, value, expected):
        assert format_value(value) == expected


class TestDescriptorTarget:
    def test_appends_to_existing_query(self):
        descriptor = RequestDescriptor(
            method=HttpMethod.GET, path="/index.php?m=user&t=json", query_params=(("a", "1"),)
        )
        assert descriptor.target == "/index.php?m=user&t=json&a=1"

    def test_starts_query(self):
        descriptor = RequestDescriptor(method=HttpMethod.GET, path="/users", query_params=(("a", "1"),))
        assert descriptor.target == "/users?a=1"

    def test_no_query(self):
        assert RequestDescriptor(method=HttpMethod.GET, path="/users").target == "/users"

    def test_encodes_keys_and_values(self):
        descriptor = RequestDescriptor(
            method=HttpMethod.GET,
            path="/users",
            query_params=(("real name", "Zhang San&Co"), ("date", "2024-01-02 10:30")),
        )
        assert descriptor.query_string == "real%20name=Zhang%20San%26Co&date=2024-01-02%2010:30"


class TestBuild:
    def test_delete_user(self):
        descriptor = build(DELETE_USER, {"userID": 42.0})

        assert descriptor.method == HttpMethod.GET
        assert descriptor.query_params == (("userID", "42"),)
        assert descriptor.body is None
        assert descriptor.target == "/index.php?m=user&f=delete&t=json&userID=42"

    def test_query_follows_declaration_order(self):
        spec = ToolSpec(
            name="get_users",
            description="d",
            path_template="/users",
            params=(param("account"), param("dept", ParameterKind.INTEGER), param("limit", ParameterKind.INTEGER)),
        )
        descriptor = build(spec, {"limit": 10, "account": "admin", "dept": 3})

        assert descriptor.target == "/users?account=admin&dept=3&limit=10"

    def test_deterministic(self):
        spec = ToolSpec(
            name="t",
            description="d",
            path_template="/x",
            params=tuple(param(name) for name in "zyxwv"),
        )
        bound = ArgumentBinder.bind(spec.params, {name: name.upper() for name in "vwxyz"})

        first = RequestBuilder.build(spec, bound)
        second = RequestBuilder.build(spec, bound)
        assert first.query_string == second.query_string == "z=Z&y=Y&x=X&w=W&v=V"

    def test_missing_optional_parameters(self):
        descriptor = build(CREATE_TODO, {"name": "Write report"}, CREATE_TODO_RULE)

        assert descriptor.query_params == ()
        assert descriptor.body == {"name": "Write report"}
        assert descriptor.target == "/index.php?m=todo&f=create&t=json"

    def test_body_and_query_split(self):
        descriptor = build(
            CREATE_TODO,
            {"date": "2024-05-01", "name": "Review", "pri": 2.0, "private": True},
            CREATE_TODO_RULE,
        )

        assert descriptor.method == HttpMethod.POST
        assert descriptor.query_params == (("date", "2024-05-01"),)
        assert descriptor.body == {"name": "Review", "pri": 2, "private": True}

    def test_post_without_body_fields_sends_no_body(self):
        spec = CREATE_TODO.model_copy(update={"name": "export"})
        descriptor = build(spec, {"name": "x"})

        assert descriptor.body is None
        assert descriptor.query_params == (("name", "x"),)

    def test_body_always_object_when_declared(self):
        spec = ToolSpec(
            name="search_build_query",
            description="d",
            method=HttpMethod.POST,
            path_template="/x",
            params=(param("mode"),),
        )
        descriptor = build(spec, {}, BindingRule(body_fields=("mode",)))

        assert descriptor.body == {}

    def test_wire_names(self):
        spec = ToolSpec(
            name="batch_edit_todos",
            description="d",
            method=HttpMethod.POST,
            path_template="/x",
            params=(param("status"), param("newStatus")),
        )
        rule = BindingRule(body_fields=("newStatus",), wire_names={"newStatus": "status"})
        descriptor = build(spec, {"status": "wait", "newStatus": "done"}, rule)

        assert descriptor.query_params == (("status", "wait"),)
        assert descriptor.body == {"status": "done"}

    def test_path_placeholder(self):
        spec = ToolSpec(
            name="get_user",
            description="d",
            path_template="/user/{id}",
            params=(param("id", ParameterKind.INTEGER, required=True), param("fields")),
        )
        descriptor = build(spec, {"id": 7.0, "fields": "name"})

        assert descriptor.path == "/user/7"
        assert descriptor.target == "/user/7?fields=name"

    def test_path_placeholder_is_encoded(self):
        spec = ToolSpec(
            name="get_by_account",
            description="d",
            path_template="/users/{account}",
            params=(param("account", required=True),),
        )
        assert build(spec, {"account": "a/b c"}).path == "/users/a%2Fb%20c"

    def test_unresolved_placeholder(self):
        spec = ToolSpec(
            name="get_user",
            description="d",
            path_template="/user/{id}",
            params=(param("id", ParameterKind.INTEGER),),
        )
        with pytest.raises(UnresolvedPlaceholder) as exc_info:
            build(spec, {})
        assert exc_info.value.kind == ErrorKind.UNRESOLVED_PLACEHOLDER
        assert exc_info.value.parameter == "id"

    def test_arrays(self):
        spec = ToolSpec(
            name="t",
            description="d",
            path_template="/x",
            params=(
                param("joined", ParameterKind.STRING_ARRAY),
                param("repeated", ParameterKind.STRING_ARRAY),
            ),
        )
        rule = BindingRule(repeated_keys=("repeated",))
        descriptor = build(spec, {"joined": ["a", "b"], "repeated": ["c", "d"]}, rule)

        assert descriptor.query_params == (("joined", "a,b"), ("repeated", "c"), ("repeated", "d"))
        assert descriptor.query_string == "joined=a,b&repeated=c&repeated=d"

    def test_body_array_stays_a_list(self):
        spec = ToolSpec(
            name="batch_create_todos",
            description="d",
            method=HttpMethod.POST,
            path_template="/x",
            params=(param("names", ParameterKind.STRING_ARRAY, required=True),),
        )
        descriptor = build(spec, {"names": ["a", "b"]}, BindingRule(body_fields=("names",)))

        assert descriptor.body == {"names": ["a", "b"]}
