"""
Tests for argument binding: presence, defaults, kind checks and coercion.
"""

import math

import pytest

from engine.binder import ArgumentBinder, json_type_name
from engine.errors import EnumViolation, ErrorKind, MissingRequiredParameter, TypeMismatch
from engine.schema import ParameterKind, ParameterSpec


def param(name, kind=ParameterKind.STRING, **kwargs):
    return ParameterSpec(name=name, kind=kind, **kwargs)


USER_ID = param("userID", ParameterKind.INTEGER, required=True)
CONFIRM = param("confirm", enum=("yes", "no"))


class TestPresence:
    def test_missing_required(self):
        with pytest.raises(MissingRequiredParameter) as exc_info:
            ArgumentBinder.bind([USER_ID], {})

        error = exc_info.value
        assert error.kind == ErrorKind.MISSING_REQUIRED_PARAMETER
        assert error.parameter == "userID"
        assert "userID" in error.message

    def test_null_counts_as_missing(self):
        with pytest.raises(MissingRequiredParameter):
            ArgumentBinder.bind([USER_ID], {"userID": None})

    def test_none_arguments(self):
        assert ArgumentBinder.bind([param("name")], None) == {}

    def test_optional_absent_is_skipped(self):
        assert ArgumentBinder.bind([param("name"), param("limit", ParameterKind.INTEGER)], {}) == {}

    def test_default_used_verbatim(self):
        limit = param("limit", ParameterKind.INTEGER, default=100)

        assert ArgumentBinder.bind([limit], {}) == {"limit": 100}
        assert ArgumentBinder.bind([limit], {"limit": None}) == {"limit": 100}
        assert ArgumentBinder.bind([limit], {"limit": 5}) == {"limit": 5}

    def test_unknown_arguments_ignored(self):
        bound = ArgumentBinder.bind([USER_ID], {"userID": 7, "extra": "ignored"})
        assert bound == {"userID": 7}

    def test_declaration_order(self):
        params = [param("b"), param("a"), param("c")]
        bound = ArgumentBinder.bind(params, {"c": "3", "a": "1", "b": "2"})
        assert list(bound) == ["b", "a", "c"]

    def test_arguments_must_be_object(self):
        with pytest.raises(TypeMismatch) as exc_info:
            ArgumentBinder.bind([USER_ID], ["userID", 1])
        assert exc_info.value.parameter == "arguments"


class TestInteger:
    def test_whole_float_is_coerced(self):
        bound = ArgumentBinder.bind([USER_ID], {"userID": 3.0})
        assert bound["userID"] == 3
        assert isinstance(bound["userID"], int)

    def test_int_kept(self):
        assert ArgumentBinder.bind([USER_ID], {"userID": 42}) == {"userID": 42}

    def test_fractional_float_is_rejected(self):
        with pytest.raises(TypeMismatch) as exc_info:
            ArgumentBinder.bind([USER_ID], {"userID": 3.5})
        assert exc_info.value.kind == ErrorKind.TYPE_MISMATCH
        assert exc_info.value.expected == "integer"

    @pytest.mark.parametrize("value", ["42", True, [1], {"id": 1}])
    def test_non_numbers_are_rejected(self, value):
        with pytest.raises(TypeMismatch):
            ArgumentBinder.bind([USER_ID], {"userID": value})

    @pytest.mark.parametrize("value", [math.inf, -math.inf, math.nan])
    def test_non_finite_is_rejected(self, value):
        with pytest.raises(TypeMismatch):
            ArgumentBinder.bind([USER_ID], {"userID": value})


class TestOtherKinds:
    def test_number_keeps_value(self):
        budget = param("budget", ParameterKind.NUMBER)

        assert ArgumentBinder.bind([budget], {"budget": 1.25}) == {"budget": 1.25}
        assert ArgumentBinder.bind([budget], {"budget": 3}) == {"budget": 3}

    def test_number_rejects_bool(self):
        with pytest.raises(TypeMismatch):
            ArgumentBinder.bind([param("budget", ParameterKind.NUMBER)], {"budget": False})

    def test_string(self):
        assert ArgumentBinder.bind([param("name")], {"name": ""}) == {"name": ""}
        with pytest.raises(TypeMismatch) as exc_info:
            ArgumentBinder.bind([param("name")], {"name": 5})
        assert exc_info.value.got == "number"

    def test_boolean(self):
        flag = param("notify", ParameterKind.BOOLEAN)

        assert ArgumentBinder.bind([flag], {"notify": False}) == {"notify": False}
        with pytest.raises(TypeMismatch):
            ArgumentBinder.bind([flag], {"notify": 1})

    def test_string_array(self):
        names = param("names", ParameterKind.STRING_ARRAY)

        assert ArgumentBinder.bind([names], {"names": ["a", "b"]}) == {"names": ["a", "b"]}
        assert ArgumentBinder.bind([names], {"names": []}) == {"names": []}

    def test_string_array_rejects_bad_element(self):
        names = param("names", ParameterKind.STRING_ARRAY)

        with pytest.raises(TypeMismatch) as exc_info:
            ArgumentBinder.bind([names], {"names": ["a", 2]})
        assert exc_info.value.parameter == "names[1]"

    def test_string_array_rejects_string(self):
        with pytest.raises(TypeMismatch):
            ArgumentBinder.bind([param("names", ParameterKind.STRING_ARRAY)], {"names": "a,b"})


class TestEnum:
    @pytest.mark.parametrize("value", ["yes", "no"])
    def test_allowed(self, value):
        assert ArgumentBinder.bind([CONFIRM], {"confirm": value}) == {"confirm": value}

    def test_rejected(self):
        with pytest.raises(EnumViolation) as exc_info:
            ArgumentBinder.bind([CONFIRM], {"confirm": "maybe"})

        error = exc_info.value
        assert error.kind == ErrorKind.ENUM_VIOLATION
        assert error.allowed == ("yes", "no")
        assert "maybe" in error.message

    def test_case_sensitive(self):
        with pytest.raises(EnumViolation):
            ArgumentBinder.bind([CONFIRM], {"confirm": "YES"})


def test_binding_does_not_mutate_input():
    raw = {"userID": 3.0, "confirm": "yes"}
    ArgumentBinder.bind([USER_ID, CONFIRM], raw)
    assert raw == {"userID": 3.0, "confirm": "yes"}


def test_json_type_name():
    assert json_type_name("x") == "string"
    assert json_type_name(True) == "boolean"
    assert json_type_name(1.5) == "number"
    assert json_type_name(None) == "null"
    assert json_type_name({}) == "object"
