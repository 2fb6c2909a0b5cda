"""
Tests for result normalization.
"""

from engine.errors import ErrorKind, MissingRequiredParameter, TransportError
from engine.wrapper import CallResult, ResultWrapper


def test_success_payload_passed_through():
    result = ResultWrapper.wrap(b'{"status":"success","data":[1,2]}', None, "Failed to get users")

    assert result.ok is True
    assert result.payload == '{"status":"success","data":[1,2]}'
    assert result.error_message is None
    assert result.error_kind is None


def test_non_json_payload_is_not_parsed():
    result = ResultWrapper.wrap(b"<html>login</html>", None)

    assert result.ok is True
    assert result.payload == "<html>login</html>"


def test_invalid_utf8_is_replaced():
    result = ResultWrapper.wrap(b"ok \xff", None)

    assert result.ok is True
    assert result.payload == "ok \ufffd"


def test_empty_payload():
    assert ResultWrapper.wrap(None, None).payload == ""
    assert ResultWrapper.wrap(b"", None).payload == ""


def test_error_with_context():
    result = ResultWrapper.wrap(None, TransportError("HTTP 500: boom", status_code=500), "Failed to delete user")

    assert result.ok is False
    assert result.error_kind == ErrorKind.TRANSPORT
    assert result.error_message == "Failed to delete user: HTTP 500: boom"
    assert result.to_text() == result.error_message


def test_error_without_context():
    result = ResultWrapper.failure(MissingRequiredParameter("userID"))

    assert result.error_kind == ErrorKind.MISSING_REQUIRED_PARAMETER
    assert result.error_message == "Required parameter 'userID' is missing"


def test_foreign_exception_is_internal():
    result = ResultWrapper.wrap(b"ignored", RuntimeError("disk on fire"), "Failed to get task")

    assert result.ok is False
    assert result.error_kind == ErrorKind.INTERNAL
    assert result.error_message == "Failed to get task: disk on fire"


def test_exception_without_text_uses_type_name():
    result = ResultWrapper.failure(TimeoutError(), "Failed to get bug")

    assert result.error_message == "Failed to get bug: TimeoutError"


def test_to_text_on_success():
    assert CallResult(ok=True, payload="{}").to_text() == "{}"
