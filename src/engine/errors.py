"""
Error taxonomy for the tool adapter engine.

Configuration errors are raised at start-up and abort the process. Every other
error is raised inside a single dispatch and turned into a CallResult before it
reaches the caller.
"""

from enum import Enum
from typing import Any, Dict, Optional, Sequence


class ErrorKind(str, Enum):
    """Machine-readable error category carried by failed call results."""

    CONFIGURATION = "configuration_error"
    MISSING_REQUIRED_PARAMETER = "missing_required_parameter"
    TYPE_MISMATCH = "type_mismatch"
    ENUM_VIOLATION = "enum_violation"
    UNRESOLVED_PLACEHOLDER = "unresolved_placeholder"
    TRANSPORT = "transport_error"
    UNKNOWN_TOOL = "unknown_tool"
    UNKNOWN_RESOURCE = "unknown_resource"
    INTERNAL = "internal_error"


class AdapterError(Exception):
    """
    Base class for all adapter errors.

    Attributes:
        message: Human-readable text, safe to show to the calling agent
        kind: Stable error category used for branching and tests
        details: Structured extra information for logging
    """

    kind: ErrorKind = ErrorKind.INTERNAL

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        safe_message = message.strip() if isinstance(message, str) else ""
        if not safe_message:
            safe_message = "Unknown adapter error"
        super().__init__(safe_message)
        self.message = safe_message
        self.details: Dict[str, Any] = dict(details or {})


class ConfigurationError(AdapterError):
    """Malformed tool schema, binding rule or duplicate registration."""

    kind = ErrorKind.CONFIGURATION


class BindError(AdapterError):
    """Raw arguments could not be bound to a tool's schema."""

    def __init__(self, message: str, parameter: str, details: Optional[Dict[str, Any]] = None):
        merged = {"parameter": parameter}
        merged.update(details or {})
        super().__init__(message, merged)
        self.parameter = parameter


class MissingRequiredParameter(BindError):
    kind = ErrorKind.MISSING_REQUIRED_PARAMETER

    def __init__(self, parameter: str):
        super().__init__(f"Required parameter '{parameter}' is missing", parameter)


class TypeMismatch(BindError):
    kind = ErrorKind.TYPE_MISMATCH

    def __init__(self, parameter: str, expected: str, got: str):
        super().__init__(
            f"Parameter '{parameter}': expected {expected}, got {got}",
            parameter,
            {"expected": expected, "got": got},
        )
        self.expected = expected
        self.got = got


class EnumViolation(BindError):
    kind = ErrorKind.ENUM_VIOLATION

    def __init__(self, parameter: str, allowed: Sequence[str], value: Any):
        super().__init__(
            f"Parameter '{parameter}': must be one of {list(allowed)}, got {value!r}",
            parameter,
            {"allowed": list(allowed)},
        )
        self.allowed = tuple(allowed)


class UnresolvedPlaceholder(BindError):
    kind = ErrorKind.UNRESOLVED_PLACEHOLDER

    def __init__(self, parameter: str, template: str):
        super().__init__(
            f"Path placeholder '{{{parameter}}}' has no value",
            parameter,
            {"template": template},
        )


class TransportError(AdapterError):
    """The backend could not be reached or answered with a failure status."""

    kind = ErrorKind.TRANSPORT

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        merged = dict(details or {})
        if status_code is not None:
            merged["status_code"] = status_code
        super().__init__(message, merged)
        self.status_code = status_code


class UnknownTool(AdapterError):
    kind = ErrorKind.UNKNOWN_TOOL

    def __init__(self, tool_name: str):
        super().__init__(f"Unknown tool '{tool_name}'", {"tool_name": tool_name})
        self.tool_name = tool_name


class UnknownResource(AdapterError):
    kind = ErrorKind.UNKNOWN_RESOURCE

    def __init__(self, uri: str):
        super().__init__(f"Resource not found: {uri}", {"uri": uri})
        self.uri = uri
