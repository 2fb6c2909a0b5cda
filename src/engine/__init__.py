"""
Tool-to-REST adapter engine.

Tools are declared as data (ToolSpec + BindingRule) and executed by one
generic pipeline: bind arguments, build the request, call the transport,
wrap the result.
"""

from .binder import ArgumentBinder, BoundArguments
from .builder import RequestBuilder, RequestDescriptor
from .errors import (
    AdapterError,
    BindError,
    ConfigurationError,
    EnumViolation,
    ErrorKind,
    MissingRequiredParameter,
    TransportError,
    TypeMismatch,
    UnknownResource,
    UnknownTool,
    UnresolvedPlaceholder,
)
from .registry import ToolDefinition, ToolRegistry
from .resources import ResourceRegistry, ResourceSpec
from .schema import BindingRule, HttpMethod, ParameterKind, ParameterSpec, ToolSpec
from .transport import HttpTransport, TransportClient
from .wrapper import CallResult, ResultWrapper

__all__ = [
    "AdapterError",
    "ArgumentBinder",
    "BindError",
    "BindingRule",
    "BoundArguments",
    "CallResult",
    "ConfigurationError",
    "EnumViolation",
    "ErrorKind",
    "HttpMethod",
    "HttpTransport",
    "MissingRequiredParameter",
    "ParameterKind",
    "ParameterSpec",
    "RequestBuilder",
    "RequestDescriptor",
    "ResourceRegistry",
    "ResourceSpec",
    "ResultWrapper",
    "ToolDefinition",
    "ToolRegistry",
    "ToolSpec",
    "TransportClient",
    "TransportError",
    "TypeMismatch",
    "UnknownResource",
    "UnknownTool",
    "UnresolvedPlaceholder",
]
