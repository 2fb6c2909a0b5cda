"""
Declarative tool schema model.

A tool is pure data: a ToolSpec describing its parameters and the backend
endpoint it maps to, plus a BindingRule saying where each parameter goes on
the outbound request. Both are frozen once constructed.
"""

import re
from enum import Enum
from typing import Any, Dict, List, Optional, Sequence, Tuple

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .errors import ConfigurationError

PLACEHOLDER_PATTERN = re.compile(r"\{([A-Za-z_][A-Za-z0-9_]*)\}")


class ParameterKind(str, Enum):
    """Accepted value kinds. INTEGER is a number restricted to whole values."""

    STRING = "string"
    INTEGER = "integer"
    NUMBER = "number"
    BOOLEAN = "boolean"
    STRING_ARRAY = "array"


class HttpMethod(str, Enum):
    GET = "GET"
    POST = "POST"


class ParameterLocation(str, Enum):
    """Where a bound parameter is placed on the outbound request."""

    PATH = "path"
    QUERY = "query"
    BODY = "body"


class ParameterSpec(BaseModel):
    """One declared tool parameter."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)
    kind: ParameterKind
    description: str = ""
    required: bool = False
    # Element types are checked in _check_enum
    enum: Optional[Tuple[Any, ...]] = None
    default: Optional[Any] = None

    @model_validator(mode="after")
    def _check_enum(self) -> "ParameterSpec":
        if self.enum is not None:
            if self.kind != ParameterKind.STRING:
                raise ConfigurationError(
                    f"Parameter '{self.name}': enum is only allowed on string parameters",
                    {"parameter": self.name, "kind": self.kind.value},
                )
            if not self.enum:
                raise ConfigurationError(
                    f"Parameter '{self.name}': enum must not be empty", {"parameter": self.name}
                )
            for value in self.enum:
                if not isinstance(value, str):
                    raise ConfigurationError(
                        f"Parameter '{self.name}': enum values must be strings, got {value!r}",
                        {"parameter": self.name, "value": repr(value)},
                    )
        return self

    def to_json_schema(self) -> Dict[str, Any]:
        """JSON Schema fragment advertised in the tool manifest."""
        schema: Dict[str, Any] = {"type": self.kind.value}
        if self.description:
            schema["description"] = self.description
        if self.kind == ParameterKind.STRING_ARRAY:
            schema["items"] = {"type": "string"}
        if self.enum:
            schema["enum"] = list(self.enum)
        if self.default is not None:
            schema["default"] = self.default
        return schema


class ToolSpec(BaseModel):
    """
    Standard tool definition.

    The path template is the backend path including any fixed query part, for
    example ``/index.php?m=user&f=delete&t=json``. Parameters referenced as
    ``{name}`` inside the template are substituted into it instead of being
    appended to the query string.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)
    description: str
    params: Tuple[ParameterSpec, ...] = ()
    method: HttpMethod = HttpMethod.GET
    path_template: str = Field(min_length=1)
    category: str = "general"
    # Verb phrase for failure messages: "Failed to <action>: <error>"
    action: str = ""

    @model_validator(mode="after")
    def _check_params(self) -> "ToolSpec":
        seen = set()
        for param in self.params:
            if param.name in seen:
                raise ConfigurationError(
                    f"Tool '{self.name}': duplicate parameter '{param.name}'",
                    {"tool_name": self.name, "parameter": param.name},
                )
            seen.add(param.name)

        for placeholder in self.placeholders:
            if placeholder not in seen:
                raise ConfigurationError(
                    f"Tool '{self.name}': path placeholder '{{{placeholder}}}' "
                    "does not match a declared parameter",
                    {"tool_name": self.name, "placeholder": placeholder},
                )
        return self

    @property
    def placeholders(self) -> Tuple[str, ...]:
        return tuple(PLACEHOLDER_PATTERN.findall(self.path_template))

    @property
    def required_params(self) -> List[str]:
        return [param.name for param in self.params if param.required]

    @property
    def failure_context(self) -> str:
        return f"Failed to {self.action or 'execute ' + self.name}"

    def get_param(self, name: str) -> Optional[ParameterSpec]:
        for param in self.params:
            if param.name == name:
                return param
        return None

    def to_input_schema(self) -> Dict[str, Any]:
        """Convert tool parameters to a JSON Schema object."""
        properties = {param.name: param.to_json_schema() for param in self.params}
        return {"type": "object", "properties": properties, "required": self.required_params}

    def to_manifest_entry(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "inputSchema": self.to_input_schema(),
        }


class BindingRule(BaseModel):
    """
    Per-tool placement of parameters onto the request.

    Attributes:
        body_fields: Parameters sent in the JSON body (POST tools only)
        repeated_keys: Array parameters sent as one query pair per element
        wire_names: Parameter name -> key used on the wire, when they differ
    """

    model_config = ConfigDict(frozen=True)

    body_fields: Tuple[str, ...] = ()
    repeated_keys: Tuple[str, ...] = ()
    wire_names: Dict[str, str] = Field(default_factory=dict)

    def wire_name(self, name: str) -> str:
        return self.wire_names.get(name, name)

    def location_of(self, name: str, placeholders: Sequence[str]) -> ParameterLocation:
        if name in placeholders:
            return ParameterLocation.PATH
        if name in self.body_fields:
            return ParameterLocation.BODY
        return ParameterLocation.QUERY

    def check_against(self, spec: ToolSpec) -> None:
        """
        Verify this rule is consistent with the tool it is registered for.

        Raises:
            ConfigurationError: If the rule references unknown parameters or
                places a parameter somewhere it cannot go
        """
        declared = {param.name for param in spec.params}
        placeholders = spec.placeholders

        for field_name in (*self.body_fields, *self.repeated_keys, *self.wire_names):
            if field_name not in declared:
                raise ConfigurationError(
                    f"Tool '{spec.name}': binding rule references undeclared parameter "
                    f"'{field_name}'",
                    {"tool_name": spec.name, "parameter": field_name},
                )

        if self.body_fields and spec.method != HttpMethod.POST:
            raise ConfigurationError(
                f"Tool '{spec.name}': body fields require a POST tool",
                {"tool_name": spec.name, "method": spec.method.value},
            )

        for field_name in self.body_fields:
            if field_name in placeholders:
                raise ConfigurationError(
                    f"Tool '{spec.name}': parameter '{field_name}' cannot be both a path "
                    "placeholder and a body field",
                    {"tool_name": spec.name, "parameter": field_name},
                )

        for field_name in self.repeated_keys:
            param = spec.get_param(field_name)
            if param is None or param.kind != ParameterKind.STRING_ARRAY:
                raise ConfigurationError(
                    f"Tool '{spec.name}': repeated key '{field_name}' must be an array parameter",
                    {"tool_name": spec.name, "parameter": field_name},
                )
            if self.location_of(field_name, placeholders) != ParameterLocation.QUERY:
                raise ConfigurationError(
                    f"Tool '{spec.name}': repeated key '{field_name}' must be a query parameter",
                    {"tool_name": spec.name, "parameter": field_name},
                )

        # Query and body may reuse a key; within one location keys must be unique.
        seen: Dict[Tuple[ParameterLocation, str], str] = {}
        for param in spec.params:
            slot = (self.location_of(param.name, placeholders), self.wire_name(param.name))
            if slot in seen:
                raise ConfigurationError(
                    f"Tool '{spec.name}': parameters '{seen[slot]}' and '{param.name}' "
                    f"share the {slot[0].value} key '{slot[1]}'",
                    {"tool_name": spec.name, "wire_name": slot[1]},
                )
            seen[slot] = param.name
