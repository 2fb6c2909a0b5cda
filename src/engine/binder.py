"""
Argument binding: validate and coerce raw tool arguments.

Arguments arrive as decoded JSON, so every number may be a float even when it
stands for an ID. Binding checks each declared parameter in schema order and
returns only recognised, coerced values.
"""

import math
from typing import Any, Dict, Iterable, List, Mapping, Optional

from .errors import EnumViolation, MissingRequiredParameter, TypeMismatch
from .schema import ParameterKind, ParameterSpec

BoundArguments = Dict[str, Any]

_JSON_TYPE_NAMES = {
    str: "string",
    bool: "boolean",
    int: "number",
    float: "number",
    list: "array",
    tuple: "array",
    dict: "object",
    type(None): "null",
}


def json_type_name(value: Any) -> str:
    """Name a Python value by its JSON type for error messages."""
    return _JSON_TYPE_NAMES.get(type(value), type(value).__name__)


class ArgumentBinder:
    """Pure argument validation against a tool's parameter schema."""

    @staticmethod
    def bind(params: Iterable[ParameterSpec], raw: Optional[Mapping[str, Any]]) -> BoundArguments:
        """
        Bind raw arguments to declared parameters.

        Args:
            params: Declared parameters in declaration order
            raw: Argument map as received from the caller

        Returns:
            Coerced values keyed by parameter name, in declaration order

        Raises:
            MissingRequiredParameter: A required parameter is absent
            TypeMismatch: A value has the wrong type
            EnumViolation: A string is outside its parameter's enum
        """
        if raw is None:
            raw = {}
        elif not isinstance(raw, Mapping):
            raise TypeMismatch("arguments", "object", json_type_name(raw))

        bound: BoundArguments = {}
        for param in params:
            value = raw.get(param.name)

            # JSON null is treated the same as an omitted argument
            if value is None:
                if param.required:
                    raise MissingRequiredParameter(param.name)
                if param.default is not None:
                    bound[param.name] = param.default
                continue

            bound[param.name] = ArgumentBinder.coerce(param, value)

        return bound

    @staticmethod
    def coerce(param: ParameterSpec, value: Any) -> Any:
        """Type-check a single present value and return its coerced form."""
        if param.kind == ParameterKind.STRING:
            if not isinstance(value, str):
                raise TypeMismatch(param.name, "string", json_type_name(value))
            if param.enum is not None and value not in param.enum:
                raise EnumViolation(param.name, param.enum, value)
            return value

        if param.kind == ParameterKind.INTEGER:
            number = ArgumentBinder._as_number(param, value, "integer")
            if isinstance(number, float):
                if not number.is_integer():
                    raise TypeMismatch(param.name, "integer", repr(number))
                return int(number)
            return number

        if param.kind == ParameterKind.NUMBER:
            return ArgumentBinder._as_number(param, value, "number")

        if param.kind == ParameterKind.BOOLEAN:
            if not isinstance(value, bool):
                raise TypeMismatch(param.name, "boolean", json_type_name(value))
            return value

        if param.kind == ParameterKind.STRING_ARRAY:
            if not isinstance(value, (list, tuple)):
                raise TypeMismatch(param.name, "array of strings", json_type_name(value))
            items: List[str] = []
            for index, item in enumerate(value):
                if not isinstance(item, str):
                    raise TypeMismatch(
                        f"{param.name}[{index}]", "string", json_type_name(item)
                    )
                items.append(item)
            return items

        raise TypeMismatch(param.name, param.kind.value, json_type_name(value))

    @staticmethod
    def _as_number(param: ParameterSpec, value: Any, expected: str) -> Any:
        # bool is an int subclass; JSON true/false is never a number
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise TypeMismatch(param.name, expected, json_type_name(value))
        if isinstance(value, float) and not math.isfinite(value):
            raise TypeMismatch(param.name, expected, repr(value))
        return value
