"""
Request construction: turn bound arguments into an outbound request descriptor.

Query parameters are emitted in parameter declaration order so that the same
arguments always produce the same request target.
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple
from urllib.parse import quote

from .binder import BoundArguments
from .errors import UnresolvedPlaceholder
from .schema import BindingRule, HttpMethod, ParameterLocation, ToolSpec

# Characters left unescaped inside query keys and values
_QUERY_SAFE = ",:"

_DEFAULT_RULE = BindingRule()


@dataclass(frozen=True)
class RequestDescriptor:
    """Fully specified, not yet sent backend request."""

    method: HttpMethod
    path: str
    query_params: Tuple[Tuple[str, str], ...] = ()
    body: Optional[Dict[str, Any]] = None

    @property
    def query_string(self) -> str:
        return "&".join(
            f"{quote(key, safe=_QUERY_SAFE)}={quote(value, safe=_QUERY_SAFE)}"
            for key, value in self.query_params
        )

    @property
    def target(self) -> str:
        """Path plus encoded query string, as handed to the transport."""
        query = self.query_string
        if not query:
            return self.path
        if "?" not in self.path:
            return f"{self.path}?{query}"
        if self.path.endswith(("?", "&")):
            return f"{self.path}{query}"
        return f"{self.path}&{query}"


def format_value(value: Any) -> str:
    """String-encode a bound value for a path segment or query parameter."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return str(int(value)) if value.is_integer() else repr(value)
    if isinstance(value, (list, tuple)):
        return ",".join(format_value(item) for item in value)
    return str(value)


class RequestBuilder:
    """Maps bound arguments onto path, query and body per the tool's binding rule."""

    @staticmethod
    def build(
        spec: ToolSpec, bound: BoundArguments, rule: Optional[BindingRule] = None
    ) -> RequestDescriptor:
        """
        Build the request descriptor for one call.

        Args:
            spec: Tool definition
            bound: Output of ArgumentBinder.bind for this tool
            rule: Parameter placement; defaults to everything in the query

        Returns:
            RequestDescriptor ready for the transport

        Raises:
            UnresolvedPlaceholder: A path placeholder has no bound value
        """
        rule = rule or _DEFAULT_RULE
        placeholders = spec.placeholders

        path = RequestBuilder._fill_path(spec, bound)

        query_params: List[Tuple[str, str]] = []
        body: Optional[Dict[str, Any]] = None
        if spec.method == HttpMethod.POST and rule.body_fields:
            body = {}

        for param in spec.params:
            if param.name not in bound:
                continue

            value = bound[param.name]
            location = rule.location_of(param.name, placeholders)
            key = rule.wire_name(param.name)

            if location == ParameterLocation.PATH:
                continue
            if location == ParameterLocation.BODY:
                body[key] = value
            elif param.name in rule.repeated_keys:
                query_params.extend((key, format_value(item)) for item in value)
            else:
                query_params.append((key, format_value(value)))

        return RequestDescriptor(
            method=spec.method,
            path=path,
            query_params=tuple(query_params),
            body=body,
        )

    @staticmethod
    def _fill_path(spec: ToolSpec, bound: BoundArguments) -> str:
        path = spec.path_template
        for placeholder in spec.placeholders:
            if placeholder not in bound:
                raise UnresolvedPlaceholder(placeholder, spec.path_template)
            path = path.replace(
                f"{{{placeholder}}}", quote(format_value(bound[placeholder]), safe="")
            )
        return path
