"""
Helpers for declaring catalog tools as data.

Every catalog module exposes a TOOLS list of (ToolSpec, BindingRule) pairs
built with these helpers.
"""

from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple

from engine.resources import ResourceSpec
from engine.schema import (
    PLACEHOLDER_PATTERN,
    BindingRule,
    HttpMethod,
    ParameterKind,
    ParameterSpec,
    ToolSpec,
)

ToolEntry = Tuple[ToolSpec, Optional[BindingRule]]
ResourceEntry = Tuple[ResourceSpec, Optional[BindingRule]]


def endpoint(module: str, function: str) -> str:
    """Classic ZenTao JSON endpoint: /index.php?m=<module>&f=<function>&t=json"""
    return f"/index.php?m={module}&f={function}&t=json"


def _param(
    kind: ParameterKind,
    name: str,
    description: str,
    required: bool,
    enum: Optional[Sequence[str]] = None,
    default: Any = None,
) -> ParameterSpec:
    return ParameterSpec(
        name=name,
        kind=kind,
        description=description,
        required=required,
        enum=tuple(enum) if enum is not None else None,
        default=default,
    )


def string(
    name: str,
    description: str = "",
    required: bool = False,
    enum: Optional[Sequence[str]] = None,
    default: Optional[str] = None,
) -> ParameterSpec:
    return _param(ParameterKind.STRING, name, description, required, enum, default)


def integer(
    name: str, description: str = "", required: bool = False, default: Optional[int] = None
) -> ParameterSpec:
    return _param(ParameterKind.INTEGER, name, description, required, default=default)


def number(
    name: str, description: str = "", required: bool = False, default: Optional[float] = None
) -> ParameterSpec:
    return _param(ParameterKind.NUMBER, name, description, required, default=default)


def boolean(
    name: str, description: str = "", required: bool = False, default: Optional[bool] = None
) -> ParameterSpec:
    return _param(ParameterKind.BOOLEAN, name, description, required, default=default)


def string_array(name: str, description: str = "", required: bool = False) -> ParameterSpec:
    return _param(ParameterKind.STRING_ARRAY, name, description, required)


def paging(*, rec_total: bool = True) -> Tuple[ParameterSpec, ...]:
    """Standard ZenTao list paging parameters."""
    params = [string("orderBy", "Order by field")]
    if rec_total:
        params.append(integer("recTotal", "Total records"))
    params.extend(
        [
            integer("recPerPage", "Records per page"),
            integer("pageID", "Page ID"),
        ]
    )
    return tuple(params)


def limit_offset(noun: str) -> Tuple[ParameterSpec, ...]:
    return (
        integer("limit", f"Maximum number of {noun} to return (default: 100)"),
        integer("offset", "Offset for pagination (default: 0)"),
    )


def tool(
    name: str,
    description: str,
    path: str,
    params: Iterable[ParameterSpec] = (),
    *,
    method: HttpMethod = HttpMethod.GET,
    action: str = "",
    category: str = "general",
    body: Sequence[str] = (),
    repeated: Sequence[str] = (),
    wire_names: Optional[Dict[str, str]] = None,
) -> ToolEntry:
    """
    Declare one tool.

    Args:
        name: Tool name exposed to agents
        description: Human-readable description
        path: Path template; may contain {param} placeholders
        params: Parameters in the order they are emitted on the query string
        method: GET or POST
        action: Verb phrase used in failure messages ("delete user")
        category: Catalog grouping
        body: Parameters sent in the JSON body (POST only)
        repeated: Array parameters sent as repeated query keys
        wire_names: Parameter name -> wire key, when they differ

    Returns:
        (ToolSpec, BindingRule or None)
    """
    spec = ToolSpec(
        name=name,
        description=description,
        params=tuple(params),
        method=method,
        path_template=path,
        category=category,
        action=action,
    )
    rule = None
    if body or repeated or wire_names:
        rule = BindingRule(
            body_fields=tuple(body),
            repeated_keys=tuple(repeated),
            wire_names=dict(wire_names or {}),
        )
    return spec, rule


def post(name: str, description: str, path: str, params: Iterable[ParameterSpec] = (), **kwargs) -> ToolEntry:
    return tool(name, description, path, params, method=HttpMethod.POST, **kwargs)


def param_names(params: Iterable[ParameterSpec], exclude: Sequence[str] = ()) -> List[str]:
    """Names of params, minus exclude; used to route the rest into a body."""
    return [param.name for param in params if param.name not in exclude]


def resource(
    uri: str,
    name: str,
    path: str,
    description: str = "",
    *,
    keys: Optional[Dict[str, str]] = None,
    enums: Optional[Dict[str, Sequence[str]]] = None,
) -> ResourceEntry:
    """
    Declare one read-only resource.

    Every {variable} in uri becomes a required string parameter of the
    backing GET request, sent on the query string in URI order. keys maps a
    variable to its query key when they differ.
    """
    enums = enums or {}
    params = tuple(
        string(variable, f"URI variable {variable}", required=True, enum=enums.get(variable))
        for variable in PLACEHOLDER_PATTERN.findall(uri)
    )
    backing = ToolSpec(
        name=uri,
        description=description or name,
        params=params,
        path_template=path,
        category="resources",
        action=f"read {name}",
    )
    rule = BindingRule(wire_names=dict(keys)) if keys else None
    return ResourceSpec(uri_template=uri, name=name, description=description, tool=backing), rule
