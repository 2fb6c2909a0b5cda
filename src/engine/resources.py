"""
Read-only resources addressed by URI.

A resource is a GET tool whose parameters are exactly the variables of its
URI template. Reading ``zentao://products/7/builds`` binds ``productID="7"``
and runs the same Bind -> Build -> Execute -> Wrap pipeline as a tool call.
"""

import re
from functools import lru_cache
from typing import Any, Dict, List, Optional, Pattern, Tuple
from urllib.parse import unquote

from pydantic import BaseModel, ConfigDict, Field, model_validator

from common.logging import get_logger

from .errors import ConfigurationError, UnknownResource
from .registry import ToolRegistry
from .schema import PLACEHOLDER_PATTERN, BindingRule, HttpMethod, ParameterKind, ToolSpec
from .transport import TransportClient
from .wrapper import CallResult

logger = get_logger(__name__)


@lru_cache(maxsize=None)
def _uri_pattern(uri_template: str) -> Pattern[str]:
    parts = []
    position = 0
    for match in PLACEHOLDER_PATTERN.finditer(uri_template):
        parts.append(re.escape(uri_template[position : match.start()]))
        parts.append(f"(?P<{match.group(1)}>[^/?#]+)")
        position = match.end()
    parts.append(re.escape(uri_template[position:]))
    return re.compile("".join(parts))


class ResourceSpec(BaseModel):
    """
    One resource or resource template.

    Attributes:
        uri_template: Concrete URI, or a template with {variable} segments
        name: Human-readable title
        mime_type: Content type reported with the payload
        tool: Backing GET tool; its parameters are the URI variables
    """

    model_config = ConfigDict(frozen=True)

    uri_template: str = Field(min_length=1)
    name: str = Field(min_length=1)
    description: str = ""
    mime_type: str = "application/json"
    tool: ToolSpec

    @model_validator(mode="after")
    def _check_variables(self) -> "ResourceSpec":
        if self.tool.method != HttpMethod.GET:
            raise ConfigurationError(
                f"Resource '{self.uri_template}': backing request must be a GET",
                {"uri_template": self.uri_template, "method": self.tool.method.value},
            )

        variables = self.variables
        if len(set(variables)) != len(variables):
            raise ConfigurationError(
                f"Resource '{self.uri_template}': repeated URI variable",
                {"uri_template": self.uri_template},
            )

        declared = [param.name for param in self.tool.params]
        if sorted(declared) != sorted(variables):
            raise ConfigurationError(
                f"Resource '{self.uri_template}': parameters {sorted(declared)} "
                f"do not match URI variables {sorted(variables)}",
                {"uri_template": self.uri_template},
            )

        for param in self.tool.params:
            if param.kind != ParameterKind.STRING:
                raise ConfigurationError(
                    f"Resource '{self.uri_template}': URI variable '{param.name}' "
                    "must be a string parameter",
                    {"uri_template": self.uri_template, "parameter": param.name},
                )
        return self

    @property
    def variables(self) -> Tuple[str, ...]:
        return tuple(PLACEHOLDER_PATTERN.findall(self.uri_template))

    @property
    def is_template(self) -> bool:
        return bool(self.variables)

    def match(self, uri: str) -> Optional[Dict[str, str]]:
        """URI variable values if uri is an instance of this resource, else None."""
        found = _uri_pattern(self.uri_template).fullmatch(uri)
        if found is None:
            return None
        return {name: unquote(value) for name, value in found.groupdict().items()}

    def to_manifest_entry(self) -> Dict[str, Any]:
        entry: Dict[str, Any] = {
            "uriTemplate" if self.is_template else "uri": self.uri_template,
            "name": self.name,
            "mimeType": self.mime_type,
        }
        if self.description:
            entry["description"] = self.description
        return entry


class ResourceRegistry:
    """
    Sealed set of resources sharing one transport.

    Backing tools are kept in a private ToolRegistry, keyed by URI template.
    """

    def __init__(self, transport: TransportClient):
        self._tools = ToolRegistry(transport)
        self._resources: Dict[str, ResourceSpec] = {}

    @property
    def sealed(self) -> bool:
        return self._tools.sealed

    def register(self, spec: ResourceSpec, rule: Optional[BindingRule] = None) -> None:
        """
        Register a resource.

        Raises:
            ConfigurationError: Duplicate URI template, sealed registry or an
                invalid binding rule
        """
        if spec.uri_template in self._resources:
            raise ConfigurationError(
                f"Resource '{spec.uri_template}' is already registered",
                {"uri_template": spec.uri_template},
            )
        self._tools.register(spec.tool, rule)
        self._resources[spec.uri_template] = spec

    def register_all(self, definitions: List[Tuple[ResourceSpec, Optional[BindingRule]]]) -> None:
        for spec, rule in definitions:
            self.register(spec, rule)

    def seal(self) -> None:
        self._tools.seal()

    def list_resources(self) -> List[ResourceSpec]:
        """Concrete resources, in registration order."""
        return [spec for spec in self._resources.values() if not spec.is_template]

    def list_templates(self) -> List[ResourceSpec]:
        """Resource templates, in registration order."""
        return [spec for spec in self._resources.values() if spec.is_template]

    def __len__(self) -> int:
        return len(self._resources)

    def resolve(self, uri: str) -> Tuple[ResourceSpec, Dict[str, str]]:
        """
        Find the resource a URI refers to.

        A concrete resource wins over a template that also matches; templates
        are tried in registration order.

        Raises:
            UnknownResource: No resource or template matches
        """
        spec = self._resources.get(uri)
        if spec is not None and not spec.is_template:
            return spec, {}

        for spec in self.list_templates():
            variables = spec.match(uri)
            if variables is not None:
                return spec, variables

        raise UnknownResource(uri)

    async def read(self, spec: ResourceSpec, variables: Dict[str, str]) -> CallResult:
        """Fetch a resolved resource; failures are reported in the result."""
        logger.debug(event="resource_read", uri_template=spec.uri_template)
        return await self._tools.dispatch(spec.tool.name, variables)
