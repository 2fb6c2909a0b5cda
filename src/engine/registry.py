"""
Tool Registry for the adapter engine.

Holds every (ToolSpec, BindingRule) pair keyed by tool name and turns a call
into Bind -> Build -> Execute -> Wrap. The registry is filled once at start-up
and sealed; dispatch only reads from it, so concurrent calls need no locking.
"""

import time
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Tuple

from common.logging import get_logger

from .binder import ArgumentBinder
from .builder import RequestBuilder, RequestDescriptor
from .errors import BindError, ConfigurationError, UnknownTool
from .schema import BindingRule, HttpMethod, ToolSpec
from .transport import TransportClient
from .wrapper import CallResult, ResultWrapper

logger = get_logger(__name__)

VALIDATION_CONTEXT = "Argument validation failed"


@dataclass(frozen=True)
class ToolDefinition:
    """A registered tool: its schema plus where each parameter goes."""

    spec: ToolSpec
    rule: BindingRule = field(default_factory=BindingRule)

    @property
    def name(self) -> str:
        return self.spec.name


class ToolRegistry:
    """
    Registry of data-driven tools sharing one transport.

    Provides registration, discovery, and dispatch.
    """

    def __init__(self, transport: TransportClient):
        self.transport = transport
        self._tools: Dict[str, ToolDefinition] = {}
        self._sealed = False

    @property
    def sealed(self) -> bool:
        return self._sealed

    def register(self, spec: ToolSpec, rule: Optional[BindingRule] = None) -> ToolDefinition:
        """
        Register a tool.

        Raises:
            ConfigurationError: Duplicate name, sealed registry, invalid default
                or a binding rule inconsistent with the tool
        """
        if self._sealed:
            raise ConfigurationError(
                f"Cannot register tool '{spec.name}': registry is sealed",
                {"tool_name": spec.name},
            )
        if spec.name in self._tools:
            raise ConfigurationError(
                f"Tool '{spec.name}' is already registered", {"tool_name": spec.name}
            )

        rule = rule or BindingRule()
        rule.check_against(spec)
        self._check_defaults(spec)

        definition = ToolDefinition(spec=spec, rule=rule)
        self._tools[spec.name] = definition

        logger.debug(
            event="tool_registered",
            tool_name=spec.name,
            parameters_count=len(spec.params),
            category=spec.category,
            method=spec.method.value,
        )
        return definition

    def register_all(self, definitions: List[Tuple[ToolSpec, Optional[BindingRule]]]) -> None:
        for spec, rule in definitions:
            self.register(spec, rule)

    def seal(self) -> None:
        """Freeze the registry; later registrations raise ConfigurationError."""
        self._sealed = True
        logger.info(event="tool_registry_sealed", tools_count=len(self._tools))

    @staticmethod
    def _check_defaults(spec: ToolSpec) -> None:
        for param in spec.params:
            if param.default is None:
                continue
            if param.required:
                raise ConfigurationError(
                    f"Tool '{spec.name}': required parameter '{param.name}' "
                    "cannot have a default",
                    {"tool_name": spec.name, "parameter": param.name},
                )
            try:
                ArgumentBinder.coerce(param, param.default)
            except BindError as e:
                raise ConfigurationError(
                    f"Tool '{spec.name}': invalid default for '{param.name}': {e.message}",
                    {"tool_name": spec.name, "parameter": param.name},
                ) from e

    def list_tools(self) -> List[ToolSpec]:
        """All registered tools, sorted by name."""
        return [self._tools[name].spec for name in sorted(self._tools)]

    def get_tool(self, tool_name: str) -> Optional[ToolDefinition]:
        return self._tools.get(tool_name)

    def manifest(self) -> List[Dict[str, Any]]:
        """Tool manifest entries (name, description, inputSchema)."""
        return [spec.to_manifest_entry() for spec in self.list_tools()]

    def __len__(self) -> int:
        return len(self._tools)

    def __contains__(self, tool_name: object) -> bool:
        return tool_name in self._tools

    async def dispatch(
        self, tool_name: str, arguments: Optional[Mapping[str, Any]] = None
    ) -> CallResult:
        """
        Execute a tool call.

        Args:
            tool_name: Name of the tool to call
            arguments: Raw argument map as received from the caller

        Returns:
            CallResult; failures are reported in the result, never raised
        """
        start_time = time.perf_counter()
        result = await self._dispatch(tool_name, arguments)
        result.elapsed_ms = round((time.perf_counter() - start_time) * 1000, 2)

        if result.ok:
            logger.info(
                event="tool_executed",
                tool_name=tool_name,
                elapsed_ms=result.elapsed_ms,
                success=True,
            )
        else:
            logger.warning(
                event="tool_execution_failed",
                tool_name=tool_name,
                elapsed_ms=result.elapsed_ms,
                error_kind=result.error_kind.value if result.error_kind else None,
                error=result.error_message,
            )
        return result

    async def _dispatch(
        self, tool_name: str, arguments: Optional[Mapping[str, Any]]
    ) -> CallResult:
        definition = self._tools.get(tool_name)
        if definition is None:
            return ResultWrapper.failure(UnknownTool(tool_name))

        try:
            bound = ArgumentBinder.bind(definition.spec.params, arguments)
            descriptor = RequestBuilder.build(definition.spec, bound, definition.rule)
        except BindError as e:
            logger.info(
                event="tool_arguments_rejected",
                tool_name=tool_name,
                error_kind=e.kind.value,
                parameter=e.parameter,
                argument_names=sorted(arguments) if isinstance(arguments, Mapping) else None,
            )
            return ResultWrapper.failure(e, VALIDATION_CONTEXT)
        except Exception as e:
            logger.error(event="tool_request_build_error", tool_name=tool_name, error=str(e))
            return ResultWrapper.failure(e, definition.spec.failure_context)

        payload, error = await self._execute(descriptor)
        return ResultWrapper.wrap(payload, error, definition.spec.failure_context)

    async def _execute(
        self, descriptor: RequestDescriptor
    ) -> Tuple[Optional[bytes], Optional[Exception]]:
        """Perform the single transport call; CancelledError is not caught."""
        logger.debug(
            event="tool_request",
            method=descriptor.method.value,
            query_keys=[key for key, _ in descriptor.query_params],
            body_keys=sorted(descriptor.body) if descriptor.body is not None else None,
        )
        try:
            if descriptor.method == HttpMethod.POST:
                payload = await self.transport.post(descriptor.target, descriptor.body)
            else:
                payload = await self.transport.get(descriptor.target)
        except Exception as e:
            return None, e
        return payload, None
