"""
ZenTao tool catalog.

Each tool submodule declares a TOOLS list; build_registry registers all of them
with one shared transport and seals the registry. The resources module declares
the read-only RESOURCES served by build_resource_registry.
"""

from typing import List

from common.logging import TimedLogger, get_logger
from engine.registry import ToolRegistry
from engine.resources import ResourceRegistry
from engine.transport import TransportClient

from . import (
    admin,
    ai,
    api_libs,
    builds,
    designs,
    docs,
    feedback,
    kanban,
    my,
    platform,
    products,
    programs,
    projects,
    qa,
    reports,
    requirements,
    resources,
    stakeholders,
    testcases,
    todos,
    tree,
    users,
    work_items,
    zanode,
)
from .base import ToolEntry

logger = get_logger(__name__)

CATALOG_MODULES = (
    users,
    admin,
    my,
    products,
    projects,
    programs,
    stakeholders,
    work_items,
    requirements,
    todos,
    builds,
    testcases,
    qa,
    feedback,
    designs,
    kanban,
    docs,
    api_libs,
    tree,
    platform,
    reports,
    ai,
    zanode,
)


def all_tools() -> List[ToolEntry]:
    """Every catalog entry, in module order."""
    entries: List[ToolEntry] = []
    for module in CATALOG_MODULES:
        entries.extend(module.TOOLS)
    return entries


def build_registry(transport: TransportClient) -> ToolRegistry:
    """
    Create the sealed registry for the full catalog.

    Raises:
        ConfigurationError: A catalog entry is invalid or duplicated
    """
    registry = ToolRegistry(transport)
    with TimedLogger(logger, "catalog_loaded", modules=len(CATALOG_MODULES)):
        registry.register_all(all_tools())
        registry.seal()
    return registry


def build_resource_registry(transport: TransportClient) -> ResourceRegistry:
    """
    Create the sealed registry of read-only resources.

    Raises:
        ConfigurationError: A resource declaration is invalid or duplicated
    """
    registry = ResourceRegistry(transport)
    with TimedLogger(logger, "resources_loaded", resources=len(resources.RESOURCES)):
        registry.register_all(resources.RESOURCES)
        registry.seal()
    return registry
