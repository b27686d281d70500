# minikube_agent/tools/__init__.py
"""
Tools Registry Module

This module gathers the minikube tools and builds the registry that the
JSON-RPC server dispatches into. Each call to build_registry() returns a fresh,
independent registry, so the server and the tests never share state.
"""

# Import each individual tool class from its respective file
from .minikube_start import MinikubeStartTool
from .minikube_stop import MinikubeStopTool
from .minikube_status import MinikubeStatusTool

# Import typing utilities for type hints
from enum import Enum
from typing import List, Optional, Type, Union

from .base import MinikubeTool, Tool
from .executor import MinikubeExecutor
from .registry import ToolRegistry


class AccessLevel(str, Enum):
    """Which tools a server exposes."""
    READONLY = "readonly"    # status only
    READWRITE = "readwrite"  # start, stop and status


# Every minikube tool, in the order they are advertised
ALL_TOOL_CLASSES: List[Type[MinikubeTool]] = [
    MinikubeStartTool,
    MinikubeStopTool,
    MinikubeStatusTool,
]


def build_registry(
    executor: Optional[MinikubeExecutor] = None,
    access_level: Union[AccessLevel, str] = AccessLevel.READWRITE,
) -> ToolRegistry:
    """
    Build a registry holding the minikube tools.

    Args:
        executor: Executor shared by the tools (a subprocess-backed one by default)
        access_level: readonly registers only tools that never change cluster state

    Returns:
        ToolRegistry: a new registry instance

    Raises:
        ValueError: unknown access level
    """
    level = AccessLevel(access_level)
    executor = executor or MinikubeExecutor()

    registry = ToolRegistry()
    for tool_cls in ALL_TOOL_CLASSES:
        if level is AccessLevel.READONLY and not tool_cls.read_only:
            continue
        registry.register_tool(tool_cls(executor))
    return registry


__all__ = [
    "AccessLevel",
    "ALL_TOOL_CLASSES",
    "build_registry",
    "MinikubeExecutor",
    "MinikubeStartTool",
    "MinikubeStatusTool",
    "MinikubeStopTool",
    "Tool",
    "ToolRegistry",
]
