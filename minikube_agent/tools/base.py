# minikube_agent/tools/base.py
"""
Base classes for all minikube tools.

This defines the standard interface that all tools must implement.
It ensures every operation exposed to the agent has a name, a description,
a parameter schema and a run() method returning a ToolResult.
"""

# Import the Abstract Base Class (ABC) module
# This allows us to define abstract methods that must be implemented by subclasses
from abc import ABC, abstractmethod
from typing import Dict, Any

from .executor import MinikubeExecutor
from .result import ToolResult


class Tool(ABC):
    """
    Abstract base class for all tools.

    Every operation that we want to expose must inherit from this class.
    """

    # These are class attributes that subclasses must define
    name: str  # Unique identifier for the tool (e.g., "minikube_status")
    description: str  # Human-readable description of what the tool does
    read_only: bool = False  # True when the tool never changes cluster state

    def get_parameters_schema(self) -> Dict[str, Any]:
        """
        Return the JSON Schema for this tool's parameters.

        The default describes a tool that takes no arguments.

        Returns:
            Dict[str, Any]: JSON Schema describing the tool's parameters
        """
        return {
            "type": "object",
            "properties": {},
            "required": []
        }

    @abstractmethod
    def run(self, **kwargs) -> ToolResult:
        """
        Execute the tool.

        Args:
            **kwargs: Parameters passed from the caller

        Returns:
            ToolResult: Success or Failure
        """
        pass  # This method must be implemented by subclasses


class MinikubeTool(Tool):
    """
    A tool backed by a MinikubeExecutor.

    Lifecycle tools take no arguments; anything passed in is ignored.
    """

    def __init__(self, executor: MinikubeExecutor):
        self.executor = executor
