# minikube_agent/tools/registry.py
"""
Tool Registry

Maps operation names to handlers. A registry is built once at startup and is
only read afterwards: dispatch() for executing a tool, get_tools_schema() for
advertising the available tools to a remote caller.

Registries are ordinary instances handed to whatever serves requests, so
tests can build as many isolated ones as they like.
"""

from typing import Any, Callable, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from .base import Tool
from .result import ErrorKind, Failure, ToolResult


class DuplicateToolError(ValueError):
    """Raised when a name is registered twice in the same registry."""


class Operation(BaseModel):
    """A registered, invokable tool."""
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    name: str
    description: str
    handler: Callable[..., ToolResult]
    parameters: Dict[str, Any] = Field(
        default_factory=lambda: {"type": "object", "properties": {}, "required": []}
    )


class ToolRegistry:
    """
    Registry of the tools available to protocol callers.
    """
    def __init__(self):
        self._operations: Dict[str, Operation] = {}

    def register(
        self,
        name: str,
        description: str,
        handler: Callable[..., ToolResult],
        parameters: Optional[Dict[str, Any]] = None,
    ) -> Operation:
        """
        Bind a handler to a name.

        Raises:
            ValueError: name is empty
            DuplicateToolError: name is already registered
        """
        if not name:
            raise ValueError("Tool name must be a non-empty string")
        if name in self._operations:
            raise DuplicateToolError(f"Tool '{name}' is already registered")

        fields: Dict[str, Any] = {"name": name, "description": description, "handler": handler}
        if parameters is not None:
            fields["parameters"] = parameters
        operation = Operation(**fields)
        self._operations[name] = operation
        return operation

    def register_tool(self, tool: Tool) -> Tool:
        """
        Register a Tool instance under its own name.
        """
        self.register(tool.name, tool.description, tool.run, tool.get_parameters_schema())
        return tool

    def dispatch(self, name: str, args: Optional[Dict[str, Any]] = None) -> ToolResult:
        """
        Invoke the handler bound to name and return its result unchanged.

        Unknown names produce an UnknownOperation failure without touching
        any handler. An exception escaping a handler becomes an
        ExecutionFailed failure so later calls are unaffected.
        """
        operation = self._operations.get(name) if isinstance(name, str) else None
        if operation is None:
            return Failure(
                kind=ErrorKind.UNKNOWN_OPERATION,
                detail=f"Tool '{name}' not found in registry",
            )

        try:
            return operation.handler(**(args or {}))
        except Exception as e:
            return Failure(
                kind=ErrorKind.EXECUTION_FAILED,
                detail=f"Tool execution failed: {str(e)}",
            )

    def get_operation(self, name: str) -> Optional[Operation]:
        return self._operations.get(name)

    def get_tools_schema(self) -> List[dict]:
        """
        Describe every registered tool, in registration order.

        Returns:
            List[dict]: name, description and parameters per tool
        """
        return [
            {
                "name": op.name,
                "description": op.description,
                "parameters": op.parameters,
            }
            for op in self._operations.values()
        ]

    def get_tool_names(self) -> List[str]:
        return list(self._operations)

    def has_tool(self, name: str) -> bool:
        return name in self._operations

    def __contains__(self, name: str) -> bool:
        return self.has_tool(name)

    def __len__(self) -> int:
        return len(self._operations)
