# minikube_agent/tools/minikube_stop.py
"""
Minikube Stop Tool

Stops the local minikube cluster and returns the command's combined output.
"""

from .base import MinikubeTool
from .result import ToolResult


class MinikubeStopTool(MinikubeTool):
    name = "minikube_stop"
    description = "Stops the Minikube cluster"
    read_only = False

    def run(self, **kwargs) -> ToolResult:
        return self.executor.stop_cluster()
