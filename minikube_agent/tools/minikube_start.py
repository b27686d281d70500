# minikube_agent/tools/minikube_start.py
"""
Minikube Start Tool

Starts the local minikube cluster. The call blocks until `minikube start`
exits; the combined output of the command is returned as-is.
"""

from .base import MinikubeTool
from .result import ToolResult


class MinikubeStartTool(MinikubeTool):
    """
    Tool for starting the minikube cluster.

    Starting changes cluster state, so the tool is hidden in readonly mode.
    """

    name = "minikube_start"
    description = "Starts the Minikube cluster"
    read_only = False

    def run(self, **kwargs) -> ToolResult:
        return self.executor.start_cluster()
