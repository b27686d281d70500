# minikube_agent/tools/minikube_status.py
"""
Minikube Status Tool

Reports the cluster state as structured data decoded from
`minikube status -o json`: cluster name, host, kubelet, API server and
kubeconfig state. Values are passed through exactly as minikube reports them;
deciding whether "Stopped" or "Misconfigured" is a problem is left to the
caller.
"""

from .base import MinikubeTool
from .result import ToolResult


class MinikubeStatusTool(MinikubeTool):
    """
    Tool for querying the minikube cluster status.

    This is the only read-only lifecycle tool and stays available in
    readonly mode.
    """

    name = "minikube_status"
    description = "Gets the status of the Minikube cluster"
    read_only = True

    def run(self, **kwargs) -> ToolResult:
        """
        Returns:
            ToolResult: Success(ClusterStatus), or a Failure of kind
                ExecutionFailed / MalformedOutput
        """
        return self.executor.get_status()
