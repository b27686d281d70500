# minikube_agent/__init__.py
"""
Minikube Agent Package Initialization

This package exposes the lifecycle of a local minikube cluster (start, stop,
status) as JSON-RPC tools so that an automated agent can drive the cluster
without scraping free-form CLI text.
"""

# Package metadata
__version__ = "0.1.0"
__description__ = "JSON-RPC tool server for minikube cluster lifecycle operations"

__all__ = [
    "build_registry",
    "ToolRegistry",
    "MinikubeExecutor",
    "ClusterStatus",
    "__version__",
]

from .tools import build_registry
from .tools.registry import ToolRegistry
from .tools.executor import MinikubeExecutor, ClusterStatus


def get_version():
    """
    Get the current version of the minikube_agent package.

    Returns:
        str: The version string in format "major.minor.patch"
    """
    return __version__

