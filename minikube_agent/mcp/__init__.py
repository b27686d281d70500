# minikube_agent/mcp/__init__.py
"""
MCP (Model Context Protocol) Subpackage Initialization

Server and client sides of the JSON-RPC transport for the minikube tools.
"""

from .server import create_application, create_dispatcher, serve_stdio, start_mcp_server
from .client import call_tool, list_tools, test_connection

__all__ = [
    "create_application",
    "create_dispatcher",
    "serve_stdio",
    "start_mcp_server",
    "call_tool",
    "list_tools",
    "test_connection",
]
