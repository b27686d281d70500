# minikube_agent/mcp/server.py
"""
MCP (Model Context Protocol) Server

This server exposes the minikube tools as JSON-RPC 2.0 methods. It uses the
json-rpc library for the protocol and can serve it two ways:

- http: Werkzeug WSGI server, one JSON-RPC document per POST body
- stdio: one JSON-RPC document per line on stdin, responses on stdout

Each tool in the registry becomes a method of the same name, returning the
plain {"success": ...} envelope. On top of that the server speaks the MCP
subset an MCP client needs: the 'initialize' handshake, the
'notifications/initialized' notification, 'ping', 'tools/list' and
'tools/call' (content + isError results).
"""

import sys
from typing import Any, Dict, Optional, TextIO

# Import the JSON-RPC library for handling JSON-RPC 2.0 requests
from jsonrpc import Dispatcher, JSONRPCResponseManager
# Import Werkzeug for WSGI server and request handling
from werkzeug.serving import run_simple
from werkzeug.wrappers import Request, Response

from ..settings import settings
from ..tools import AccessLevel, build_registry
from ..tools.executor import MinikubeExecutor
from ..tools.registry import ToolRegistry
from ..tools.result import ToolResult

INITIALIZE_METHOD = "initialize"
INITIALIZED_NOTIFICATION = "notifications/initialized"
PING_METHOD = "ping"
LIST_TOOLS_METHOD = "tools/list"
CALL_TOOL_METHOD = "tools/call"

DEFAULT_PROTOCOL_VERSION = "2024-11-05"


def create_tool_handler(registry: ToolRegistry, tool_name: str):
    """
    Factory function that creates a JSON-RPC handler for a specific tool.

    Tool failures come back as a normal JSON-RPC result with success=False;
    JSON-RPC errors are left to protocol problems.

    Args:
        registry (ToolRegistry): The registry to dispatch into
        tool_name (str): The name of the tool this handler will execute

    Returns:
        function: A handler function that can be registered with the dispatcher
    """
    def handler(**kwargs) -> Dict[str, Any]:
        return registry.dispatch(tool_name, kwargs).to_dict()
    return handler


def to_mcp_tool_result(result: ToolResult) -> Dict[str, Any]:
    """
    Wrap a ToolResult in the MCP tools/call shape.

    The text content is the command output (indented JSON for status) on
    success and the error detail on failure; the full envelope travels as
    structuredContent.
    """
    envelope = result.to_dict()
    text = envelope["output"] if envelope["success"] else envelope["error"]
    return {
        "content": [{"type": "text", "text": text}],
        "isError": not envelope["success"],
        "structuredContent": envelope,
    }


def create_dispatcher(
    registry: ToolRegistry,
    server_name: Optional[str] = None,
    server_version: Optional[str] = None,
) -> Dispatcher:
    """
    Build a JSON-RPC dispatcher for every tool in the registry, plus the MCP
    lifecycle and discovery methods (initialize, ping, tools/list, tools/call).
    """
    server_name = server_name or settings.SERVER_NAME
    server_version = server_version or settings.SERVER_VERSION
    dispatcher = Dispatcher()

    for name in registry.get_tool_names():
        dispatcher.add_method(create_tool_handler(registry, name), name)

    def initialize(protocolVersion: Optional[str] = None, **kwargs) -> Dict[str, Any]:
        # Echo the client's protocol version; the tool surface is the same in all of them
        return {
            "protocolVersion": protocolVersion or DEFAULT_PROTOCOL_VERSION,
            "capabilities": {"tools": {"listChanged": False}},
            "serverInfo": {"name": server_name, "version": server_version},
        }

    def initialized(**kwargs) -> None:
        return None

    def ping(**kwargs) -> Dict[str, Any]:
        return {}

    def list_tools(**kwargs) -> Dict[str, Any]:
        return {
            "tools": [
                {
                    "name": tool["name"],
                    "description": tool["description"],
                    "inputSchema": tool["parameters"],
                }
                for tool in registry.get_tools_schema()
            ]
        }

    def call_tool(name: Any = None, arguments: Optional[Dict[str, Any]] = None, **kwargs) -> Dict[str, Any]:
        return to_mcp_tool_result(registry.dispatch(name, arguments))

    dispatcher.add_method(initialize, INITIALIZE_METHOD)
    dispatcher.add_method(initialized, INITIALIZED_NOTIFICATION)
    dispatcher.add_method(ping, PING_METHOD)
    dispatcher.add_method(list_tools, LIST_TOOLS_METHOD)
    dispatcher.add_method(call_tool, CALL_TOOL_METHOD)
    return dispatcher


def create_application(registry: ToolRegistry):
    """
    Build the WSGI application serving JSON-RPC for the given registry.

    Returns:
        function: WSGI application callable
    """
    dispatcher = create_dispatcher(registry)

    def application(environ, start_response):
        request = Request(environ)
        request_body = request.get_data(as_text=True)
        response = JSONRPCResponseManager.handle(request_body, dispatcher)
        if response is None:
            # Notification: nothing to send back
            wsgi_response = Response(status=204)
        else:
            wsgi_response = Response(response.json, mimetype='application/json')
        return wsgi_response(environ, start_response)

    return application


def serve_stdio(registry: ToolRegistry, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None):
    """
    Serve JSON-RPC over line-delimited stdio until stdin is closed.

    stdout carries protocol traffic only; anything meant for a human goes to
    stderr.
    """
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    dispatcher = create_dispatcher(registry)

    for line in stdin:
        line = line.strip()
        if not line:
            continue
        response = JSONRPCResponseManager.handle(line, dispatcher)
        if response is None:
            continue
        stdout.write(response.json + "\n")
        stdout.flush()


def start_mcp_server(
    registry: Optional[ToolRegistry] = None,
    transport: Optional[str] = None,
    host: Optional[str] = None,
    port: Optional[int] = None,
):
    """
    Start the MCP server. Blocks until stopped.

    Args:
        registry: Tools to serve. Built from settings when omitted.
        transport: 'stdio' or 'http' ('sse' is an alias for 'http').
            If None, uses settings.TRANSPORT.
        host: Bind address for http. If None, uses settings.HOST.
        port: Port for http. If None, uses settings.PORT.

    Raises:
        ValueError: unknown transport
    """
    if registry is None:
        executor = MinikubeExecutor(binary=settings.BINARY, profile=settings.PROFILE)
        registry = build_registry(executor, AccessLevel(settings.ACCESS_LEVEL.lower()))
    if transport is None:
        transport = settings.normalized_transport()
    else:
        transport = "http" if transport.lower() == "sse" else transport.lower()
    if host is None:
        host = settings.HOST
    if port is None:
        port = settings.PORT

    if transport == "stdio":
        print(f"🚀 {settings.SERVER_NAME} {settings.SERVER_VERSION} serving on stdio", file=sys.stderr)
        print(f"   Available tools: {registry.get_tool_names()}", file=sys.stderr)
        serve_stdio(registry)
        return

    if transport != "http":
        raise ValueError(f"Unsupported transport '{transport}' (expected stdio or http)")

    print(f"🚀 {settings.SERVER_NAME} {settings.SERVER_VERSION} running at http://{host}:{port}", file=sys.stderr)
    print(f"   Available tools: {registry.get_tool_names()}", file=sys.stderr)
    print("   Press Ctrl+C to stop the server", file=sys.stderr)

    # Each request runs its command on its own thread; nothing is shared
    run_simple(
        hostname=host,
        port=port,
        application=create_application(registry),
        use_reloader=False,
        use_debugger=False,
        threaded=True
    )


# Example of what a JSON-RPC request looks like:
"""
{
    "jsonrpc": "2.0",
    "method": "minikube_status",
    "params": {},
    "id": 1
}
"""

# Example of what a JSON-RPC response looks like:
"""
{
    "jsonrpc": "2.0",
    "result": {
        "success": true,
        "output": "{\\n  \\"Name\\": \\"minikube\\", ...}",
        "data": {
            "Name": "minikube",
            "Host": "Running",
            "Kubelet": "Running",
            "APIServer": "Running",
            "Kubeconfig": "Configured"
        }
    },
    "id": 1
}
"""
