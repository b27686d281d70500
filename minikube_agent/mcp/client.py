# minikube_agent/mcp/client.py
"""
MCP (Model Context Protocol) Client

This client sends JSON-RPC 2.0 requests to a minikube MCP server running
with the http transport. Connection problems and JSON-RPC errors are folded
into the same {"success": False, "error": ...} shape the tools use, so callers
only ever check one key.
"""

import requests
from typing import Any, Dict, List, Optional

from ..settings import settings
from .server import CALL_TOOL_METHOD, LIST_TOOLS_METHOD

# No timeout by default: lifecycle commands like `minikube start` can take
# minutes and the server imposes none either
DEFAULT_TIMEOUT: Optional[float] = None


def _post(url: str, method: str, params: Dict[str, Any], timeout: Optional[float]) -> Dict[str, Any]:
    """Send one JSON-RPC request and return the decoded body."""
    payload = {
        "jsonrpc": "2.0",
        "method": method,
        "params": params,
        "id": 1
    }
    response = requests.post(url, json=payload, timeout=timeout)
    response.raise_for_status()
    return response.json()


def call_tool(
    tool_name: str,
    arguments: Optional[Dict[str, Any]] = None,
    url: Optional[str] = None,
    timeout: Optional[float] = DEFAULT_TIMEOUT,
) -> Dict[str, Any]:
    """
    Execute a tool on the server.

    Args:
        tool_name (str): Name of the tool (e.g., "minikube_status")
        arguments (dict): Tool arguments, if any
        url (str): Server URL. If None, built from settings.
        timeout (float): Seconds to wait for the response, None waits forever

    Returns:
        Dict[str, Any]: The tool result envelope ({"success": ...}), taken
            from the structuredContent of the MCP tools/call result
    """
    url = url or settings.server_url()
    params = {"name": tool_name, "arguments": arguments or {}}

    try:
        result = _post(url, CALL_TOOL_METHOD, params, timeout)
    except requests.exceptions.JSONDecodeError as e:
        return {"success": False, "error": f"Invalid response from server: {str(e)}"}
    except requests.exceptions.ConnectionError:
        return {"success": False, "error": f"Cannot connect to MCP server at {url}. Is it running?"}
    except requests.exceptions.Timeout:
        return {"success": False, "error": "Request timed out"}
    except requests.exceptions.RequestException as e:
        return {"success": False, "error": f"Request failed: {str(e)}"}

    if "error" in result:
        return {"success": False, "error": result["error"]}

    envelope = result.get("result", {}).get("structuredContent")
    if envelope is None:
        return {"success": False, "error": "No result returned"}
    return envelope


def list_tools(url: Optional[str] = None, timeout: Optional[float] = 10) -> List[Dict[str, Any]]:
    """
    Fetch the tool descriptions advertised by the server.

    Raises:
        requests.exceptions.RequestException: the server could not be reached
        RuntimeError: the server answered with a JSON-RPC error
    """
    url = url or settings.server_url()
    result = _post(url, LIST_TOOLS_METHOD, {}, timeout)
    if "error" in result:
        raise RuntimeError(f"Server error: {result['error']}")
    return result.get("result", {}).get("tools", [])


def test_connection(url: Optional[str] = None) -> bool:
    """Check that a server answers tools/list."""
    try:
        list_tools(url=url)
        return True
    except (requests.exceptions.RequestException, RuntimeError):
        return False
