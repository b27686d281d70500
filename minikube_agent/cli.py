# minikube_agent/cli.py
"""
Command-Line Interface (CLI)

This module defines the command-line launcher for the minikube agent.
It uses Typer to parse flags, builds the tool registry and hands it to the
chosen transport. It also offers a couple of commands for poking at the tools
by hand.
"""

import json
# Import Typer - a modern library for building CLI applications
import typer
# Import typing utilities for type hints
from typing import Optional

from . import get_version
from .mcp import client
from .mcp.server import start_mcp_server
from .settings import settings
from .tools import AccessLevel, build_registry
from .tools.executor import MinikubeExecutor
from .tools.registry import ToolRegistry

# Create the main Typer application instance
app = typer.Typer(
    name="minikube-agent",
    help="Expose minikube start/stop/status as JSON-RPC tools for automated agents.",
    add_completion=False,
    no_args_is_help=True,
    rich_markup_mode="rich"
)


def _build_local_registry(
    access_level: Optional[str] = None,
    binary: Optional[str] = None,
    profile: Optional[str] = None,
) -> ToolRegistry:
    """Build a registry from CLI flags, falling back to settings."""
    level = (access_level or settings.ACCESS_LEVEL).lower()
    try:
        access = AccessLevel(level)
    except ValueError:
        typer.echo(f"❌ Unknown access level '{level}' (expected readonly or readwrite)", err=True)
        raise typer.Exit(code=1)

    executor = MinikubeExecutor(
        binary=binary or settings.BINARY,
        profile=profile if profile is not None else settings.PROFILE,
    )
    return build_registry(executor, access)


@app.command(name="server")
def start_server(
    transport: Optional[str] = typer.Option(None, "--transport", "-t", help="Transport mechanism (stdio, http, sse)"),
    host: Optional[str] = typer.Option(None, help="Bind address for the http transport"),
    port: Optional[int] = typer.Option(None, help="Port for the http transport"),
    access_level: Optional[str] = typer.Option(None, "--access-level", help="Access level (readonly, readwrite)"),
    binary: Optional[str] = typer.Option(None, help="Path to the minikube binary"),
    profile: Optional[str] = typer.Option(None, "--profile", "-p", help="minikube profile to operate on"),
):
    """Start the MCP (Model Context Protocol) server."""
    registry = _build_local_registry(access_level, binary, profile)
    try:
        start_mcp_server(registry=registry, transport=transport, host=host, port=port)
    except KeyboardInterrupt:
        typer.echo("\n🛑 MCP Server stopped by user (Ctrl+C)", err=True)
    except Exception as e:
        typer.echo(f"❌ Error starting server: {str(e)}", err=True)
        raise typer.Exit(code=1)


@app.command(name="list-tools")
def list_tools(
    access_level: Optional[str] = typer.Option(None, "--access-level", help="Access level (readonly, readwrite)"),
):
    """List the tools the server would expose."""
    registry = _build_local_registry(access_level)

    typer.echo("📋 Available Tools:")
    for tool in registry.get_tools_schema():
        typer.echo(f"• {tool['name']}: {tool['description']}")


@app.command(name="call")
def call_command(
    tool_name: str = typer.Argument(..., help="Name of the tool to run (e.g. minikube_status)"),
    url: Optional[str] = typer.Option(None, help="Call a running http server instead of running locally"),
    binary: Optional[str] = typer.Option(None, help="Path to the minikube binary"),
    profile: Optional[str] = typer.Option(None, "--profile", "-p", help="minikube profile to operate on"),
):
    """
    Run a single tool and print its result envelope as JSON.
    Exits with code 1 when the tool reports a failure.
    """
    if url:
        result = client.call_tool(tool_name, url=url)
    else:
        registry = _build_local_registry(binary=binary, profile=profile)
        result = registry.dispatch(tool_name).to_dict()

    typer.echo(json.dumps(result, indent=2))
    if not result.get("success"):
        raise typer.Exit(code=1)


@app.callback(invoke_without_command=True)
def cli_entry_callback(
    ctx: typer.Context,
    version: bool = typer.Option(None, "--version", "-v", help="Show version and exit")
):
    if version:
        typer.echo(f"{settings.SERVER_NAME} v{get_version()}")
        raise typer.Exit()
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


def main():
    """Entry point for the console script."""
    app()


if __name__ == "__main__":
    main()
