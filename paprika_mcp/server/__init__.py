"""
Paprika MCP Server Module
=========================

FastMCP wiring for the recipe tools.
"""

from .app import build_server, serve

__all__ = ["build_server", "serve"]
