"""
Paprika MCP
===========

Unpacks Paprika Recipe Manager exports and serves the recipes to AI agents
over the Model Context Protocol.
"""

__version__ = "1.0.0"
