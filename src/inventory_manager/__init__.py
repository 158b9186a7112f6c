"""Inventory manager: stock health analytics exposed as MCP tools."""

__version__ = "1.0.0"
