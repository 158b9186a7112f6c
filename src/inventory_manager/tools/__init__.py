"""MCP tools for inventory queries."""

from .inventory_tools import (
    get_current_inventory_impl,
    get_inventory_status_impl,
    get_optimal_inventory_impl,
    get_reorder_suggestions_impl,
)
from .mcp_server import ToolExecutor, create_mcp_server, get_tool_definitions, render_tool_result

__all__ = [
    "get_current_inventory_impl",
    "get_optimal_inventory_impl",
    "get_inventory_status_impl",
    "get_reorder_suggestions_impl",
    "ToolExecutor",
    "create_mcp_server",
    "get_tool_definitions",
    "render_tool_result",
]
