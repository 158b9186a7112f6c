"""FastMCP server setup for inventory query tools."""

import json
import logging
from typing import Any

from fastmcp import FastMCP
from fastmcp.exceptions import ToolError
from pydantic.alias_generators import to_snake

from inventory_manager.config.settings import Settings, get_settings
from inventory_manager.exceptions import InvalidOperationError
from inventory_manager.store.record_store import RecordStore

from .inventory_tools import (
    get_current_inventory_impl,
    get_inventory_status_impl,
    get_optimal_inventory_impl,
    get_reorder_suggestions_impl,
)

logger = logging.getLogger(__name__)


class ToolExecutor:
    """Execute inventory tools by name against a record store."""

    def __init__(self, store: RecordStore):
        """
        Initialize tool executor.

        Args:
            store: Record store passed to every tool call
        """
        self.store = store
        self.tools = {
            "get_current_inventory": get_current_inventory_impl,
            "get_optimal_inventory": get_optimal_inventory_impl,
            "get_inventory_status": get_inventory_status_impl,
            "get_reorder_suggestions": get_reorder_suggestions_impl,
        }
        logger.info(f"Initialized ToolExecutor with {len(self.tools)} tools")

    def _resolve(self, tool_name: str):
        if tool_name not in self.tools:
            raise InvalidOperationError(tool_name)
        return self.tools[tool_name]

    async def execute_tool(self, tool_name: str, args: dict | None = None) -> dict:
        """
        Execute a tool by name.

        Failures never propagate: they come back as a result with
        ``success=False`` and ``is_error=True``.

        Args:
            tool_name: Name of the tool to execute
            args: Tool arguments; camelCase keys such as ``productId`` are accepted

        Returns:
            Tool execution result
        """
        if not tool_name:
            logger.error("Tool name is empty or None")
            return {"success": False, "is_error": True, "message": "Tool name is required"}

        try:
            tool_func = self._resolve(tool_name)
        except InvalidOperationError as e:
            logger.error(str(e))
            return {"success": False, "is_error": True, "message": str(e)}

        kwargs = {to_snake(key): value for key, value in (args or {}).items()}
        try:
            result = await tool_func(self.store, **kwargs)
            logger.info(f"Successfully executed tool: {tool_name}")
            return result
        except Exception as e:
            logger.error(f"Error executing tool {tool_name}: {e}")
            return {"success": False, "is_error": True, "message": f"Error executing tool: {str(e)}"}


def render_tool_result(result: dict) -> str:
    """
    Render a tool result as text for the protocol response.

    Args:
        result: Result dictionary from ToolExecutor.execute_tool

    Returns:
        Pretty-printed JSON of the result data, or the message when there is no data
    """
    if "data" in result:
        return json.dumps(result["data"], indent=2, ensure_ascii=False)
    return result.get("message", "")


def create_mcp_server(store: RecordStore, settings: Settings | None = None) -> FastMCP:
    """
    Build a FastMCP server exposing the inventory tools over ``store``.

    Args:
        store: Record store backing every tool
        settings: Optional Settings instance. If None, will use get_settings().

    Returns:
        Configured FastMCP server
    """
    if settings is None:
        settings = get_settings()

    mcp = FastMCP(settings.server_name)
    executor = ToolExecutor(store)

    async def _call(tool_name: str, args: dict[str, Any]) -> str:
        logger.info(f"Tool call: {tool_name}({args})")
        result = await executor.execute_tool(tool_name, args)
        if result.get("is_error"):
            raise ToolError(result["message"])
        return render_tool_result(result)

    # parameter names are the camelCase wire names
    @mcp.tool()
    async def get_current_inventory(productId: str | None = None) -> str:
        """
        Get current stock data. Pass a product ID to get a single product.

        Args:
            productId: Optional product ID. Returns all products when omitted.
        """
        return await _call("get_current_inventory", {"product_id": productId})

    @mcp.tool()
    async def get_optimal_inventory(productId: str | None = None) -> str:
        """
        Get optimal inventory policy data. Pass a product ID to get a single product.

        Args:
            productId: Optional product ID. Returns all policies when omitted.
        """
        return await _call("get_optimal_inventory", {"product_id": productId})

    @mcp.tool()
    async def get_inventory_status(productId: str | None = None) -> str:
        """
        Compare current stock with optimal inventory and report status, alerts and utilization.

        Args:
            productId: Optional product ID. Returns all products when omitted.
        """
        return await _call("get_inventory_status", {"product_id": productId})

    @mcp.tool()
    async def get_reorder_suggestions() -> str:
        """List products that need reordering with recommended order quantities."""
        return await _call("get_reorder_suggestions", {})

    logger.info(f"Created MCP server '{settings.server_name}' v{settings.server_version}")
    return mcp


def _product_id_parameters(description: str) -> dict:
    return {
        "type": "object",
        "properties": {
            "productId": {
                "type": "string",
                "description": description,
            },
        },
    }


def get_tool_definitions() -> list[dict]:
    """
    Get OpenAI-compatible tool definitions for function calling.

    Returns:
        List of tool definition dictionaries
    """
    return [
        {
            "type": "function",
            "function": {
                "name": "get_current_inventory",
                "description": "Get current stock data. Pass a product ID to get a single product.",
                "parameters": _product_id_parameters("Product ID (optional). Returns all products when omitted."),
            },
        },
        {
            "type": "function",
            "function": {
                "name": "get_optimal_inventory",
                "description": "Get optimal inventory policy data. Pass a product ID to get a single product.",
                "parameters": _product_id_parameters("Product ID (optional). Returns all policies when omitted."),
            },
        },
        {
            "type": "function",
            "function": {
                "name": "get_inventory_status",
                "description": (
                    "Compare current stock with optimal inventory and return status, alerts, "
                    "stock difference and utilization."
                ),
                "parameters": _product_id_parameters("Product ID (optional). Returns all products when omitted."),
            },
        },
        {
            "type": "function",
            "function": {
                "name": "get_reorder_suggestions",
                "description": "List products that need reordering with recommended order quantities.",
                "parameters": {"type": "object", "properties": {}},
            },
        },
    ]
