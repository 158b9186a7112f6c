"""Exception types raised by the inventory core and tool layer."""


class InventoryError(Exception):
    """Base class for inventory errors."""


class ProductNotFoundError(InventoryError):
    """Raised when a product is missing its stock record or its policy record."""

    def __init__(self, product_id: str, missing: str = "stock"):
        self.product_id = product_id
        self.missing = missing
        super().__init__(f"No {missing} record found for product ID \"{product_id}\"")


class InvalidOperationError(InventoryError):
    """Raised when a tool name is not registered."""

    def __init__(self, tool_name: str):
        self.tool_name = tool_name
        super().__init__(f"Unknown tool: {tool_name}")


class ComputationError(InventoryError):
    """Raised when policy data makes a derived metric undefined."""

    def __init__(self, product_id: str, reason: str):
        self.product_id = product_id
        self.reason = reason
        super().__init__(f"Cannot evaluate product \"{product_id}\": {reason}")
