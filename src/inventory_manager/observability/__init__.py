"""Observability module for LangFuse tracing."""

from inventory_manager.observability.decorators import trace
from inventory_manager.observability.langfuse_client import (
    flush_langfuse,
    get_langfuse_client,
    reset_langfuse_client,
)

__all__ = ["get_langfuse_client", "reset_langfuse_client", "flush_langfuse", "trace"]
