"""Configuration management."""

from .deployment import get_record_store
from .settings import Settings, get_settings

__all__ = ["Settings", "get_settings", "get_record_store"]
