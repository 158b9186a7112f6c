"""LangFuse client wrapper for observability."""

import logging

logger = logging.getLogger(__name__)

# Global LangFuse client instance
_langfuse_client = None


def get_langfuse_client():
    """
    Get singleton LangFuse client instance.

    Returns:
        Langfuse client instance or None if tracing is disabled or unavailable
    """
    global _langfuse_client

    if _langfuse_client is not None:
        return _langfuse_client

    try:
        from inventory_manager.config.settings import get_settings

        settings = get_settings()

        if not settings.langfuse_enabled:
            logger.debug("LangFuse is disabled in settings")
            return None

        from langfuse import Langfuse

        _langfuse_client = Langfuse(
            public_key=settings.langfuse_public_key,
            secret_key=settings.langfuse_secret_key,
            host=settings.langfuse_host,
        )

        logger.info(f"Initialized LangFuse client with host: {settings.langfuse_host}")
        return _langfuse_client

    except ImportError:
        logger.warning("langfuse package not installed. Install with: pip install langfuse")
        return None
    except Exception as e:
        logger.error(f"Error initializing LangFuse client: {e}")
        return None


def reset_langfuse_client() -> None:
    """Drop the cached client so the next call re-reads settings."""
    global _langfuse_client
    _langfuse_client = None


def flush_langfuse():
    """Flush LangFuse client to ensure all traces are sent."""
    if _langfuse_client is None:
        return
    try:
        _langfuse_client.flush()
        logger.debug("Flushed LangFuse client")
    except Exception as e:
        logger.error(f"Error flushing LangFuse client: {e}")
