"""Main entry point for the inventory MCP server."""

import argparse
import logging
import sys
from pathlib import Path


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line options."""
    parser = argparse.ArgumentParser(description="Inventory manager MCP server")
    parser.add_argument("--data-file", type=Path, help="JSON records file to load")
    parser.add_argument("--sample-products", type=int, help="Generate this many sample products instead")
    parser.add_argument("--transport", choices=["stdio", "http", "sse"], help="MCP transport")
    parser.add_argument("--host", help="Bind host for http/sse transports")
    parser.add_argument("--port", type=int, help="Bind port for http/sse transports")
    parser.add_argument("--log-level", help="Log level (DEBUG, INFO, WARNING, ERROR)")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    """Load records and run the MCP server until the transport closes."""
    from inventory_manager.config import Settings, get_record_store, get_settings
    from inventory_manager.observability import flush_langfuse
    from inventory_manager.tools import create_mcp_server

    args = parse_args(argv)
    overrides = {
        "data_file": args.data_file,
        "sample_data_products_count": args.sample_products,
        "transport": args.transport,
        "host": args.host,
        "port": args.port,
        "log_level": args.log_level,
    }
    overrides = {key: value for key, value in overrides.items() if value is not None}

    # Logs go to stderr; stdout carries the stdio transport
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )
    logger = logging.getLogger("inventory_manager")

    try:
        settings = Settings.model_validate({**get_settings().model_dump(), **overrides})
        logging.getLogger().setLevel(settings.log_level)

        store = get_record_store(settings)
        mcp = create_mcp_server(store, settings)

        logger.info(f"Inventory MCP server started ({settings.transport})")
        if settings.transport == "stdio":
            mcp.run(transport="stdio")
        else:
            mcp.run(transport=settings.transport, host=settings.host, port=settings.port)
    except KeyboardInterrupt:
        logger.info("Inventory MCP server stopped")
    except Exception as e:
        logger.error(f"Server startup error: {e}", exc_info=True)
        sys.exit(1)
    finally:
        flush_langfuse()


if __name__ == "__main__":
    main()
