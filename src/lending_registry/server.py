"""Lending Registry MCP Server - Core Server Implementation

Wires one explicitly constructed ``Registry`` into a FastMCP server:

- Tools (borrow_item, return_item) change loan state
- Resources (library://items/..., library://members/..., library://summary)
  expose read-only views

``create_server`` builds the server around a registry so tests and embedding
applications can supply their own; ``main`` is the console entry point.
"""

import logging
import signal
import sys
from typing import Any

from fastmcp import FastMCP

from .config import ServerConfig, get_config
from .registry import Registry
from .resources import build_catalog_resources
from .seed import build_sample_registry
from .tools import build_circulation_tools

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(config: ServerConfig) -> None:
    """Send log records to stderr.

    stdout carries JSON-RPC messages on the stdio transport and must stay clean.
    """
    level = logging.DEBUG if config.debug else getattr(logging, config.log_level)
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stderr)],
        force=True,
    )

    if not config.is_development:
        logging.getLogger("fastmcp").setLevel(logging.WARNING)


# =============================================================================
# SERVER CONSTRUCTION
# =============================================================================


def create_server(registry: Registry, config: ServerConfig | None = None) -> FastMCP:
    """Build a FastMCP server exposing ``registry``."""
    config = config or get_config()

    mcp = FastMCP(
        name=config.server_name,
        version=config.server_version,
        instructions=(
            "Lending Registry MCP Server - a catalog of loanable items and a roster "
            "of members. Use resources to browse items and members' loans, and the "
            "borrow_item / return_item tools to lend and take back items."
        ),
    )

    tools = build_circulation_tools(registry)
    for tool in tools:
        mcp.tool(name=tool["name"], description=tool["description"])(tool["handler"])

    resources = build_catalog_resources(registry)
    for resource in resources:
        # URIs with {params} become resource templates
        mcp.resource(
            resource["uri"],
            name=resource["name"],
            description=resource["description"],
            mime_type=resource["mime_type"],
        )(resource["handler"])

    logger.info("Registered %d tools and %d resources", len(tools), len(resources))
    return mcp


# =============================================================================
# TRANSPORT
# =============================================================================


def run_server(mcp: FastMCP, config: ServerConfig) -> None:
    """Run ``mcp`` on the configured transport until interrupted."""

    def signal_handler(signum: int, _frame: Any) -> None:
        logger.info("Received signal %s, initiating shutdown...", signum)
        sys.exit(0)

    signal.signal(signal.SIGINT, signal_handler)
    signal.signal(signal.SIGTERM, signal_handler)

    if config.transport == "stdio":
        logger.info("Starting %s v%s on stdio transport", config.server_name, config.server_version)
        mcp.run(transport="stdio")
    else:
        logger.info(
            "Starting %s v%s on http://%s:%d",
            config.server_name,
            config.server_version,
            config.http_host,
            config.http_port,
        )
        mcp.run(transport="http", host=config.http_host, port=config.http_port)


def main() -> None:
    """Main entry point for the MCP server.

    Started via ``python -m lending_registry.server`` or the
    ``lending-registry`` console script.
    """
    config = get_config()
    configure_logging(config)

    try:
        logger.info("=" * 60)
        logger.info("Lending Registry MCP Server")
        logger.info("Version: %s", config.server_version)
        logger.info("Transport: %s", config.transport)
        logger.info("Debug Mode: %s", config.debug)
        logger.info("=" * 60)

        registry = build_sample_registry() if config.seed_sample_data else Registry()
        run_server(create_server(registry, config), config)

    except KeyboardInterrupt:
        logger.info("Server stopped by user")
    except Exception:
        logger.exception("Failed to start MCP server")
        sys.exit(1)


if __name__ == "__main__":
    main()
