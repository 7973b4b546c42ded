"""Local Library server entry point.

Runs the catalog on one of two transports:

- ``http``: the FastAPI app under uvicorn
- ``stdio``: an MCP server exposing the same pages as resources
"""

import logging
import signal
import sys
from typing import Any

import uvicorn
from fastmcp import FastMCP

from .app import create_app
from .config import LibraryConfig, get_config
from .database.session import get_db_manager
from .resources import catalog_resources

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(config: LibraryConfig) -> None:
    """Log to stderr so stdout stays free for the stdio transport."""
    level = logging.DEBUG if config.debug else getattr(logging, config.log_level)
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stderr)],
        force=True,
    )

    if not config.is_development:
        logging.getLogger("fastmcp").setLevel(logging.WARNING)
        logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)


def create_mcp_server(config: LibraryConfig) -> FastMCP:
    """Build the MCP server and register the catalog resources."""
    mcp = FastMCP(
        name=config.server_name,
        instructions=(
            "Local Library catalog. Read library://authors/list for the author list "
            "and library://books/{book_id}/details for a book with its copies."
        ),
    )

    for resource in catalog_resources:
        mcp.resource(
            resource["uri"],
            name=resource["name"],
            description=resource["description"],
            mime_type=resource["mime_type"],
        )(resource["handler"])

    logger.info("Registered %d catalog resources", len(catalog_resources))
    return mcp


def run_http_server(config: LibraryConfig) -> None:
    logger.info(
        "Starting %s v%s on http://%s:%d",
        config.server_name,
        config.server_version,
        config.http_host,
        config.http_port,
    )
    uvicorn.run(
        create_app(config),
        host=config.http_host,
        port=config.http_port,
        log_level=config.log_level.lower(),
    )


def run_stdio_server(config: LibraryConfig) -> None:
    logger.info("Starting %s v%s on stdio transport", config.server_name, config.server_version)

    get_db_manager(config.get_database_url()).init_database()
    mcp = create_mcp_server(config)

    def signal_handler(signum: int, _frame: Any) -> None:
        logger.info("Received signal %s, initiating shutdown...", signum)
        get_db_manager().close()
        sys.exit(0)

    signal.signal(signal.SIGINT, signal_handler)
    signal.signal(signal.SIGTERM, signal_handler)

    try:
        mcp.run(transport="stdio")
    except Exception:
        logger.exception("Fatal error in MCP server")
        sys.exit(1)


def main() -> None:
    """Console entry point: ``local-library``."""
    config = get_config()
    configure_logging(config)

    try:
        logger.info("Local Library %s (transport: %s)", config.server_version, config.transport)
        if config.transport == "stdio":
            run_stdio_server(config)
        else:
            run_http_server(config)
    except KeyboardInterrupt:
        logger.info("Server stopped by user")
    except Exception:
        logger.exception("Failed to start server")
        sys.exit(1)


if __name__ == "__main__":
    main()
