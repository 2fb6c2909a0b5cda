"""
Main entry point for the ZenTao MCP tool server.

Loads configuration, builds the sealed tool and resource registries over an
HTTP transport to ZenTao, and serves it over stdio (default) or HTTP.
"""

# Standard library imports
import argparse
import asyncio
import sys
from pathlib import Path
from typing import List, Optional

# Third-party imports
import uvicorn
from dotenv import load_dotenv
import yaml

# Local imports
from catalog import build_registry, build_resource_registry
from common.config import Config, load_config
from common.logging import get_logger, setup_logging
from engine.errors import ConfigurationError
from engine.transport import HttpTransport
from protocol.http import create_app
from protocol.server import ToolServer
from protocol.stdio import StdioTransport

logger = get_logger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description="ZenTao MCP Tool Server")
    parser.add_argument("--config", type=Path, help="Path to config.yaml")
    parser.add_argument(
        "--transport", choices=["stdio", "http"], help="Override the protocol transport"
    )
    parser.add_argument("--host", type=str, help="Override the host to bind to (http mode)")
    parser.add_argument("--port", type=int, help="Override the port to bind to (http mode)")
    return parser.parse_args(argv)


def apply_overrides(config: Config, args: argparse.Namespace) -> Config:
    """Return config with command-line overrides applied to the server section."""
    overrides = {
        key: value
        for key, value in (("transport", args.transport), ("host", args.host), ("port", args.port))
        if value is not None
    }
    if not overrides:
        return config
    server = config.server.model_copy(update=overrides)
    return config.model_copy(update={"server": server})


def create_transport(config: Config) -> HttpTransport:
    return HttpTransport(
        base_url=config.backend.base_url,
        timeout=config.backend.timeout,
        verify_ssl=config.backend.verify_ssl,
        headers=config.backend.headers,
    )


def create_server(config: Config, transport: HttpTransport) -> ToolServer:
    """Tool server over the sealed tool and resource catalogs."""
    return ToolServer(
        build_registry(transport), config.server, resources=build_resource_registry(transport)
    )


async def run_stdio(config: Config) -> None:
    """Serve over stdin/stdout until EOF."""
    async with create_transport(config) as transport:
        server = create_server(config, transport)
        await StdioTransport(server).run()


def run_http(config: Config) -> None:
    """Serve POST /mcp/jsonrpc with uvicorn."""
    transport = create_transport(config)
    server = create_server(config, transport)
    app = create_app(server, on_shutdown=transport.aclose)

    logger.info(event="starting_server", host=config.server.host, port=config.server.port)

    # Run uvicorn synchronously (it creates its own event loop)
    uvicorn.run(
        app,
        host=config.server.host,
        port=config.server.port,
        log_config=None,  # Use our custom logging setup
        access_log=False,
    )


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point."""
    load_dotenv()
    args = parse_args(argv)

    try:
        config = apply_overrides(load_config(args.config), args)
    except (ValueError, yaml.YAMLError) as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        sys.exit(2)

    setup_logging(config)
    logger.info(
        event="application_starting",
        transport=config.server.transport,
        log_level=config.log_level,
    )

    try:
        if config.server.transport == "http":
            run_http(config)
        else:
            asyncio.run(run_stdio(config))
    except ConfigurationError as e:
        logger.critical(event="startup_failed", error=e.message, details=e.details)
        sys.exit(1)
    except KeyboardInterrupt:
        logger.info(event="application_shutdown", reason="Keyboard interrupt")
    except Exception as e:
        logger.critical(event="application_crashed", error=str(e), error_type=type(e).__name__)
        sys.exit(1)


if __name__ == "__main__":
    main()
