#!/usr/bin/env python3
"""
Entry point for the CHUK Spelling MCP Server.

Parses the command line, points the scale loader at the project scales
directory, and runs the server over stdio or http.
"""

import argparse
import asyncio
import logging
from pathlib import Path

from chuk_mcp_spelling import __version__

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Command line for the spelling server."""
    parser = argparse.ArgumentParser(
        prog="chuk-mcp-spelling",
        description="MCP server for correctly spelled intervals, scales and chords",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--transport",
        choices=["stdio", "http"],
        default="stdio",
        help="Transport mode (default: stdio)",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=8000,
        help="HTTP port (only for http transport)",
    )
    parser.add_argument(
        "--scales-dir",
        type=Path,
        default=None,
        help="Directory of project scale YAML files (default: ./scales)",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )
    return parser


def main() -> None:
    """Main entry point with transport detection."""
    args = build_parser().parse_args()

    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    # Server construction registers tools, so wait until logging is configured
    from chuk_mcp_spelling.async_server import mcp, scale_loader

    if args.scales_dir is not None:
        scale_loader.set_project_path(args.scales_dir.resolve())

    logger.info("Scale library: %s", scale_loader.library_path)
    logger.info("Project scales: %s", scale_loader.project_path)

    if args.transport == "stdio":
        logger.info("Starting CHUK Spelling MCP Server %s (stdio)", __version__)
        asyncio.run(mcp.run_stdio())
    else:
        logger.info("Starting CHUK Spelling MCP Server %s (http:%d)", __version__, args.port)
        asyncio.run(mcp.run_http(port=args.port))


if __name__ == "__main__":
    main()
