"""
Paprika MCP command line
========================

Usage:
    paprika-mcp unpack -i export.paprikarecipes -o .recipes [-v]
    paprika-mcp mcp [-r .recipes] [--server-name paprika] [-v]

``unpack`` converts a Paprika export into one JSON file per recipe.
``mcp`` loads those files and serves them to MCP clients over stdio.
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path
from typing import Sequence

from paprika_mcp import __version__
from paprika_mcp.core.config import get_settings
from paprika_mcp.core.exceptions import ArchiveError
from paprika_mcp.data.unpacker import unpack_archive

logger = logging.getLogger(__name__)


def configure_logging(verbose: bool) -> None:
    # stdout carries the MCP protocol, diagnostics go to stderr
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="paprika-mcp",
        description="CLI tool for Paprika Recipe Manager - MCP server and recipe utilities",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="command", required=True)

    mcp_parser = subparsers.add_parser(
        "mcp",
        help="Start the MCP server",
        description="Start the MCP server and listen for requests on stdio",
    )
    mcp_parser.add_argument(
        "-r", "--recipes-dir",
        metavar="PATH",
        help="Directory containing Paprika recipe JSON files (env: PAPRIKA_RECIPES_DIR)",
    )
    mcp_parser.add_argument(
        "--server-name",
        metavar="NAME",
        help="Name for the MCP server (env: PAPRIKA_SERVER_NAME, default: paprika)",
    )
    mcp_parser.add_argument("-v", "--verbose", action="store_true", help="Enable verbose logging output")
    mcp_parser.set_defaults(handler=run_mcp)

    unpack_parser = subparsers.add_parser(
        "unpack",
        help="Unpack Paprika recipes archive",
        description="Extract .paprikarecipes archive to individual JSON files",
    )
    unpack_parser.add_argument(
        "-i", "--input", required=True, metavar="FILE", help="Path to .paprikarecipes file to unpack"
    )
    unpack_parser.add_argument(
        "-o", "--output", required=True, metavar="DIR", help="Output directory for JSON files"
    )
    unpack_parser.add_argument("-v", "--verbose", action="store_true", help="Enable verbose logging output")
    unpack_parser.set_defaults(handler=run_unpack)

    return parser


def run_unpack(args: argparse.Namespace) -> int:
    input_file = Path(args.input)
    output_dir = Path(args.output)

    try:
        result = asyncio.run(unpack_archive(input_file, output_dir, verbose=args.verbose))
    except ArchiveError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    print("\nUnpacking complete!")
    print(f"  Processed: {result.processed} recipes")
    if result.errors:
        print(f"  Errors: {result.errors}")
    return 0


def run_mcp(args: argparse.Namespace) -> int:
    settings = get_settings()
    recipes_dir = Path(args.recipes_dir) if args.recipes_dir else settings.resolve_recipes_dir()
    server_name = args.server_name or settings.server_name

    if not recipes_dir.is_dir():
        print(f"Error: Recipes directory not found: {recipes_dir}", file=sys.stderr)
        print("Please specify a valid directory with --recipes-dir", file=sys.stderr)
        return 1

    logger.debug("Starting Paprika MCP Server...")
    logger.debug("  Recipes directory: %s", recipes_dir)
    logger.debug("  Server name: %s", server_name)

    from paprika_mcp.server.app import serve

    asyncio.run(serve(recipes_dir, server_name, settings))
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose or get_settings().debug)
    return args.handler(args)


if __name__ == "__main__":
    raise SystemExit(main())
