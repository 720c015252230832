"""Main CLI entry point for tgfgraph.

Provides commands: demo, bfs, export
"""

import argparse
import logging
import sys
from typing import List, Optional

from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler

from tgfgraph.cli.demo import demo_command
from tgfgraph.cli.export import export_command
from tgfgraph.cli.traverse import bfs_command
from tgfgraph.config.loader import load_graph_config

logger = logging.getLogger("tgfgraph.cli")


def setup_logging(verbose: bool = False, console: Optional[Console] = None) -> None:
    """Setup logging configuration with Rich integration.

    Args:
        verbose: Enable verbose logging.
        console: Rich Console instance for coordinated output (optional).
    """
    if verbose:
        level = logging.DEBUG
    else:
        level = logging.WARNING

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_time=True,
        show_path=False,
        markup=False,
        rich_tracebacks=True,
        tracebacks_show_locals=verbose,
        log_time_format="[%H:%M:%S]",
    )

    logging.basicConfig(
        level=level,
        format="[%(name)s] [%(levelname)s] %(message)s",
        handlers=[handler],
    )


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="tgfgraph",
        description="tgfgraph - labelled undirected graphs in Trivial Graph Format",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )
    parser.add_argument(
        "-c",
        "--config",
        help=(
            "Optional configuration. Can be a path to a TOML/JSON file or an "
            "inline TOML/JSON string. When omitted, built-in defaults are used."
        ),
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    demo_parser = subparsers.add_parser(
        "demo",
        help="Build the sample graph and print its breadth-first walk",
    )
    demo_parser.add_argument(
        "-o",
        "--output",
        help="Also write the sample graph to this TGF file",
    )

    bfs_parser = subparsers.add_parser(
        "bfs",
        help="Print the breadth-first walk of a TGF file",
    )
    bfs_parser.add_argument(
        "graph",
        help="TGF file to load",
    )
    bfs_parser.add_argument(
        "-s",
        "--start",
        help="Id of the start vertex (default: first vertex in the file)",
    )

    export_parser = subparsers.add_parser(
        "export",
        help="Convert a TGF file to node-link JSON",
    )
    export_parser.add_argument(
        "graph",
        help="TGF file to load",
    )
    export_parser.add_argument(
        "-o",
        "--output",
        required=True,
        help="Output JSON file",
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:]).

    Returns:
        int: Exit code.
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    setup_logging(args.verbose)

    try:
        args.graph_config = load_graph_config(args.config)
    except (OSError, ValueError, ValidationError) as exc:
        logger.error("Invalid configuration: %s", exc)
        return 1

    if args.command == "demo":
        return demo_command(args)
    elif args.command == "bfs":
        return bfs_command(args)
    elif args.command == "export":
        return export_command(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
