"""
labgraph.cli - Command-line interface.

Main entry point for the labgraph CLI tool.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from labgraph import __version__
from labgraph.commands import build, sitemap, stats, validate

logger = logging.getLogger(__name__)


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="labgraph",
        description="Research notes graph builder",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  labgraph build                    # Summarize the document graph
  labgraph build --json -o graph.json
  labgraph validate                 # Report invalid notes and broken links
  labgraph validate --strict        # Fail on any warning
  labgraph stats                    # Counts and latest items
  labgraph sitemap -o dist/sitemap.xml

Configuration:
  Settings are read from .labgraph.toml in the current directory or a
  parent, and from LABGRAPH_<SECTION>_<KEY> environment variables.

For detailed command help: labgraph <command> --help
        """,
    )

    # Global options
    parser.add_argument(
        "--version",
        action="version",
        version=f"labgraph {__version__}",
    )
    parser.add_argument(
        "--config",
        type=Path,
        help="Path to configuration file",
        metavar="PATH",
    )
    parser.add_argument(
        "--docs-dir",
        type=Path,
        help="Override documentation directory",
        metavar="PATH",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Verbose output",
    )
    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Suppress non-error output",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # build command
    build_parser = subparsers.add_parser(
        "build",
        help="Build the document graph",
    )
    build_parser.add_argument(
        "--json",
        action="store_true",
        help="Print the serialized graph as JSON",
    )
    build_parser.add_argument(
        "-o",
        "--output",
        type=Path,
        help="Write the serialized graph to a file",
        metavar="PATH",
    )
    build_parser.add_argument(
        "--content",
        action="store_true",
        help="Include markdown bodies in JSON output",
    )

    # validate command
    validate_parser = subparsers.add_parser(
        "validate",
        help="Validate notes and report integrity warnings",
    )
    validate_parser.add_argument(
        "--strict",
        action="store_true",
        help="Exit non-zero on any warning",
    )
    validate_parser.add_argument(
        "-j",
        "--json",
        action="store_true",
        help="Output JSON for tooling",
    )

    # stats command
    stats_parser = subparsers.add_parser(
        "stats",
        help="Show statistics and the latest items",
    )
    stats_parser.add_argument(
        "--json",
        action="store_true",
        help="Output JSON",
    )

    # sitemap command
    sitemap_parser = subparsers.add_parser(
        "sitemap",
        help="Generate sitemap.xml",
    )
    sitemap_parser.add_argument(
        "--base-url",
        help="Absolute site URL (default: [site] base_url)",
        metavar="URL",
    )
    sitemap_parser.add_argument(
        "-o",
        "--output",
        type=Path,
        help="Write the sitemap to a file",
        metavar="PATH",
    )

    return parser


def configure_logging(args: argparse.Namespace) -> None:
    """Configure the root logger from verbosity flags and config.

    A config file that cannot be read leaves the default level; the
    command reports the error itself when it loads the config again.
    """
    config_error: Optional[Exception] = None
    if args.verbose:
        level = logging.INFO
    elif args.quiet:
        level = logging.ERROR
    else:
        level = logging.WARNING
        try:
            from labgraph.config import get_config

            configured = get_config(args.config).get("logging", {}).get("level")
            if configured:
                level = logging.getLevelName(str(configured).upper())
        except (OSError, ValueError) as e:
            config_error = e
        if not isinstance(level, int):
            level = logging.WARNING

    logging.basicConfig(level=level, format="%(levelname)s: %(message)s", stream=sys.stderr)
    if config_error is not None:
        logger.debug("Ignoring logging config: %s", config_error)


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point for the CLI.

    Args:
        argv: Command line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code (0 for success, non-zero for failure)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    # Handle no command
    if not args.command:
        parser.print_help()
        return 0

    configure_logging(args)

    try:
        # Dispatch to command handlers
        if args.command == "build":
            return build.run(args)
        elif args.command == "validate":
            return validate.run(args)
        elif args.command == "stats":
            return stats.run(args)
        elif args.command == "sitemap":
            return sitemap.run(args)
        else:
            parser.print_help()
            return 1

    except KeyboardInterrupt:
        print("\nOperation cancelled.", file=sys.stderr)
        return 130
    except Exception as e:
        if args.verbose:
            raise
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
