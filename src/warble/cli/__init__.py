"""Warble CLI — drive the catalog search from a terminal.

Entry point registered as ``warble`` in ``pyproject.toml``::

    [project.scripts]
    warble = "warble.cli:main"
"""

import argparse
import sys


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``warble`` command."""
    parser = argparse.ArgumentParser(
        prog="warble",
        description="Warble — state-dispatch runtime with swappable service proxies.",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- warble search ------------------------------------------------------
    search_parser = subparsers.add_parser("search", help="Run one catalog search")
    search_parser.add_argument("text", nargs="?", default="", help="Search text (empty lists all)")
    search_parser.add_argument(
        "--backend",
        choices=("simulated", "http"),
        default=None,
        help="Service proxy implementation (default: WARBLE_BACKEND or simulated)",
    )
    search_parser.add_argument("--base-url", default=None, help="Base URL for the http backend")
    search_parser.add_argument(
        "--latency",
        type=float,
        nargs=2,
        metavar=("MIN", "MAX"),
        default=None,
        help="Random delay range in seconds for the simulated backend",
    )
    search_parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")

    # -- warble routes ------------------------------------------------------
    subparsers.add_parser("routes", help="List the simulated catalog routes")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "search":
        from warble.cli._search import run_search

        sys.exit(run_search(args))
    elif args.command == "routes":
        from warble.cli._search import list_routes

        list_routes()
