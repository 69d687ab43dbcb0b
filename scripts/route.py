#!/usr/bin/env python3
"""
Region Routes CLI - look up regions and find shortest routes.

Usage:
    python scripts/route.py info "Kenya"
    python scripts/route.py route "Spain" "Japan"
    python scripts/route.py shell
    python scripts/route.py --data-dir path/to/data route "Chile" "Alaska"

Exit codes:
    0   success
    1   unknown region or same source and destination
    2   dataset could not be loaded
    130 interrupted
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

# Fix Windows console encoding
if sys.platform == "win32":
    sys.stdout.reconfigure(encoding="utf-8", errors="replace")

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from region_routes.config import DATA_DIR, LOG_DATE_FORMAT, LOG_FORMAT, resolve_log_level  # noqa: E402
from region_routes.errors import (  # noqa: E402
    MalformedRecordError,
    RegionNotFoundError,
    SameRegionError,
)
from region_routes.graph import load_graph  # noqa: E402
from region_routes.session import RouteSession  # noqa: E402


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Region info and shortest routes",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument(
        "--data-dir",
        type=Path,
        default=DATA_DIR,
        help=f"Directory holding regions.csv and adjacency.csv (default: {DATA_DIR})",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    info = subparsers.add_parser("info", help="Show a region's group, cost and neighbors")
    info.add_argument("name", help="Region name")

    route = subparsers.add_parser("route", help="Shortest route between two regions")
    route.add_argument("source", help="Starting region")
    route.add_argument("destination", help="Target region")

    subparsers.add_parser("shell", help="Interactive session")

    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else resolve_log_level(),
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
    )

    try:
        graph = load_graph(args.data_dir)
    except (OSError, MalformedRecordError) as e:
        print(f"Error loading datasets: {e}", file=sys.stderr)
        return 2

    session = RouteSession(graph)

    try:
        if args.command == "info":
            print(session.info(args.name))
        elif args.command == "route":
            print(session.route(args.source, args.destination))
        else:
            session.run()
    except (RegionNotFoundError, SameRegionError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("\n\nInterrupted by user")
        return 130  # Standard exit code for Ctrl+C

    return 0


if __name__ == "__main__":
    sys.exit(main())
