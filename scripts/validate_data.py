#!/usr/bin/env python3
"""
Validate the region datasets and the graph built from them.

Usage:
    python scripts/validate_data.py
    python scripts/validate_data.py --data-dir path/to/data
"""

import argparse
import logging
import sys
import time
from pathlib import Path

# Fix Windows console encoding for Unicode output
if sys.platform == "win32":
    sys.stdout.reconfigure(encoding="utf-8", errors="replace")

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from region_routes.config import (  # noqa: E402 - must be after sys.path modification
    ADJACENCY_FILENAME,
    DATA_DIR,
    REGIONS_FILENAME,
)
from region_routes.errors import RegionRoutesError  # noqa: E402
from region_routes.graph import Graph, load_graph  # noqa: E402
from region_routes.pathfinding import PathFinder  # noqa: E402

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(message)s",
)
logger = logging.getLogger(__name__)


def check_data_files_exist(data_dir: Path) -> bool:
    """Check that both datasets exist."""
    print("\n=== Checking Data Files ===\n")

    all_exist = True
    for name in (REGIONS_FILENAME, ADJACENCY_FILENAME):
        path = data_dir / name
        exists = path.exists()
        size_kb = path.stat().st_size / 1024 if exists else 0
        status = f"✓ {name}: {size_kb:,.1f} KB" if exists else f"✗ {name}: NOT FOUND"
        print(status)
        if not exists:
            all_exist = False

    return all_exist


def load_and_validate(data_dir: Path) -> Graph | None:
    """Load the graph and run validation checks."""
    print("\n=== Loading Graph ===\n")

    start_time = time.time()
    graph = load_graph(data_dir)
    print(f"\nLoad time: {(time.time() - start_time) * 1000:.1f} ms")

    print("\n=== Graph Statistics ===\n")
    for key, value in graph.stats().items():
        if isinstance(value, dict):
            print(f"  {key}:")
            for group, count in value.items():
                print(f"    {group}: {count}")
        else:
            print(f"  {key}: {value:,}")

    one_way = graph.one_directional_edges()
    if one_way:
        print("\n  One-directional links (reverse not declared):")
        for source, target in one_way:
            print(f"    ⚠ {source} -> {target}")

    isolated = graph.isolated_regions()
    if isolated:
        print(f"\n  ⚠ Regions without neighbors: {', '.join(isolated)}")

    print("\n=== Validation Checks ===\n")
    all_valid = True
    for check, passed in graph.validate().items():
        status = "✓" if passed else "✗"
        print(f"  {status} {check}")
        if not passed:
            all_valid = False

    return graph if all_valid else None


def check_reachability(graph: Graph) -> bool:
    """Check that every region reaches every other region."""
    print("\n=== Reachability ===\n")

    finder = PathFinder(graph)
    unreachable = 0
    longest = None

    for source in graph:
        for destination in graph:
            if source is destination:
                continue
            result = finder.shortest_route(source, destination)
            if result.hops == 1 and not graph.has_edge(source, destination):
                unreachable += 1
                continue
            if longest is None or result.hops > longest.hops:
                longest = result

    if unreachable:
        print(f"  ✗ {unreachable} ordered region pairs are not connected")
        return False

    print("  ✓ All region pairs are connected")
    if longest is not None:
        print(f"  Longest route ({longest.hops} hops): {' -> '.join(longest.path)}")
    return True


def main() -> int:
    """Main validation routine."""
    parser = argparse.ArgumentParser(description="Validate region datasets")
    parser.add_argument(
        "--data-dir",
        type=Path,
        default=DATA_DIR,
        help=f"Directory holding the datasets (default: {DATA_DIR})",
    )
    args = parser.parse_args()

    print("=" * 60)
    print("Region Routes Data Validation")
    print("=" * 60)

    if not check_data_files_exist(args.data_dir):
        print("\n✗ Some data files are missing. Cannot continue.")
        return 1

    try:
        graph = load_and_validate(args.data_dir)
    except RegionRoutesError as e:
        print(f"\n✗ Error loading data: {e}")
        return 1

    if graph is None:
        print("\n✗ Validation checks failed.")
        return 1

    if not check_reachability(graph):
        print("\n✗ Reachability check failed.")
        return 1

    print("\n" + "=" * 60)
    print("✓ All validation checks passed!")
    print("=" * 60)

    return 0


if __name__ == "__main__":
    sys.exit(main())
