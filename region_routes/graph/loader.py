"""
Graph of regions, built once from the region and adjacency datasets.

Usage:
    from region_routes.graph import Graph

    graph = Graph.from_files()
    region = graph.get_region("Kenya")
    graph.neighbor_names(region)
"""

from __future__ import annotations

import logging
import re
from collections import Counter
from collections.abc import Iterable, Iterator
from pathlib import Path

from region_routes.config import (
    ADJACENCY_FILENAME,
    ADJACENCY_PATH,
    FIELD_SEPARATOR,
    REGION_FIELD_COUNT,
    REGIONS_FILENAME,
    REGIONS_PATH,
)
from region_routes.errors import (
    MalformedRecordError,
    RegionNotFoundError,
    UnknownGroupError,
)
from region_routes.graph.models import Group, Region
from region_routes.graph.reader import read_dataset

logger = logging.getLogger(__name__)

# Optional sign followed by ASCII digits only
_COST_PATTERN = re.compile(r"[+-]?[0-9]+")


def _parse_region_record(line_number: int, line: str) -> tuple[str, Group, int] | None:
    """
    Parse a ``name,group-label,cost`` record.

    Returns None for records with the wrong field count or an empty name,
    which are skipped. Bad costs and unknown groups are fatal.
    """
    fields = [field.strip() for field in line.split(FIELD_SEPARATOR)]
    if len(fields) != REGION_FIELD_COUNT or not fields[0]:
        logger.debug(f"Skipping region record {line_number}: {line!r}")
        return None

    name, label, raw_cost = fields

    try:
        if not _COST_PATTERN.fullmatch(raw_cost):
            raise ValueError(f"not a plain integer: {raw_cost!r}")
        cost = int(raw_cost)
    except ValueError as e:
        raise MalformedRecordError(line_number, line, f"invalid cost '{raw_cost}'") from e
    if cost < 0:
        raise MalformedRecordError(line_number, line, f"negative cost {cost}")

    try:
        group = Group.parse(label)
    except ValueError as e:
        raise UnknownGroupError(line_number, line, label) from e

    return name, group, cost


class Graph:
    """
    Read-only graph of regions addressed by name.

    Regions live in a single list; each Region refers to its neighbors by
    index into that list. Neighbor links are stored exactly as declared
    in the adjacency data, so an edge is only traversable in both
    directions if both directions were declared.

    Build instances with ``from_records`` or ``from_files``.
    """

    def __init__(self, regions: Iterable[Region]) -> None:
        self._regions: tuple[Region, ...] = tuple(regions)
        self._name_to_idx: dict[str, int] = {
            region.name: region.index for region in self._regions
        }

    # =========================================================================
    # Construction
    # =========================================================================

    @classmethod
    def from_records(
        cls,
        region_lines: Iterable[str],
        adjacency_lines: Iterable[str],
    ) -> Graph:
        """
        Build a graph from region and adjacency records.

        All region records are registered before any adjacency record is
        resolved. Adjacency lines whose root is unknown are skipped, and
        unknown neighbor names are dropped one by one.

        Args:
            region_lines: ``name,group-label,cost`` records
            adjacency_lines: ``root,neighbor-1,neighbor-2,...`` records

        Returns:
            Fully linked Graph

        Raises:
            MalformedRecordError: If a cost is not a non-negative integer
            UnknownGroupError: If a group label matches no Group
        """
        records: list[tuple[str, Group, int]] = []
        name_to_idx: dict[str, int] = {}

        for line_number, line in enumerate(region_lines, 1):
            record = _parse_region_record(line_number, line)
            if record is None:
                continue
            name = record[0]
            if name in name_to_idx:
                logger.warning(f"Duplicate region '{name}' at record {line_number}, keeping first")
                continue
            name_to_idx[name] = len(records)
            records.append(record)

        links: list[list[int]] = [[] for _ in records]
        skipped_roots = 0
        skipped_neighbors = 0

        for line_number, line in enumerate(adjacency_lines, 1):
            root, *neighbor_names = [field.strip() for field in line.split(FIELD_SEPARATOR)]
            root_idx = name_to_idx.get(root)
            if root_idx is None:
                logger.debug(f"Skipping adjacency record {line_number}: unknown root '{root}'")
                skipped_roots += 1
                continue

            root_links = links[root_idx]
            for neighbor in neighbor_names:
                neighbor_idx = name_to_idx.get(neighbor)
                if neighbor_idx is None:
                    logger.debug(f"Dropping unknown neighbor '{neighbor}' of '{root}'")
                    skipped_neighbors += 1
                    continue
                if neighbor_idx not in root_links:
                    root_links.append(neighbor_idx)

        graph = cls(
            Region(
                index=idx,
                name=name,
                group=group,
                cost=cost,
                neighbor_ids=tuple(links[idx]),
            )
            for idx, (name, group, cost) in enumerate(records)
        )

        logger.info(
            f"Built graph with {len(graph):,} regions and {graph.edge_count():,} edges "
            f"(skipped {skipped_roots} adjacency records, {skipped_neighbors} neighbors)"
        )
        return graph

    @classmethod
    def from_files(
        cls,
        regions_path: Path | str = REGIONS_PATH,
        adjacency_path: Path | str = ADJACENCY_PATH,
    ) -> Graph:
        """Read both datasets from disk and build the graph."""
        region_lines = read_dataset(regions_path)
        adjacency_lines = read_dataset(adjacency_path)
        return cls.from_records(region_lines, adjacency_lines)

    # =========================================================================
    # Lookup
    # =========================================================================

    def get_region(self, name: str) -> Region:
        """
        Get a region by name.

        The name is trimmed, then matched exactly (case-sensitive).

        Raises:
            RegionNotFoundError: If no region has that name
        """
        key = name.strip()
        idx = self._name_to_idx.get(key)
        if idx is None:
            raise RegionNotFoundError(key)
        return self._regions[idx]

    def find_region(self, name: str) -> Region | None:
        """Get a region by name, or None if not found."""
        idx = self._name_to_idx.get(name.strip())
        return None if idx is None else self._regions[idx]

    def has_region(self, name: str) -> bool:
        """Check if a region with this name exists."""
        return name.strip() in self._name_to_idx

    def region_at(self, idx: int) -> Region:
        """Get region by index."""
        if 0 <= idx < len(self._regions):
            return self._regions[idx]
        raise IndexError(f"Index {idx} out of range [0, {len(self._regions)})")

    def owns(self, region: Region) -> bool:
        """Check if this exact Region object belongs to this graph."""
        return 0 <= region.index < len(self._regions) and self._regions[region.index] is region

    @property
    def regions(self) -> tuple[Region, ...]:
        """All regions in registration order."""
        return self._regions

    def names(self) -> list[str]:
        """All region names in registration order."""
        return [region.name for region in self._regions]

    def __len__(self) -> int:
        return len(self._regions)

    def __iter__(self) -> Iterator[Region]:
        return iter(self._regions)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.has_region(name)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(regions={len(self)}, edges={self.edge_count()})"

    # =========================================================================
    # Graph Accessors
    # =========================================================================

    def neighbors(self, region: Region) -> list[Region]:
        """Directly connected regions, in declaration order."""
        return [self._regions[idx] for idx in region.neighbor_ids]

    def neighbor_names(self, region: Region) -> list[str]:
        """Names of directly connected regions, in declaration order."""
        return [self._regions[idx].name for idx in region.neighbor_ids]

    def has_edge(self, source: Region, target: Region) -> bool:
        """Whether a link from source to target was declared."""
        return target.index in source.neighbor_ids

    def edge_count(self) -> int:
        """Number of declared (directed) links."""
        return sum(region.degree for region in self._regions)

    def one_directional_edges(self) -> list[tuple[str, str]]:
        """Declared links whose reverse link was not declared."""
        return [
            (region.name, neighbor.name)
            for region in self._regions
            for neighbor in self.neighbors(region)
            if not self.has_edge(neighbor, region)
        ]

    def isolated_regions(self) -> list[str]:
        """Regions with no declared outgoing links."""
        return [region.name for region in self._regions if not region.neighbor_ids]

    def group_counts(self) -> dict[Group, int]:
        """Number of regions in each group, in Group order."""
        counts = Counter(region.group for region in self._regions)
        return {group: counts[group] for group in Group}

    # =========================================================================
    # Utility Methods
    # =========================================================================

    def validate(self) -> dict[str, bool]:
        """Run consistency checks on the loaded graph."""
        size = len(self._regions)
        return {
            "regions_loaded": size > 0,
            "names_unique": len(self._name_to_idx) == size,
            "indices_consistent": all(
                region.index == idx for idx, region in enumerate(self._regions)
            ),
            "no_dangling_neighbors": all(
                0 <= neighbor_idx < size
                for region in self._regions
                for neighbor_idx in region.neighbor_ids
            ),
            "no_duplicate_neighbors": all(
                len(set(region.neighbor_ids)) == region.degree for region in self._regions
            ),
        }

    def stats(self) -> dict:
        """Get statistics about the loaded graph."""
        return {
            "regions": len(self._regions),
            "edges": self.edge_count(),
            "asymmetric_edges": len(self.one_directional_edges()),
            "isolated_regions": len(self.isolated_regions()),
            "groups": {group.display_name: count for group, count in self.group_counts().items()},
        }


def load_graph(data_dir: Path | str | None = None) -> Graph:
    """
    Build the graph from the configured data directory.

    Args:
        data_dir: Directory holding the datasets (default: config DATA_DIR)
    """
    if data_dir is None:
        return Graph.from_files()
    data_dir = Path(data_dir)
    return Graph.from_files(data_dir / REGIONS_FILENAME, data_dir / ADJACENCY_FILENAME)
