"""
Breadth-first shortest routes over the region graph.

The first shortest path found follows neighbor declaration order, so
among several shortest paths the result is deterministic.
"""

from __future__ import annotations

import logging
from collections import deque

from region_routes.graph.loader import Graph
from region_routes.graph.models import Group, Region
from region_routes.pathfinding.result import GroupCost, RouteResult

logger = logging.getLogger(__name__)


class PathFinder:
    """
    Minimum-hop route search with per-group cost aggregation.

    Holds no per-query state, so one instance can serve any number of
    queries against its (read-only) graph.
    """

    def __init__(self, graph: Graph) -> None:
        self._graph = graph

    @property
    def graph(self) -> Graph:
        return self._graph

    def shortest_route(self, source: Region, destination: Region) -> RouteResult:
        """
        Find the minimum-hop route between two regions.

        Callers must reject source == destination before calling.

        Args:
            source: Starting region (from this finder's graph)
            destination: Target region (from this finder's graph)

        Returns:
            RouteResult with path, interior cost and group breakdown

        Raises:
            ValueError: If either region belongs to another graph
        """
        for region in (source, destination):
            if not self._graph.owns(region):
                raise ValueError(f"Region '{region.name}' does not belong to this graph")

        path = self._bfs(source, destination)
        interior = path[1:-1]

        total_cost = sum(region.cost for region in interior)
        group_costs = self._aggregate_groups(path)
        peak_group = self._peak_group(group_costs)

        logger.debug(
            f"Route {source.name} -> {destination.name}: {len(path) - 1} hops, cost {total_cost}"
        )
        return RouteResult(
            path=tuple(region.name for region in path),
            total_cost=total_cost,
            group_costs=group_costs,
            peak_group=peak_group,
        )

    def _bfs(self, source: Region, destination: Region) -> list[Region]:
        """
        BFS with parent tracking.

        Returns:
            Regions from source to destination, or [source, destination]
            if destination is unreachable
        """
        visited: dict[int, int | None] = {source.index: None}  # Maps idx to parent idx
        queue = deque([source.index])

        while queue and destination.index not in visited:
            current_idx = queue.popleft()

            for neighbor_idx in self._graph.region_at(current_idx).neighbor_ids:
                if neighbor_idx in visited:
                    continue

                visited[neighbor_idx] = current_idx
                if neighbor_idx == destination.index:
                    break
                queue.append(neighbor_idx)

        if destination.index not in visited:
            logger.warning(
                f"No path from '{source.name}' to '{destination.name}', "
                "falling back to a direct route"
            )
            return [source, destination]

        path = []
        idx = destination.index
        while idx is not None:
            path.append(self._graph.region_at(idx))
            idx = visited[idx]
        return list(reversed(path))

    @staticmethod
    def _aggregate_groups(path: list[Region]) -> tuple[GroupCost, ...]:
        """
        Sum interior costs per group, in first-appearance order.

        Endpoint groups are registered at zero but never add to a total.
        """
        totals: dict[Group, int] = {}
        last = len(path) - 1
        for position, region in enumerate(path):
            totals.setdefault(region.group, 0)
            if 0 < position < last:
                totals[region.group] += region.cost
        return tuple(GroupCost(group, cost) for group, cost in totals.items())

    @staticmethod
    def _peak_group(group_costs: tuple[GroupCost, ...]) -> GroupCost:
        """Highest group total; only a strictly greater total replaces the current peak."""
        peak = group_costs[0]
        for entry in group_costs[1:]:
            if entry.cost > peak.cost:
                peak = entry
        return peak


def shortest_route(graph: Graph, source: Region, destination: Region) -> RouteResult:
    """Convenience wrapper around ``PathFinder(graph).shortest_route``."""
    return PathFinder(graph).shortest_route(source, destination)
