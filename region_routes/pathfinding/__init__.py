"""
Pathfinding module.

Provides the breadth-first shortest route search and its result type:
- PathFinder: minimum-hop route with per-group cost aggregation
- RouteResult: path, interior cost, group breakdown and peak group
"""

from region_routes.pathfinding.bfs import PathFinder, shortest_route
from region_routes.pathfinding.result import GroupCost, RouteResult

__all__ = ["GroupCost", "PathFinder", "RouteResult", "shortest_route"]
