"""
Route result value objects.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple

from region_routes.graph.models import Group


class GroupCost(NamedTuple):
    """Aggregated interior cost of one group along a route."""

    group: Group
    cost: int


@dataclass(frozen=True)
class RouteResult:
    """
    Immutable result of a shortest-route query.

    Attributes:
        path: Region names from source to destination (both inclusive)
        total_cost: Sum of costs over interior regions (endpoints excluded)
        group_costs: Per-group interior cost, in first-appearance order along the path
        peak_group: Group with the highest cost (first-appearing group wins ties)
    """

    path: tuple[str, ...]
    total_cost: int
    group_costs: tuple[GroupCost, ...]
    peak_group: GroupCost

    @property
    def source(self) -> str:
        return self.path[0]

    @property
    def destination(self) -> str:
        return self.path[-1]

    @property
    def hops(self) -> int:
        """Number of links traversed (len(path) - 1)."""
        return len(self.path) - 1

    @property
    def interior(self) -> tuple[str, ...]:
        """Region names strictly between source and destination."""
        return self.path[1:-1]
