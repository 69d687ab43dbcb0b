"""
Region and Group data model.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Group(Enum):
    """The closed set of groups (continents) a region can belong to."""

    AFRICA = "AFRICA"
    ASIA = "ASIA"
    EUROPE = "EUROPE"
    NORTH_AMERICA = "NORTH_AMERICA"
    OCEANIA = "OCEANIA"
    SOUTH_AMERICA = "SOUTH_AMERICA"

    @property
    def display_name(self) -> str:
        """Canonical rendering, e.g. NORTH_AMERICA -> 'North America'."""
        return self.name.replace("_", " ").title()

    @classmethod
    def parse(cls, label: str) -> Group:
        """
        Match a free-text label against the known groups.

        Matching ignores case, and spaces and underscores are
        interchangeable ("north america", "North_America").

        Raises:
            ValueError: If the label matches no group
        """
        key = "_".join(label.upper().split())
        try:
            return cls[key]
        except KeyError:
            raise ValueError(f"Unknown group '{label}'") from None

    def __str__(self) -> str:
        return self.display_name


@dataclass(frozen=True)
class Region:
    """
    A named, grouped and costed node of the graph.

    Neighbors are stored as indices into the owning Graph, in the order
    they were first declared in the adjacency data. Use
    ``Graph.neighbors(region)`` to resolve them.

    Attributes:
        index: Stable position of this region in its Graph
        name: Unique region name (trimmed)
        group: Group the region belongs to
        cost: Traversal cost paid when a route passes through the region
        neighbor_ids: Indices of directly connected regions
    """

    index: int
    name: str
    group: Group
    cost: int
    neighbor_ids: tuple[int, ...] = ()

    @property
    def degree(self) -> int:
        """Number of declared outgoing connections."""
        return len(self.neighbor_ids)

    def __str__(self) -> str:
        return self.name
