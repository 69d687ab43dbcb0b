"""
Text rendering of region info and route results.
"""

from __future__ import annotations

from region_routes.graph.models import Region
from region_routes.pathfinding.result import GroupCost, RouteResult

PATH_SEPARATOR = " -> "


def format_group_cost(entry: GroupCost) -> str:
    """Render a group total as ``"<Group> (<total>)"``."""
    return f"{entry.group.display_name} ({entry.cost})"


def format_region_info(region: Region, neighbor_names: list[str]) -> str:
    """Render a region's attributes and direct connections."""
    lines = [
        f"Region:    {region.name}",
        f"Group:     {region.group.display_name}",
        f"Cost:      {region.cost}",
    ]
    if neighbor_names:
        lines.append(f"Neighbors ({len(neighbor_names)}): {', '.join(neighbor_names)}")
    else:
        lines.append("Neighbors: none")
    return "\n".join(lines)


def format_route(result: RouteResult) -> str:
    """Render a route with its cost breakdown."""
    return "\n".join(
        [
            f"Route:      {PATH_SEPARATOR.join(result.path)}",
            f"Hops:       {result.hops}",
            f"Total cost: {result.total_cost}",
            f"By group:   {', '.join(format_group_cost(entry) for entry in result.group_costs)}",
            f"Peak group: {format_group_cost(result.peak_group)}",
        ]
    )
