"""
Region graph module.

Provides the region data model and the read-only Graph built from
the region and adjacency datasets.

Usage:
    from region_routes.graph import load_graph

    graph = load_graph()
    graph.get_region("Kenya")
"""

from region_routes.graph.loader import Graph, load_graph
from region_routes.graph.models import Group, Region
from region_routes.graph.reader import read_dataset

__all__ = ["Graph", "Group", "Region", "load_graph", "read_dataset"]
