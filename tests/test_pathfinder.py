"""
Unit tests for the breadth-first PathFinder and RouteResult.
"""

import logging
from collections import deque

import pytest

from region_routes.config import validate_data_files
from region_routes.graph import Graph, Group, load_graph
from region_routes.pathfinding import GroupCost, PathFinder, RouteResult, shortest_route


def route(graph: Graph, source: str, destination: str) -> RouteResult:
    return PathFinder(graph).shortest_route(graph.get_region(source), graph.get_region(destination))


def hop_distance(graph: Graph, source: str, destination: str) -> int | None:
    """Reference BFS distance by levels, independent of PathFinder."""
    start = graph.get_region(source)
    distances = {start.index: 0}
    queue = deque([start])
    while queue:
        region = queue.popleft()
        for neighbor in graph.neighbors(region):
            if neighbor.index not in distances:
                distances[neighbor.index] = distances[region.index] + 1
                queue.append(neighbor)
    return distances.get(graph.get_region(destination).index)


class TestScenarios:
    """Known routes with known costs."""

    def test_chain_route(self, chain_graph):
        """A-B-C-D: interior B and C are paid, grouped by first appearance."""
        result = route(chain_graph, "A", "D")
        assert result.path == ("A", "B", "C", "D")
        assert result.total_cost == 8
        assert result.group_costs == (GroupCost(Group.ASIA, 5), GroupCost(Group.EUROPE, 3))
        assert result.peak_group == GroupCost(Group.ASIA, 5)

    def test_direct_neighbors(self):
        """A single hop has no interior: zero cost, both groups at zero."""
        graph = Graph.from_records(["X,Asia,4", "Y,Europe,7"], ["X,Y", "Y,X"])
        result = route(graph, "X", "Y")
        assert result.path == ("X", "Y")
        assert result.hops == 1
        assert result.interior == ()
        assert result.total_cost == 0
        assert result.group_costs == (GroupCost(Group.ASIA, 0), GroupCost(Group.EUROPE, 0))
        assert result.peak_group == GroupCost(Group.ASIA, 0)

    def test_reverse_chain_route(self, chain_graph):
        """The reverse route visits the same interior in reverse."""
        result = route(chain_graph, "D", "A")
        assert result.path == ("D", "C", "B", "A")
        assert result.total_cost == 8
        assert result.group_costs == (GroupCost(Group.EUROPE, 3), GroupCost(Group.ASIA, 5))
        assert result.peak_group == GroupCost(Group.ASIA, 5)

    def test_module_level_shortest_route(self, chain_graph):
        """The convenience function matches the PathFinder method."""
        a, d = chain_graph.get_region("A"), chain_graph.get_region("D")
        assert shortest_route(chain_graph, a, d) == route(chain_graph, "A", "D")


class TestAggregation:
    """Per-group totals and peak group selection."""

    def test_endpoint_costs_never_counted(self):
        """Endpoints register their group but add nothing."""
        graph = Graph.from_records(
            ["A,Asia,10", "B,Europe,1", "C,Asia,2", "D,Europe,100"],
            ["A,B", "B,C", "C,D"],
        )
        result = route(graph, "A", "D")
        assert result.total_cost == 3
        assert result.group_costs == (GroupCost(Group.ASIA, 2), GroupCost(Group.EUROPE, 1))

    def test_groups_in_first_appearance_order(self):
        """Order follows the path, not the totals."""
        graph = Graph.from_records(
            ["A,Asia,0", "B,Asia,1", "C,Europe,9", "D,Oceania,0"],
            ["A,B", "B,C", "C,D"],
        )
        result = route(graph, "A", "D")
        assert [entry.group for entry in result.group_costs] == [
            Group.ASIA,
            Group.EUROPE,
            Group.OCEANIA,
        ]
        assert result.peak_group == GroupCost(Group.EUROPE, 9)

    def test_tie_goes_to_first_group(self):
        """Equal totals resolve to the group seen first along the path."""
        graph = Graph.from_records(
            ["P,Africa,0", "Q,Asia,3", "R,Europe,3", "S,Africa,0"],
            ["P,Q", "Q,R", "R,S"],
        )
        result = route(graph, "P", "S")
        assert result.group_costs == (
            GroupCost(Group.AFRICA, 0),
            GroupCost(Group.ASIA, 3),
            GroupCost(Group.EUROPE, 3),
        )
        assert result.peak_group == GroupCost(Group.ASIA, 3)

    def test_all_zero_peak_is_first_group(self):
        """With all totals at zero the first group is the peak."""
        graph = Graph.from_records(
            ["A,Oceania,5", "B,Asia,0", "C,Europe,5"],
            ["A,B", "B,C"],
        )
        assert route(graph, "A", "C").peak_group == GroupCost(Group.OCEANIA, 0)


class TestTraversalOrder:
    """Deterministic choice among equally short routes."""

    def test_first_declared_neighbor_wins(self, diamond_graph):
        """S declares L before R, so the route goes through L."""
        result = route(diamond_graph, "S", "T")
        assert result.path == ("S", "L", "T")
        assert result.total_cost == 4
        assert result.peak_group == GroupCost(Group.EUROPE, 4)

    def test_declaration_order_changes_route(self):
        """Swapping the declaration order swaps the route."""
        graph = Graph.from_records(
            ["S,Africa,1", "L,Europe,4", "R,Asia,2", "T,Oceania,1"],
            ["S,R,L", "L,T", "R,T"],
        )
        assert route(graph, "S", "T").path == ("S", "R", "T")

    def test_shortest_beats_first_declared(self):
        """Declaration order never beats hop count."""
        graph = Graph.from_records(
            ["S,Asia,0", "A,Asia,0", "B,Asia,0", "T,Asia,0"],
            ["S,A,T", "A,B", "B,T"],
        )
        assert route(graph, "S", "T").path == ("S", "T")

    def test_repeated_calls_are_identical(self, diamond_graph):
        """Same query on an unchanged graph gives an equal result."""
        finder = PathFinder(diamond_graph)
        s, t = diamond_graph.get_region("S"), diamond_graph.get_region("T")
        assert finder.shortest_route(s, t) == finder.shortest_route(s, t)


class TestDirectedLinks:
    """Only declared directions are traversed."""

    def test_follows_declared_direction(self):
        """A one-way cycle is walked the long way round."""
        graph = Graph.from_records(
            ["A,Asia,1", "B,Asia,2", "C,Asia,3"],
            ["A,B", "B,C", "C,A"],
        )
        assert route(graph, "A", "C").path == ("A", "B", "C")
        assert route(graph, "C", "B").path == ("C", "A", "B")

    def test_unreachable_falls_back_to_direct_pair(self, caplog):
        """Without a path the result is [source, destination]."""
        graph = Graph.from_records(["A,Asia,1", "B,Europe,2"], ["A,B"])
        with caplog.at_level(logging.WARNING):
            result = route(graph, "B", "A")
        assert result.path == ("B", "A")
        assert result.total_cost == 0
        assert result.group_costs == (GroupCost(Group.EUROPE, 0), GroupCost(Group.ASIA, 0))
        assert "No path" in caplog.text

    def test_foreign_region_rejected(self, chain_graph):
        """Endpoints must come from the finder's graph."""
        other = Graph.from_records(["A,Asia,0"], [])
        with pytest.raises(ValueError):
            PathFinder(chain_graph).shortest_route(other.get_region("A"), chain_graph.get_region("D"))


@pytest.fixture(scope="module")
def graph():
    """Bundled sample graph, loaded once for the module."""
    return load_graph()


@pytest.mark.skipif(
    not all(validate_data_files().values()),
    reason="Data files not available",
)
class TestSampleData:
    """Route properties over the bundled sample dataset."""

    def test_sample_graph_valid(self, graph):
        """Sample data loads cleanly and is symmetric."""
        assert all(graph.validate().values())
        assert graph.one_directional_edges() == []

    def test_known_route_length(self, graph):
        """Spain to Japan is six hops."""
        assert route(graph, "Spain", "Japan").hops == 6

    def test_route_properties_all_pairs(self, graph):
        """Every route is a minimal chain of declared links with consistent costs."""
        finder = PathFinder(graph)
        for source in graph:
            for destination in graph:
                if source is destination:
                    continue
                result = finder.shortest_route(source, destination)
                path = [graph.get_region(name) for name in result.path]

                assert path[0] is source
                assert path[-1] is destination
                assert all(graph.has_edge(a, b) for a, b in zip(path, path[1:]))
                assert result.hops == hop_distance(graph, source.name, destination.name)
                assert result.total_cost == sum(region.cost for region in path[1:-1])
                assert sum(entry.cost for entry in result.group_costs) == result.total_cost

    def test_sample_pairs_deterministic(self, graph, sample_pairs):
        """Repeated queries agree."""
        for source, destination in sample_pairs:
            assert route(graph, source, destination) == route(graph, source, destination)
