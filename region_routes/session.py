"""
Line-oriented command session for region info and route queries.

Reads commands from an input function and writes replies to an output
function, so it can run against stdin/stdout or be driven by tests.

Commands:
    info [name]           Show a region's group, cost and neighbors
    route [from, to]      Shortest route between two regions
    list                  List all regions by group
    help                  Show this help
    quit                  End the session
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from region_routes.config import MAX_PROMPT_ATTEMPTS, PROMPT
from region_routes.errors import RegionNotFoundError, SameRegionError
from region_routes.formatting import format_region_info, format_route
from region_routes.graph.loader import Graph
from region_routes.graph.models import Group, Region
from region_routes.pathfinding.bfs import PathFinder

logger = logging.getLogger(__name__)

HELP_TEXT = """Commands:
  info [name]          Show a region's group, cost and neighbors
  route [from, to]     Shortest route between two regions
  list                 List all regions by group
  help                 Show this help
  quit                 End the session"""

QUIT_COMMANDS = {"quit", "exit", "q"}

# Separates the two region names of a one-line route command
ROUTE_ARG_SEPARATOR = ","


class RouteSession:
    """
    Dispatches commands against a loaded graph.

    Unknown region names are reported and re-prompted (up to
    ``max_attempts`` tries per name) without ending the session.
    """

    def __init__(
        self,
        graph: Graph,
        input_fn: Callable[[str], str] = input,
        output_fn: Callable[[str], None] = print,
        max_attempts: int = MAX_PROMPT_ATTEMPTS,
    ) -> None:
        self._graph = graph
        self._finder = PathFinder(graph)
        self._input = input_fn
        self._output = output_fn
        self._max_attempts = max_attempts

    # =========================================================================
    # Queries
    # =========================================================================

    def info(self, name: str) -> str:
        """
        Describe a region.

        Raises:
            RegionNotFoundError: If the name is unknown
        """
        region = self._graph.get_region(name)
        return format_region_info(region, self._graph.neighbor_names(region))

    def route(self, source_name: str, destination_name: str) -> str:
        """
        Describe the shortest route between two named regions.

        Raises:
            RegionNotFoundError: If either name is unknown
            SameRegionError: If both names resolve to the same region
        """
        source = self._graph.get_region(source_name)
        destination = self._graph.get_region(destination_name)
        return self._route_regions(source, destination)

    def _route_regions(self, source: Region, destination: Region) -> str:
        if source is destination:
            raise SameRegionError(source.name)
        return format_route(self._finder.shortest_route(source, destination))

    # =========================================================================
    # Command Loop
    # =========================================================================

    def run(self) -> None:
        """Read and dispatch commands until quit or end of input."""
        self._output("Type 'help' for commands.")
        while True:
            try:
                line = self._input(PROMPT)
                if not self.dispatch(line):
                    break
            except EOFError:
                break
        logger.debug("Session ended")

    def dispatch(self, line: str) -> bool:
        """
        Handle one command line.

        Returns:
            False if the session should end, True otherwise
        """
        command, _, rest = line.strip().partition(" ")
        command = command.lower()
        rest = rest.strip()

        if not command:
            return True
        if command in QUIT_COMMANDS:
            return False

        if command == "help":
            self._output(HELP_TEXT)
        elif command == "list":
            self._output(self._format_region_list())
        elif command == "info":
            self._handle_info(rest)
        elif command == "route":
            self._handle_route(rest)
        else:
            self._output(f"Unknown command '{command}'. Type 'help' for commands.")
        return True

    def _handle_info(self, rest: str) -> None:
        region = self._prompt_region("Region", rest or None)
        if region is not None:
            self._output(format_region_info(region, self._graph.neighbor_names(region)))

    def _handle_route(self, rest: str) -> None:
        source_arg, _, destination_arg = rest.partition(ROUTE_ARG_SEPARATOR)

        source = self._prompt_region("From", source_arg.strip() or None)
        if source is None:
            return
        destination = self._prompt_region("To", destination_arg.strip() or None)
        if destination is None:
            return

        try:
            self._output(self._route_regions(source, destination))
        except SameRegionError as e:
            self._output(f"{e}. Pick two different regions.")

    def _prompt_region(self, label: str, name: str | None = None) -> Region | None:
        """
        Resolve a region name, prompting until a known name is given.

        Args:
            label: Prompt label
            name: Name given on the command line, tried first

        Returns:
            The region, or None after too many unknown names
        """
        for _ in range(self._max_attempts):
            if name is None:
                name = self._input(f"{label}: ")
            try:
                return self._graph.get_region(name)
            except RegionNotFoundError as e:
                self._output(f"{e}. Try again.")
                name = None

        self._output(f"Giving up after {self._max_attempts} attempts.")
        return None

    def _format_region_list(self) -> str:
        lines = []
        for group in Group:
            names = [region.name for region in self._graph if region.group is group]
            if names:
                lines.append(f"{group.display_name} ({len(names)}): {', '.join(names)}")
        return "\n".join(lines)
