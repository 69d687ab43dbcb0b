"""
Exceptions raised while loading the region graph and answering queries.
"""

from __future__ import annotations


class RegionRoutesError(Exception):
    """Base class for all Region Routes errors."""


class RegionNotFoundError(RegionRoutesError, KeyError):
    """
    A region name could not be resolved against the graph.

    Recoverable: callers may ask for another name.

    Attributes:
        name: The (trimmed) name that was looked up
    """

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"Region '{self.name}' not found"


class MalformedRecordError(RegionRoutesError, ValueError):
    """
    A dataset record could not be parsed. Fatal at load time.

    Attributes:
        line_number: 1-indexed position of the record in its dataset
        line: The raw record text
        reason: Short description of the problem
    """

    def __init__(self, line_number: int, line: str, reason: str) -> None:
        super().__init__(f"Record {line_number} ({line!r}): {reason}")
        self.line_number = line_number
        self.line = line
        self.reason = reason


class UnknownGroupError(MalformedRecordError):
    """A region record names a group outside the known set."""

    def __init__(self, line_number: int, line: str, label: str) -> None:
        super().__init__(line_number, line, f"unknown group '{label}'")
        self.label = label


class SameRegionError(RegionRoutesError, ValueError):
    """A route was requested from a region to itself."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Source and destination are both '{name}'")
        self.name = name
