"""
Pytest configuration and shared fixtures.

This file is automatically loaded by pytest and provides
fixtures available to all test files.
"""

from pathlib import Path

import pytest

from region_routes.graph import Graph


@pytest.fixture
def project_root() -> Path:
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def data_dir(project_root: Path) -> Path:
    """Return the data directory."""
    return project_root / "data"


@pytest.fixture
def chain_graph() -> Graph:
    """A-B-C-D chain across two groups, both directions declared."""
    return Graph.from_records(
        [
            "A,Asia,0",
            "B,Asia,5",
            "C,Europe,3",
            "D,Europe,0",
        ],
        [
            "A,B",
            "B,A,C",
            "C,B,D",
            "D,C",
        ],
    )


@pytest.fixture
def diamond_graph() -> Graph:
    """
    Two equally short routes from S to T.

        S -> L -> T
        S -> R -> T

    S declares L before R.
    """
    return Graph.from_records(
        [
            "S,Africa,1",
            "L,Europe,4",
            "R,Asia,2",
            "T,Oceania,1",
        ],
        [
            "S,L,R",
            "L,S,T",
            "R,S,T",
            "T,L,R",
        ],
    )


@pytest.fixture
def sample_pairs() -> list[tuple[str, str]]:
    """Region pairs from the bundled sample dataset."""
    return [
        ("Spain", "Japan"),
        ("Chile", "New Zealand"),
        ("Alaska", "South Africa"),
        ("Morocco", "France"),
    ]
