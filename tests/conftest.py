"""
Pytest configuration and shared fixtures.
"""

import tempfile
from collections.abc import Callable
from pathlib import Path

import pytest

from roster_arranger.models import Rules
from roster_arranger.registry import EntityStore
from roster_arranger.roster import Roster

MemberRow = tuple[str, int, int]  # (name, group, rank)


@pytest.fixture
def temp_dir() -> Path:
    """Create a temporary directory for test outputs."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def store() -> EntityStore:
    """A fresh, empty entity store."""
    return EntityStore()


@pytest.fixture
def rules() -> Rules:
    """Default rules: groups of at most 5, nobody excluded."""
    return Rules()


@pytest.fixture
def make_roster(store: EntityStore, rules: Rules) -> Callable[[list[MemberRow]], Roster]:
    """Factory: create (name, group, rank) entities and add them to a new roster."""

    def _make(members: list[MemberRow]) -> Roster:
        roster = Roster(store)
        for name, group, rank in members:
            store.create(name, rank, group)
            roster.add(name, rules)
        return roster

    return _make


@pytest.fixture
def trio(make_roster: Callable[[list[MemberRow]], Roster]) -> tuple[Roster, Roster]:
    """Left: A and B in group 3. Right: C in group 1."""
    left = make_roster([("A", 3, 23), ("B", 3, 34)])
    right = make_roster([("C", 1, 100)])
    return left, right
