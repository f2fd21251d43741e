"""
Entity Store - the registry every roster resolves names through.

Entities are kept in a list and addressed by a stable integer handle.
A name index maps names to handles. Replacing an entity rewrites the
record at its handle, so holders that resolve names (or handles) through
the store always see the current record.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

from roster_arranger.constants import GROUP_MIN, RANK_MAX, RANK_MIN, ErrorMessages
from roster_arranger.exceptions import (
    DuplicateNameError,
    EntityNotFoundError,
    InvalidGroupError,
    InvalidNameError,
    InvalidRankError,
)
from roster_arranger.models.entity import Entity

logger = logging.getLogger(__name__)


class EntityStore:
    """
    Name-keyed store of entities with handle-based records.

    Create one store per process (or per test) and pass it to every
    roster that needs lookups.
    """

    def __init__(self) -> None:
        self._records: list[Entity] = []
        self._handles: dict[str, int] = {}

    def create(self, name: str, rank: int, group: int) -> Entity:
        """
        Create and store a new entity.

        Args:
            name: Unique, non-empty name
            rank: Rank from 1 to 100 inclusive
            group: Group number, 0 or greater

        Returns:
            The stored Entity

        Raises:
            DuplicateNameError: If the name is already stored
            InvalidNameError: If the name is empty
            InvalidRankError: If rank is outside 1..100
            InvalidGroupError: If group is negative
        """
        if name in self._handles:
            raise DuplicateNameError(ErrorMessages.DUPLICATE_NAME.format(name=name))
        entity = self._build(name, rank, group)

        self._handles[name] = len(self._records)
        self._records.append(entity)
        return entity

    def lookup(self, name: str) -> Entity | None:
        """Get an entity by name, or None if not stored."""
        handle = self._handles.get(name)
        if handle is None:
            return None
        return self._records[handle]

    def require(self, name: str) -> Entity:
        """Get an entity by name, raising EntityNotFoundError if missing."""
        entity = self.lookup(name)
        if entity is None:
            raise EntityNotFoundError(ErrorMessages.ENTITY_NOT_FOUND.format(name=name))
        return entity

    def handle(self, name: str) -> int | None:
        """Get the stable handle for a name, or None if not stored."""
        return self._handles.get(name)

    def get(self, handle: int) -> Entity:
        """Get the current record at a handle."""
        if not 0 <= handle < len(self._records):
            raise EntityNotFoundError(ErrorMessages.HANDLE_NOT_FOUND.format(handle=handle))
        return self._records[handle]

    def replace(self, name: str, rank: int, group: int) -> Entity:
        """
        Replace the record for a name, keeping its handle.

        Used to retarget an entity's group. Creates the entity if the
        name is not stored yet.

        Returns:
            The new record
        """
        handle = self._handles.get(name)
        if handle is None:
            return self.create(name, rank, group)

        entity = self._build(name, rank, group)
        previous = self._records[handle]
        self._records[handle] = entity
        if previous.group != group:
            logger.debug(f"Regrouped {name}: {previous.group} -> {group}")
        return entity

    def clear(self) -> None:
        """Remove every entity."""
        self._records.clear()
        self._handles.clear()

    def _build(self, name: str, rank: int, group: int) -> Entity:
        """Validate fields and build an Entity."""
        if not isinstance(name, str) or not name:
            raise InvalidNameError(ErrorMessages.INVALID_NAME.format(name=name))
        if rank < RANK_MIN or rank > RANK_MAX:
            raise InvalidRankError(ErrorMessages.INVALID_RANK.format(name=name, rank=rank))
        if group < GROUP_MIN:
            raise InvalidGroupError(ErrorMessages.INVALID_GROUP.format(group=group))
        return Entity(name=name, rank=rank, group=group)

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, name: object) -> bool:
        return name in self._handles

    def __iter__(self) -> Iterator[Entity]:
        return iter(list(self._records))

    def __repr__(self) -> str:
        return f"EntityStore({len(self)} entities)"
