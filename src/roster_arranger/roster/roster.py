"""
Roster - an ordered list of member names with per-group occupancy.

Entities are looked up by name through the roster's EntityStore on
every access. The roster also owns group renumbering: when a member
joins a group that is already full, it is moved to the next group
with room, or to a brand new group past the highest one.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

from roster_arranger.constants import GROUP_MIN, ErrorMessages, GroupParity
from roster_arranger.exceptions import (
    DuplicateMemberError,
    InvalidGroupError,
    MemberNotFoundError,
)
from roster_arranger.models.entity import Entity
from roster_arranger.models.rules import NO_RULES, Rules
from roster_arranger.registry.store import EntityStore

logger = logging.getLogger(__name__)


def group_parity(group: int) -> GroupParity:
    """Get the parity of a group number."""
    return GroupParity.ODD if group % 2 == 1 else GroupParity.EVEN


class Roster:
    """
    A duplicate-free, ordered collection of entity names.

    Group counts only hold groups with at least one member. Each member's
    admitted group is remembered so removal decrements the right count.
    """

    def __init__(self, store: EntityStore):
        """
        Initialize an empty roster.

        Args:
            store: Store used to resolve member names
        """
        self.store = store
        self._members: list[str] = []
        self._admitted: dict[str, int] = {}
        self._group_counts: dict[int, int] = {}

    # Membership

    def add(self, name: str, rules: Rules) -> bool:
        """
        Add a member, renumbering its group if the rules require it.

        Args:
            name: Entity name to add
            rules: Rules applied to the addition

        Returns:
            True if the roster changed, False if the name is excluded

        Raises:
            DuplicateMemberError: If the name is already in this roster
            EntityNotFoundError: If the store has no such entity
        """
        if rules.is_excluded(name):
            return False
        if name in self._admitted:
            raise DuplicateMemberError(ErrorMessages.DUPLICATE_MEMBER.format(name=name))

        entity = self.store.require(name)
        self._admit(entity, self.resolve_group(name, rules))
        return True

    def add_all(self, other: Roster, rules: Rules) -> bool:
        """
        Add every member of another roster, in its order.

        Returns:
            True if at least one member was added
        """
        changed = False
        for name in other:
            if self.add(name, rules):
                changed = True
        return changed

    def add_with_parity(self, name: str, rules: Rules, parity: GroupParity) -> bool:
        """
        Add a member into a group of the given parity with spare capacity.

        Exclusions do not apply. The member's group only changes as far as
        needed to satisfy both parity and the maximum group size.

        Raises:
            DuplicateMemberError: If the name is already in this roster
            EntityNotFoundError: If the store has no such entity
        """
        if name in self._admitted:
            raise DuplicateMemberError(ErrorMessages.DUPLICATE_MEMBER.format(name=name))

        entity = self.store.require(name)
        group = entity.group
        count = self._group_counts.get(group)

        while group_parity(group) is not parity or (
            count is not None and count >= rules.maximum_group_size
        ):
            following = self._next_group(group)
            if following is None:
                group += 2 if group_parity(group) is parity else 1
                break
            group = following
            count = self._group_counts[group]

        self._admit(entity, group)
        return True

    def remove(self, name: str, rules: Rules) -> bool:
        """
        Remove a member. The entity's group number is not changed.

        Returns:
            True if the roster changed, False if the name is excluded

        Raises:
            MemberNotFoundError: If the name is not in this roster
        """
        if name not in self._admitted:
            raise MemberNotFoundError(ErrorMessages.MEMBER_NOT_FOUND.format(name=name))
        if rules.is_excluded(name):
            return False

        group = self._admitted.pop(name)
        self._members.remove(name)
        remaining = self._group_counts.pop(group) - 1
        if remaining > 0:
            self._group_counts[group] = remaining
        return True

    # Groups

    def group_size(self, group: int) -> int:
        """
        Number of members in a group, 0 if none.

        Raises:
            InvalidGroupError: If group is less than 0
        """
        if group < GROUP_MIN:
            raise InvalidGroupError(ErrorMessages.INVALID_GROUP.format(group=group))
        return self._group_counts.get(group, 0)

    def resolve_group(self, name: str, rules: Rules) -> int:
        """
        Find the group a member would be admitted to. Does not modify anything.

        Starts at the entity's current group. While that group is full,
        tries the next higher group present in this roster. If none has
        room, a new group one past the highest present group is used.

        Returns:
            The admitted group number
        """
        entity = self.store.require(name)
        group = entity.group
        count = self._group_counts.get(group)

        while count is not None and count >= rules.maximum_group_size:
            following = self._next_group(group)
            if following is None:
                return group + 1
            group = following
            count = self._group_counts[group]

        return group

    @property
    def group_counts(self) -> dict[int, int]:
        """Copy of the group counts, ordered by group number."""
        return dict(sorted(self._group_counts.items()))

    def _next_group(self, group: int) -> int | None:
        """Smallest present group strictly greater than group."""
        higher = [g for g in self._group_counts if g > group]
        return min(higher) if higher else None

    def _admit(self, entity: Entity, group: int) -> None:
        """Persist a group change if needed and insert the member."""
        if group != entity.group:
            logger.debug(f"Admitting {entity.name} to group {group} instead of {entity.group}")
            self.store.replace(entity.name, entity.rank, group)

        self._members.append(entity.name)
        self._admitted[entity.name] = group
        self._group_counts[group] = self._group_counts.get(group, 0) + 1

    # Ordering

    def sort_by_name(self) -> None:
        """Sort members ascending (A to Z) by name."""
        self._members.sort()

    def sort_by_rank(self) -> None:
        """Sort members descending (100 to 1) by rank."""
        self._members.sort(key=lambda name: self.store.require(name).rank, reverse=True)

    # Read helpers

    @property
    def members(self) -> tuple[str, ...]:
        """Member names in roster order."""
        return tuple(self._members)

    def entities(self) -> list[Entity]:
        """Current entity records for every member, in roster order."""
        return [self.store.require(name) for name in self._members]

    def member_at(self, index: int) -> str:
        """Member name at a position."""
        return self._members[index]

    def rank_sum(self) -> int:
        """Total rank of all members."""
        return sum(entity.rank for entity in self.entities())

    def copy(self) -> Roster:
        """Verbatim copy bound to the same store. No rules are applied."""
        duplicate = Roster(self.store)
        duplicate.add_all(self, NO_RULES)
        return duplicate

    def __len__(self) -> int:
        return len(self._members)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._members))

    def __contains__(self, name: object) -> bool:
        return name in self._admitted

    def __repr__(self) -> str:
        return f"Roster({self._members!r})"
