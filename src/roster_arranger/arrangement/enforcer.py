"""
Policy Enforcer - arranges a pair of rosters according to a policy.

Policies:
- BY_NUMBER: head counts differ by at most 1
- BY_RANK: rank sums within 90 inclusive, head counts within 2
- BY_GROUP: even groups on the left, odd groups on the right

Excluded members never change sides under BY_NUMBER or BY_RANK. BY_GROUP
always moves by parity and may renumber anyone, excluded or not.

The enforcer takes ownership of the rosters it is given. Pass fresh
copies (Roster.copy) for every enforcer.
"""

from __future__ import annotations

import logging

from roster_arranger.arrangement.rank_split import (
    Candidate,
    compute_window,
    find_subset,
)
from roster_arranger.constants import ErrorMessages, GroupParity, Policy, Status
from roster_arranger.exceptions import InvalidArgumentError, InvalidConstraintError
from roster_arranger.models.rules import NO_RULES, Rules
from roster_arranger.roster.roster import Roster, group_parity

logger = logging.getLogger(__name__)


class PolicyEnforcer:
    """
    Arranges two rosters for one policy.

    After arrange() returns, read left_final and right_final.
    """

    def __init__(
        self,
        policy: Policy,
        rules: Rules,
        left_original: Roster,
        right_original: Roster,
    ):
        """
        Initialize the enforcer.

        Args:
            policy: Policy to arrange by
            rules: Rules applied during the arrangement
            left_original: Non-empty left roster, owned by the enforcer from now on
            right_original: Non-empty right roster, owned by the enforcer from now on

        Raises:
            InvalidConstraintError: If the maximum group size is negative
            InvalidArgumentError: If a roster is empty or the rosters use different stores
        """
        if rules.maximum_group_size < 0:
            raise InvalidConstraintError(
                ErrorMessages.INVALID_MAXIMUM_GROUP_SIZE.format(size=rules.maximum_group_size)
            )
        if len(left_original) == 0:
            raise InvalidArgumentError(ErrorMessages.EMPTY_ROSTER.format(side="left"))
        if len(right_original) == 0:
            raise InvalidArgumentError(ErrorMessages.EMPTY_ROSTER.format(side="right"))
        if left_original.store is not right_original.store:
            raise InvalidArgumentError(ErrorMessages.MIXED_STORES)

        self.policy = Policy(policy)
        self.rules = rules
        self.store = left_original.store
        self.left_original = left_original
        self.right_original = right_original

        # Who started where, for validation after the originals are consumed
        self.left_start: tuple[str, ...] = left_original.members
        self.right_start: tuple[str, ...] = right_original.members

        self._left_final: Roster | None = None
        self._right_final: Roster | None = None
        self.status: Status | None = None

    @property
    def left_final(self) -> Roster | None:
        """The arranged left roster (None before arrange)."""
        return self._left_final

    @property
    def right_final(self) -> Roster | None:
        """The arranged right roster (None before arrange)."""
        return self._right_final

    def arrange(self) -> Status:
        """
        Arrange the rosters according to the policy.

        Returns:
            Status of the arrangement
        """
        if self.policy == Policy.BY_GROUP:
            status = self._arrange_by_group()
        elif self.policy == Policy.BY_RANK:
            status = self._arrange_by_rank()
        else:
            status = self._arrange_by_number()

        self.status = status
        logger.info(
            f"{self.policy.value}: {status.value} "
            f"({len(self.left_start)}/{len(self.right_start)} -> "
            f"{len(self._left_final or ())}/{len(self._right_final or ())})"
        )
        return status

    def _copy_originals(self) -> tuple[Roster, Roster]:
        """Start the finals as verbatim copies of the originals."""
        self._left_final = self.left_original.copy()
        self._right_final = self.right_original.copy()
        return self._left_final, self._right_final

    def _arrange_by_number(self) -> Status:
        """Move movable members from the bigger roster until counts are within 1."""
        left, right = self._copy_originals()

        # Left is the bigger one unless right is strictly larger
        bigger, smaller = (right, left) if len(right) > len(left) else (left, right)

        if len(bigger) - 1 <= len(smaller):
            return Status.ALREADY_ARRANGED

        position = 0
        while len(bigger) - 1 > len(smaller) and position < len(bigger):
            candidate = bigger.member_at(position)
            if bigger.remove(candidate, self.rules):
                smaller.add(candidate, self.rules)
                logger.debug(f"Moved {candidate}")
            else:
                position += 1

        if len(bigger) - 1 <= len(smaller):
            return Status.SUCCESS
        return Status.TOO_MANY_EXCLUSIONS

    def _arrange_by_rank(self) -> Status:
        """Split free members so rank sums are within 90 and counts within 2."""
        reserved_left: list[str] = []
        reserved_right: list[str] = []
        free: list[Candidate] = []
        total_rank = 0

        for roster, reserved in (
            (self.left_original, reserved_left),
            (self.right_original, reserved_right),
        ):
            for entity in roster.entities():
                total_rank += entity.rank
                if self.rules.is_excluded(entity.name):
                    reserved.append(entity.name)
                else:
                    free.append(Candidate(entity.name, entity.rank))

        free_rank = sum(candidate.rank for candidate in free)
        reserved_rank = sum(self.store.require(name).rank for name in reserved_left)
        window = compute_window(
            total_rank,
            len(self.left_original) + len(self.right_original),
            reserved_rank,
            len(reserved_left),
        )
        logger.debug(f"Rank split window: {window}")

        chosen: list[str] | None = None
        if window.is_reachable(free_rank, len(free)):
            chosen = find_subset(free, window)

        if chosen is None:
            self._copy_originals()
            if reserved_left or reserved_right:
                return Status.TOO_MANY_EXCLUSIONS
            return Status.RANKS_TOO_LOPSIDED

        picked = set(chosen)
        reserved_left.extend(chosen)
        reserved_right.extend(c.name for c in free if c.name not in picked)

        # Placement is already decided, so no rules are re-checked here
        self._left_final = Roster(self.store)
        self._right_final = Roster(self.store)
        for name in reserved_left:
            self._left_final.add(name, NO_RULES)
        for name in reserved_right:
            self._right_final.add(name, NO_RULES)
        return Status.SUCCESS

    def _arrange_by_group(self) -> Status:
        """Send even groups left and odd groups right, renumbering within parity."""
        self._left_final = Roster(self.store)
        self._right_final = Roster(self.store)

        for roster in (self.left_original, self.right_original):
            for entity in roster.entities():
                parity = group_parity(entity.group)
                target = self._left_final if parity is GroupParity.EVEN else self._right_final
                target.add_with_parity(entity.name, self.rules, parity)

        return Status.SUCCESS
