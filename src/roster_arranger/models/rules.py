"""
Rules - the constraint set shared by every arrangement policy.

Rules hold:
- The maximum number of members any group in a roster may have
- Names that must not be moved between rosters
"""

from __future__ import annotations

import sys

from pydantic import BaseModel, Field

from roster_arranger.constants import DEFAULT_MAXIMUM_GROUP_SIZE, ErrorMessages


class Rules(BaseModel):
    """
    Constraints that influence policy enforcement.

    Exclusions are checked when a member is added or removed, never
    enforced retroactively: excluding a name that is already placed
    does not undo its placement.
    """

    maximum_group_size: int = Field(
        DEFAULT_MAXIMUM_GROUP_SIZE, description="Maximum members per group"
    )
    excluded_names: set[str] = Field(
        default_factory=set, description="Names that must stay on their original roster"
    )

    def is_excluded(self, name: str) -> bool:
        """Check if the named member is excluded from moving."""
        return name in self.excluded_names

    def add_excluded_name(self, name: str) -> None:
        """Exclude a name from being moved."""
        self.excluded_names.add(name)


class _NoRules(Rules):
    """Unbounded group size, no exclusions. Read-only."""

    model_config = {"frozen": True}

    def add_excluded_name(self, name: str) -> None:
        raise TypeError(ErrorMessages.READ_ONLY_RULES)


# Used for verbatim roster copies where constraints must not apply
NO_RULES: Rules = _NoRules(maximum_group_size=sys.maxsize)
