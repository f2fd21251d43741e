"""
Entity model - a named member with a rank and a group number.

Entities are immutable. Changing a group means storing a new record
under the same name (see EntityStore.replace).
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from roster_arranger.constants import GROUP_MIN, RANK_MAX, RANK_MIN, GroupParity


class Entity(BaseModel):
    """A single member that can be placed in a roster."""

    name: str = Field(..., min_length=1, description="Unique name within a store")
    rank: int = Field(..., ge=RANK_MIN, le=RANK_MAX, description="Rank, 1 (low) to 100 (high)")
    group: int = Field(..., ge=GROUP_MIN, description="Group number, 0 or greater")

    model_config = {"frozen": True}

    @property
    def parity(self) -> GroupParity:
        """Parity of this entity's group."""
        return GroupParity.ODD if self.group % 2 == 1 else GroupParity.EVEN

    def __str__(self) -> str:
        return f"{self.name} (group {self.group}, rank {self.rank})"
