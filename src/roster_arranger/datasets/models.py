"""
Dataset models - the YAML format for starting rosters and rules.

A dataset names the members of the left and right rosters and the rules
to arrange them under. Building a dataset creates the entities in a
store and fills two rosters.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, ValidationInfo, field_validator

from roster_arranger.constants import (
    DATASET_SCHEMA,
    DEFAULT_MAXIMUM_GROUP_SIZE,
    GROUP_MIN,
    RANK_MAX,
    RANK_MIN,
)
from roster_arranger.models.rules import Rules
from roster_arranger.registry.store import EntityStore
from roster_arranger.roster.roster import Roster


class MemberSpec(BaseModel):
    """One member as written in a dataset file."""

    name: str = Field(..., min_length=1, description="Unique member name")
    group: int = Field(..., ge=GROUP_MIN, description="Starting group number")
    rank: int = Field(..., ge=RANK_MIN, le=RANK_MAX, description="Rank, 1 to 100")

    model_config = {"frozen": True}


class RulesSpec(BaseModel):
    """Rules as written in a dataset file."""

    maximum_group_size: int = Field(
        DEFAULT_MAXIMUM_GROUP_SIZE, ge=0, description="Maximum members per group"
    )
    excluded: list[str] = Field(default_factory=list, description="Names that must not move")


class Dataset(BaseModel):
    """A pair of starting rosters and the rules to arrange them under."""

    schema_version: str = Field(DATASET_SCHEMA, description="Schema version")
    name: str = Field(..., description="Dataset name")
    description: str | None = Field(None, description="What this dataset exercises")
    rules: RulesSpec = Field(default_factory=RulesSpec, description="Arrangement rules")
    left: list[MemberSpec] = Field(default_factory=list, description="Left roster members")
    right: list[MemberSpec] = Field(default_factory=list, description="Right roster members")

    @field_validator("right")
    @classmethod
    def validate_unique_names(cls, v: list[MemberSpec], info: ValidationInfo) -> list[MemberSpec]:
        """Member names must be unique across both rosters."""
        seen: set[str] = set()
        for member in [*info.data.get("left", []), *v]:
            if member.name in seen:
                raise ValueError(f"Duplicate member name: {member.name}")
            seen.add(member.name)
        return v

    def build(self, store: EntityStore) -> tuple[Roster, Roster, Rules]:
        """
        Create the entities and fill both rosters.

        Members are added under the dataset's group size limit before any
        exclusions are applied, so starting groups may be renumbered but
        every member is placed.

        Args:
            store: Store to create the entities in

        Returns:
            (left roster, right roster, rules)
        """
        rules = Rules(maximum_group_size=self.rules.maximum_group_size)

        left = Roster(store)
        for member in self.left:
            left.add(store.create(member.name, member.rank, member.group).name, rules)

        right = Roster(store)
        for member in self.right:
            right.add(store.create(member.name, member.rank, member.group).name, rules)

        for name in self.rules.excluded:
            rules.add_excluded_name(name)

        return left, right, rules

    def to_yaml_dict(self) -> dict[str, Any]:
        """Convert to the canonical YAML dict."""
        return {
            "schema": self.schema_version,
            "name": self.name,
            "description": self.description,
            "rules": {
                "maximum_group_size": self.rules.maximum_group_size,
                "excluded": list(self.rules.excluded),
            },
            "left": [m.model_dump() for m in self.left],
            "right": [m.model_dump() for m in self.right],
        }

    @classmethod
    def from_yaml_dict(cls, data: dict[str, Any]) -> Dataset:
        """Create a Dataset from a YAML-parsed dict."""
        rules_data = data.get("rules") or {}
        return cls(
            schema_version=data.get("schema", DATASET_SCHEMA),
            name=data["name"],
            description=data.get("description"),
            rules=RulesSpec(
                maximum_group_size=rules_data.get(
                    "maximum_group_size", DEFAULT_MAXIMUM_GROUP_SIZE
                ),
                excluded=rules_data.get("excluded") or [],
            ),
            left=[MemberSpec(**m) for m in data.get("left") or []],
            right=[MemberSpec(**m) for m in data.get("right") or []],
        )
