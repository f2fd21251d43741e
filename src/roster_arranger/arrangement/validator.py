"""
Arrangement Validator - checks arranged rosters against their policy.

Validates:
- Group counts match the members' groups
- Excluded members stayed on their original side (BY_NUMBER, BY_RANK)
- Head count difference (BY_NUMBER: 1, BY_RANK: 2)
- Rank sum difference (BY_RANK: 90)
- Parity placement (BY_GROUP)
- Group sizes within the maximum
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from enum import Enum

from roster_arranger.arrangement.enforcer import PolicyEnforcer
from roster_arranger.constants import (
    NUMBER_COUNT_SPREAD,
    RANK_COUNT_SPREAD,
    RANK_SPREAD,
    GroupParity,
    Policy,
    Status,
)
from roster_arranger.roster.roster import Roster, group_parity


class ValidationSeverity(str, Enum):
    """Severity level for validation issues."""

    ERROR = "error"  # Policy invariant broken
    WARNING = "warning"  # Arrangement usable but a rule was bent
    INFO = "info"  # Informational only


@dataclass
class ValidationIssue:
    """A single validation issue."""

    severity: ValidationSeverity
    code: str
    message: str
    location: str | None = None

    def __str__(self) -> str:
        prefix = f"[{self.severity.value.upper()}]"
        location = f" at {self.location}" if self.location else ""
        return f"{prefix} {self.code}: {self.message}{location}"


class ValidationResult:
    """Result of validating an arrangement."""

    def __init__(self) -> None:
        self.issues: list[ValidationIssue] = []

    def add_error(self, code: str, message: str, location: str | None = None) -> None:
        """Add an error issue."""
        self.issues.append(ValidationIssue(ValidationSeverity.ERROR, code, message, location))

    def add_warning(self, code: str, message: str, location: str | None = None) -> None:
        """Add a warning issue."""
        self.issues.append(ValidationIssue(ValidationSeverity.WARNING, code, message, location))

    def add_info(self, code: str, message: str, location: str | None = None) -> None:
        """Add an info issue."""
        self.issues.append(ValidationIssue(ValidationSeverity.INFO, code, message, location))

    @property
    def is_valid(self) -> bool:
        """Return True if no errors (warnings/info are OK)."""
        return not any(i.severity == ValidationSeverity.ERROR for i in self.issues)

    @property
    def errors(self) -> list[ValidationIssue]:
        """Get all error issues."""
        return [i for i in self.issues if i.severity == ValidationSeverity.ERROR]

    @property
    def warnings(self) -> list[ValidationIssue]:
        """Get all warning issues."""
        return [i for i in self.issues if i.severity == ValidationSeverity.WARNING]

    def codes(self) -> set[str]:
        """Codes of every issue."""
        return {i.code for i in self.issues}

    def __bool__(self) -> bool:
        """Boolean conversion returns is_valid."""
        return self.is_valid

    def __str__(self) -> str:
        if not self.issues:
            return "Validation passed: no issues found"
        return "\n".join(str(issue) for issue in self.issues)


class ArrangementValidator:
    """Validates the final rosters of an arranged PolicyEnforcer."""

    def validate(self, enforcer: PolicyEnforcer) -> ValidationResult:
        """
        Validate an arrangement.

        Args:
            enforcer: An enforcer whose arrange() has been called

        Returns:
            ValidationResult with any issues found
        """
        result = ValidationResult()
        left, right = enforcer.left_final, enforcer.right_final
        if left is None or right is None:
            result.add_error("NOT_ARRANGED", "arrange() has not been called", "enforcer")
            return result

        if enforcer.status not in (Status.SUCCESS, Status.ALREADY_ARRANGED):
            result.add_info(
                "POLICY_NOT_MET",
                f"Arrangement ended with {enforcer.status.value}; policy checks skipped",
                "enforcer",
            )

        self._validate_group_counts(left, "left", result)
        self._validate_group_counts(right, "right", result)
        self._validate_group_sizes(left, "left", enforcer, result)
        self._validate_group_sizes(right, "right", enforcer, result)

        if enforcer.policy != Policy.BY_GROUP:
            self._validate_exclusions(enforcer, left, right, result)

        if enforcer.status in (Status.SUCCESS, Status.ALREADY_ARRANGED):
            if enforcer.policy == Policy.BY_NUMBER:
                self._validate_count_spread(left, right, NUMBER_COUNT_SPREAD, result)
            elif enforcer.policy == Policy.BY_RANK:
                self._validate_count_spread(left, right, RANK_COUNT_SPREAD, result)
                self._validate_rank_spread(left, right, result)
            else:
                self._validate_parity(left, "left", GroupParity.EVEN, result)
                self._validate_parity(right, "right", GroupParity.ODD, result)

        return result

    def _validate_group_counts(self, roster: Roster, side: str, result: ValidationResult) -> None:
        """Group counts must equal the number of members per current group."""
        actual = Counter(entity.group for entity in roster.entities())
        if dict(actual) != roster.group_counts:
            result.add_error(
                "GROUP_COUNT_MISMATCH",
                f"Group counts {roster.group_counts} do not match members {dict(actual)}",
                f"{side}/groups",
            )

    def _validate_group_sizes(
        self, roster: Roster, side: str, enforcer: PolicyEnforcer, result: ValidationResult
    ) -> None:
        """Flag groups above the maximum size."""
        maximum = enforcer.rules.maximum_group_size
        for group, count in roster.group_counts.items():
            if count > maximum:
                result.add_warning(
                    "OVERSIZED_GROUP",
                    f"Group {group} has {count} members (maximum {maximum})",
                    f"{side}/groups/{group}",
                )

    def _validate_exclusions(
        self, enforcer: PolicyEnforcer, left: Roster, right: Roster, result: ValidationResult
    ) -> None:
        """Excluded members must end on the side they started on."""
        for start, final, side in (
            (enforcer.left_start, left, "left"),
            (enforcer.right_start, right, "right"),
        ):
            for name in start:
                if enforcer.rules.is_excluded(name) and name not in final:
                    result.add_error(
                        "EXCLUDED_MOVED",
                        f"Excluded member '{name}' left the {side} roster",
                        f"{side}/{name}",
                    )

    def _validate_count_spread(
        self, left: Roster, right: Roster, spread: int, result: ValidationResult
    ) -> None:
        """Head counts must be within the spread."""
        difference = abs(len(left) - len(right))
        if difference > spread:
            result.add_error(
                "COUNT_SPREAD",
                f"Head counts {len(left)}/{len(right)} differ by {difference} (maximum {spread})",
                "rosters",
            )

    def _validate_rank_spread(self, left: Roster, right: Roster, result: ValidationResult) -> None:
        """Rank sums must be within RANK_SPREAD."""
        left_sum, right_sum = left.rank_sum(), right.rank_sum()
        difference = abs(left_sum - right_sum)
        if difference > RANK_SPREAD:
            result.add_error(
                "RANK_SPREAD",
                f"Rank sums {left_sum}/{right_sum} differ by {difference} (maximum {RANK_SPREAD})",
                "rosters",
            )

    def _validate_parity(
        self, roster: Roster, side: str, parity: GroupParity, result: ValidationResult
    ) -> None:
        """Every member must be in a group of the side's parity."""
        for entity in roster.entities():
            if group_parity(entity.group) is not parity:
                result.add_error(
                    "WRONG_PARITY",
                    f"'{entity.name}' is in group {entity.group} on the {side} roster",
                    f"{side}/{entity.name}",
                )


def validate_arrangement(enforcer: PolicyEnforcer) -> ValidationResult:
    """
    Convenience function to validate an arrangement.

    Args:
        enforcer: An enforcer whose arrange() has been called

    Returns:
        ValidationResult with any issues found
    """
    validator = ArrangementValidator()
    return validator.validate(enforcer)
