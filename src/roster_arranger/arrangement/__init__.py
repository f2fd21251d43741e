"""
Arrangement engine - partitions two rosters under a policy.

This module provides:
- PolicyEnforcer: BY_NUMBER, BY_RANK and BY_GROUP arrangements
- ArrangementValidator: Checks final rosters against their policy
"""

from roster_arranger.arrangement.enforcer import PolicyEnforcer
from roster_arranger.arrangement.rank_split import (
    Candidate,
    SplitWindow,
    compute_window,
    find_subset,
)
from roster_arranger.arrangement.validator import (
    ArrangementValidator,
    ValidationIssue,
    ValidationResult,
    ValidationSeverity,
    validate_arrangement,
)

__all__ = [
    "ArrangementValidator",
    "Candidate",
    "PolicyEnforcer",
    "SplitWindow",
    "ValidationIssue",
    "ValidationResult",
    "ValidationSeverity",
    "compute_window",
    "find_subset",
    "validate_arrangement",
]
