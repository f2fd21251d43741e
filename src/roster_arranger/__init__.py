"""
roster-arranger - partition two rosters under a policy.

Policies:
- BY_NUMBER: equal head counts
- BY_RANK: comparable rank sums
- BY_GROUP: even groups left, odd groups right

All of them respect a shared set of rules: a maximum group size and a
set of members pinned to their starting roster.
"""

from roster_arranger.arrangement import PolicyEnforcer, validate_arrangement
from roster_arranger.constants import GroupParity, Policy, Status
from roster_arranger.models import NO_RULES, Entity, Rules
from roster_arranger.registry import EntityStore
from roster_arranger.roster import Roster, group_parity

__all__ = [
    "NO_RULES",
    "Entity",
    "EntityStore",
    "GroupParity",
    "Policy",
    "PolicyEnforcer",
    "Roster",
    "Rules",
    "Status",
    "group_parity",
    "validate_arrangement",
]
