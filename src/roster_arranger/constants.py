"""
Constants and enums for the roster arrangement system.

No magic strings - use enums for policies, statuses and parities.
"""

from enum import Enum

# Entity limits
RANK_MIN = 1
RANK_MAX = 100
GROUP_MIN = 0

# Default rules
DEFAULT_MAXIMUM_GROUP_SIZE = 5

# BY_RANK tolerances: rank sums within 90 inclusive, head counts within 2
RANK_SPREAD = 90
RANK_COUNT_SPREAD = 2

# BY_NUMBER tolerance: head counts within 1
NUMBER_COUNT_SPREAD = 1

DATASET_SCHEMA = "roster-dataset/v1"


class Policy(str, Enum):
    """
    Arrangement policies.

    For all policies, excluded members must not be moved from their
    original rosters (BY_GROUP may still change their group ids).
    """

    BY_NUMBER = "BY_NUMBER"  # Head counts differ by at most 1
    BY_RANK = "BY_RANK"  # Rank sums within 90, head counts within 2
    BY_GROUP = "BY_GROUP"  # Even groups left, odd groups right


class Status(str, Enum):
    """Outcome of an arrangement. Reported, never raised."""

    SUCCESS = "SUCCESS"
    ALREADY_ARRANGED = "ALREADY_ARRANGED"  # Nothing changed
    TOO_MANY_EXCLUSIONS = "TOO_MANY_EXCLUSIONS"
    # No split within the rank spread exists even with every member free,
    # e.g. five members of rank 1 against one of rank 100.
    RANKS_TOO_LOPSIDED = "RANKS_TOO_LOPSIDED"


class GroupParity(str, Enum):
    """Parity of a group number."""

    EVEN = "even"
    ODD = "odd"


class ErrorMessages:
    """Standardized error messages."""

    INVALID_NAME = "Invalid name: {name!r}. Names must be non-empty strings."
    DUPLICATE_NAME = "Entity '{name}' already exists."
    INVALID_RANK = "Invalid rank for '{name}': {rank}. Must be between 1 and 100."
    INVALID_GROUP = "Invalid group: {group}. Must be 0 or greater."
    ENTITY_NOT_FOUND = "Entity '{name}' not found."
    HANDLE_NOT_FOUND = "No entity at handle {handle}."
    DUPLICATE_MEMBER = "'{name}' is already in the roster."
    MEMBER_NOT_FOUND = "'{name}' is not in the roster."
    INVALID_MAXIMUM_GROUP_SIZE = "Invalid maximum group size: {size}. Must be 0 or greater."
    EMPTY_ROSTER = "The {side} roster is empty."
    MIXED_STORES = "Both rosters must use the same entity store."
    READ_ONLY_RULES = "NO_RULES is read-only."
