"""
Exceptions raised by the roster arrangement system.

Construction and validation failures are ValueErrors, structural lookup
failures are LookupErrors. Policy outcomes are Status values, not errors.
"""

from __future__ import annotations


class RosterError(Exception):
    """Base class for all roster arrangement errors."""


class InvalidNameError(RosterError, ValueError):
    """Entity name is empty or not a string."""


class DuplicateNameError(RosterError, ValueError):
    """An entity with this name already exists in the store."""


class InvalidRankError(RosterError, ValueError):
    """Rank outside 1..100."""


class InvalidGroupError(RosterError, ValueError):
    """Group number below 0."""


class InvalidConstraintError(RosterError, ValueError):
    """Rules cannot be enforced (negative maximum group size)."""


class InvalidArgumentError(RosterError, ValueError):
    """Bad enforcer input, such as an empty roster."""


class DuplicateMemberError(RosterError, ValueError):
    """Name is already a member of the roster."""


class EntityNotFoundError(RosterError, LookupError):
    """The store holds no entity with this name or handle."""


class MemberNotFoundError(RosterError, LookupError):
    """Name is not a member of the roster."""
