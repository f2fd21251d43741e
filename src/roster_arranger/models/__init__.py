"""
Pydantic models for the roster system.

This module provides:
- Entity: Named member with rank and group
- Rules: Maximum group size and excluded names
- NO_RULES: The read-only "no constraints" instance
"""

from roster_arranger.models.entity import Entity
from roster_arranger.models.rules import NO_RULES, Rules

__all__ = [
    "NO_RULES",
    "Entity",
    "Rules",
]
