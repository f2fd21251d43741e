"""
Entity registry - the store that rosters resolve member names through.
"""

from roster_arranger.registry.store import EntityStore

__all__ = [
    "EntityStore",
]
