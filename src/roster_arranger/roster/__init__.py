"""
Rosters - ordered member lists that own group renumbering.
"""

from roster_arranger.roster.roster import Roster, group_parity

__all__ = [
    "Roster",
    "group_parity",
]
