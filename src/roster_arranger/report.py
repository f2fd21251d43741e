"""
Plain-text rendering of rosters, rules and arrangement results.
"""

from __future__ import annotations

from roster_arranger.constants import Policy, Status
from roster_arranger.models.rules import Rules
from roster_arranger.roster.roster import Roster

SEPARATOR = "-----"


def format_roster(title: str, roster: Roster) -> str:
    """
    Render a roster sorted by name, one numbered line per member.

    Sorting reorders the roster in place.
    """
    roster.sort_by_name()
    lines = [title]
    for number, entity in enumerate(roster.entities(), start=1):
        lines.append(f"{number}. Name: {entity.name}, Group: {entity.group}, Rank: {entity.rank}")
    return "\n".join(lines)


def format_rules(rules: Rules, excluded: list[str] | None = None) -> str:
    """Render the rules. Exclusions are listed in the given order, else sorted."""
    names = excluded if excluded is not None else sorted(rules.excluded_names)
    return "\n".join(
        [
            "RULES",
            f"Maximum group size: {rules.maximum_group_size}",
            f"Excluded: {', '.join(names)}",
        ]
    )


def format_rank_totals(left: Roster, right: Roster) -> str:
    """Render the rank sums of both rosters."""
    return f"Rank sum totals: [{left.rank_sum()}/{right.rank_sum()}]"


def format_result(policy: Policy, status: Status, left: Roster, right: Roster) -> str:
    """Render one arrangement: policy, status and both final rosters."""
    parts = [
        "",
        policy.value,
        f"Status: {status.value}",
        SEPARATOR,
        format_roster("LEFT", left),
        format_roster("RIGHT", right),
    ]
    if policy == Policy.BY_RANK:
        parts.append(format_rank_totals(left, right))
    return "\n".join(parts)
