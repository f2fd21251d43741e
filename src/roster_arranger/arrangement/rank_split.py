"""
Rank split solver - picks which free members join the left roster.

The left roster must receive a subset of the free members whose rank
sum and head count both fall inside a window. The window is derived
from the whole population so that, once reserved (excluded) members
are added back, the two rosters' rank sums differ by at most 90 and
their sizes by at most 2.

The solver is a 0/1 knapsack over (rank sum, head count) states. Each
state remembers the first member that reached it, which is enough to
walk back to one concrete subset. Sums are scanned ascending, then
counts ascending, and the first reachable state wins. No attempt is
made to minimize either gap.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from roster_arranger.constants import RANK_COUNT_SPREAD, RANK_SPREAD

logger = logging.getLogger(__name__)

# Marks the empty subset in the state table
_START = -1


@dataclass(frozen=True)
class Candidate:
    """A free member: may be placed on either side."""

    name: str
    rank: int


@dataclass(frozen=True)
class SplitWindow:
    """Bounds on the left roster's share of the free members (inclusive)."""

    min_rank: int
    max_rank: int
    min_count: int
    max_count: int

    def is_reachable(self, free_rank: int, free_count: int) -> bool:
        """Whether any subset of the free members could land in the window."""
        if self.max_rank < 0 or self.min_rank > free_rank or self.min_rank > self.max_rank:
            return False
        if self.max_count < 0 or self.min_count > free_count or self.min_count > self.max_count:
            return False
        return True

    def __str__(self) -> str:
        return (
            f"rank [{self.min_rank}, {self.max_rank}], "
            f"count [{self.min_count}, {self.max_count}]"
        )


def compute_window(
    total_rank: int,
    total_count: int,
    reserved_rank: int,
    reserved_count: int,
    rank_spread: int = RANK_SPREAD,
    count_spread: int = RANK_COUNT_SPREAD,
) -> SplitWindow:
    """
    Compute the window for the left roster's share of the free members.

    The left roster ends with L = reserved_rank + x. Requiring
    |L - (total_rank - L)| <= rank_spread gives
    ceil((total_rank - spread) / 2) <= L <= floor((total_rank + spread) / 2).
    Head counts are bounded the same way.

    Args:
        total_rank: Rank sum of every member on both sides
        total_count: Number of members on both sides
        reserved_rank: Rank sum of members pinned to the left
        reserved_count: Number of members pinned to the left
        rank_spread: Allowed rank sum difference
        count_spread: Allowed head count difference

    Returns:
        The window for the free subset that joins the left roster
    """
    return SplitWindow(
        min_rank=(total_rank - rank_spread + 1) // 2 - reserved_rank,
        max_rank=(total_rank + rank_spread) // 2 - reserved_rank,
        min_count=(total_count - count_spread + 1) // 2 - reserved_count,
        max_count=(total_count + count_spread) // 2 - reserved_count,
    )


def find_subset(candidates: list[Candidate], window: SplitWindow) -> list[str] | None:
    """
    Find a subset of candidates whose rank sum and size fit the window.

    Args:
        candidates: Free members, in the order they were collected
        window: Inclusive bounds for the subset

    Returns:
        Names of the chosen candidates in candidate order (possibly empty),
        or None if no subset fits
    """
    low_rank = max(window.min_rank, 0)
    high_rank = window.max_rank
    low_count = max(window.min_count, 0)
    high_count = min(window.max_count, len(candidates))
    if high_rank < low_rank or high_count < low_count:
        return None

    # reached[rank_sum][count] = index of the candidate that first reached the state
    reached: list[dict[int, int]] = [{} for _ in range(high_rank + 1)]
    reached[0][0] = _START

    for index, candidate in enumerate(candidates):
        # Descending so each candidate extends only states reached before it
        for rank_sum in range(high_rank - candidate.rank, -1, -1):
            target = reached[rank_sum + candidate.rank]
            for count in list(reached[rank_sum]):
                if count + 1 <= high_count and count + 1 not in target:
                    target[count + 1] = index

    for rank_sum in range(low_rank, high_rank + 1):
        for count in range(low_count, high_count + 1):
            if count in reached[rank_sum]:
                logger.debug(f"Rank split found: sum {rank_sum}, count {count}")
                return _walk_back(candidates, reached, rank_sum, count)

    return None


def _walk_back(
    candidates: list[Candidate],
    reached: list[dict[int, int]],
    rank_sum: int,
    count: int,
) -> list[str]:
    """Rebuild the subset that first reached a state."""
    chosen: list[str] = []
    while count > 0:
        candidate = candidates[reached[rank_sum][count]]
        chosen.append(candidate.name)
        rank_sum -= candidate.rank
        count -= 1
    chosen.reverse()
    return chosen
