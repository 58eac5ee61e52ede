"""
Fractional sort priorities for placing a record right after another one.

Siblings are ordered by ascending ``sort_priority``. Instead of renumbering
every sibling, a new record is given a priority inside the gap that follows
its anchor: the midpoint to the next sibling, or a fixed step past the end.
"""

import logging
from functools import cmp_to_key
from typing import Protocol, Sequence, TypeVar

logger = logging.getLogger(__name__)

# Step used when the anchor is the last sibling
DUPLICATE_GAP = 1000.0

# Step used when the anchor is missing from its own sibling list
MISSING_ANCHOR_OFFSET = 0.001


class Sortable(Protocol):
    id: str
    sort_priority: float


SortableT = TypeVar("SortableT", bound=Sortable)


def compare_priorities(a: float, b: float) -> int:
    """Three-way comparison where NaN compares equal to everything."""
    if a < b:
        return -1
    if a > b:
        return 1
    return 0


def sort_by_priority(records: Sequence[SortableT]) -> list[SortableT]:
    """
    Return records sorted by ascending sort_priority.

    The sort is stable: records whose priorities are equal or incomparable
    keep their original relative order. Never raises on NaN.
    """
    return sorted(
        records,
        key=cmp_to_key(lambda a, b: compare_priorities(a.sort_priority, b.sort_priority)),
    )


def priority_after(anchor: Sortable, siblings: Sequence[Sortable]) -> float:
    """
    Compute a sort priority that places a new record directly after ``anchor``.

    Args:
        anchor: The record the new one should follow.
        siblings: Every record sharing the anchor's parent, anchor included.

    Returns:
        The midpoint between the anchor and the next sibling; the anchor's
        priority plus DUPLICATE_GAP if it is last; or plus
        MISSING_ANCHOR_OFFSET if the anchor is not among its siblings.
    """
    ordered = sort_by_priority(siblings)
    index = next((i for i, s in enumerate(ordered) if s.id == anchor.id), None)

    if index is None:
        logger.warning(
            "Record %s missing from its sibling list, placing after it by %s",
            anchor.id, MISSING_ANCHOR_OFFSET,
        )
        return anchor.sort_priority + MISSING_ANCHOR_OFFSET

    if index + 1 >= len(ordered):
        return anchor.sort_priority + DUPLICATE_GAP

    next_priority = ordered[index + 1].sort_priority
    priority = (anchor.sort_priority + next_priority) / 2.0
    if not anchor.sort_priority < priority < next_priority:
        # TODO: renumber the sibling group once the gap can no longer be split
        logger.warning(
            "No free sort priority between %r and %r after %s",
            anchor.sort_priority, next_priority, anchor.id,
        )
    return priority
