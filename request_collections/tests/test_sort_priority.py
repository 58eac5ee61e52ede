"""
Tests for fractional sort priorities used when duplicating records.

Uses lightweight stand-ins for the ORM models: the functions under test
only read ``id`` and ``sort_priority``.
"""

import math
from dataclasses import dataclass

from hypothesis import given, settings
from hypothesis import strategies as st

from request_collections.services.sort_priority import (
    DUPLICATE_GAP,
    MISSING_ANCHOR_OFFSET,
    compare_priorities,
    priority_after,
    sort_by_priority,
)


@dataclass
class FakeRequest:
    """Minimal stand-in for a request model."""
    id: str
    sort_priority: float


def _siblings(*priorities: float) -> list[FakeRequest]:
    return [FakeRequest(id=f"rq_{i}", sort_priority=p) for i, p in enumerate(priorities)]


class TestComparePriorities:

    def test_orders_numbers(self):
        assert compare_priorities(1.0, 2.0) == -1
        assert compare_priorities(2.0, 1.0) == 1
        assert compare_priorities(2.0, 2.0) == 0

    def test_nan_compares_equal(self):
        assert compare_priorities(math.nan, 1.0) == 0
        assert compare_priorities(1.0, math.nan) == 0
        assert compare_priorities(math.nan, math.nan) == 0


class TestSortByPriority:

    def test_sorts_ascending(self):
        siblings = _siblings(3.0, 1.0, 2.0)
        assert [s.sort_priority for s in sort_by_priority(siblings)] == [1.0, 2.0, 3.0]

    def test_equal_priorities_keep_original_order(self):
        siblings = _siblings(5.0, 5.0, 5.0)
        assert [s.id for s in sort_by_priority(siblings)] == ["rq_0", "rq_1", "rq_2"]

    def test_all_nan_keeps_original_order(self):
        siblings = _siblings(math.nan, math.nan, math.nan)
        assert [s.id for s in sort_by_priority(siblings)] == ["rq_0", "rq_1", "rq_2"]

    def test_mixed_nan_never_raises(self):
        siblings = _siblings(2.0, math.nan, 1.0, math.nan, 0.0)
        result = sort_by_priority(siblings)
        assert sorted(s.id for s in result) == sorted(s.id for s in siblings)

    def test_does_not_modify_input(self):
        siblings = _siblings(3.0, 1.0)
        sort_by_priority(siblings)
        assert [s.sort_priority for s in siblings] == [3.0, 1.0]


class TestPriorityAfter:

    def test_last_sibling_gets_large_gap(self):
        siblings = _siblings(0.0, 1000.0, 2000.0)
        assert priority_after(siblings[2], siblings) == 2000.0 + DUPLICATE_GAP

    def test_only_sibling_gets_large_gap(self):
        siblings = _siblings(42.0)
        assert priority_after(siblings[0], siblings) == 1042.0

    def test_midpoint_with_next_sibling(self):
        siblings = _siblings(0.0, 1000.0, 2000.0)
        result = priority_after(siblings[1], siblings)
        assert result == 1500.0
        assert 1000.0 < result < 2000.0

    def test_uses_sorted_order_not_list_order(self):
        siblings = _siblings(2000.0, 0.0, 1000.0)
        assert priority_after(siblings[1], siblings) == 500.0

    def test_missing_anchor_gets_small_offset(self):
        siblings = _siblings(0.0, 1000.0)
        stray = FakeRequest(id="rq_stray", sort_priority=10.0)
        assert priority_after(stray, siblings) == 10.0 + MISSING_ANCHOR_OFFSET

    def test_nan_sibling_does_not_raise(self):
        siblings = _siblings(1.0, math.nan, 3.0)
        priority_after(siblings[0], siblings)

    def test_exhausted_gap_still_returns_a_value(self):
        low = 1.0
        high = math.nextafter(low, 2.0)
        siblings = _siblings(low, high)
        result = priority_after(siblings[0], siblings)
        assert low <= result <= high

    def test_repeated_insertion_stays_before_next_sibling(self):
        siblings = _siblings(1.0, 2.0)
        anchor, following = siblings
        inserted = []
        for n in range(20):
            priority = priority_after(anchor, siblings)
            copy = FakeRequest(id=f"rq_copy_{n}", sort_priority=priority)
            siblings.append(copy)
            inserted.append(priority)

        assert len(set(inserted)) == len(inserted)
        assert all(anchor.sort_priority < p < following.sort_priority for p in inserted)
        # Each copy lands between the anchor and the previous copy
        assert inserted == sorted(inserted, reverse=True)


@given(
    priorities=st.lists(
        st.integers(min_value=-1_000_000, max_value=1_000_000),
        min_size=1,
        max_size=30,
        unique=True,
    ),
    data=st.data(),
)
@settings(max_examples=100, deadline=None)
def test_new_priority_falls_directly_after_anchor(priorities, data):
    """
    Property: the computed priority is greater than the anchor's and smaller
    than every sibling that came after the anchor.
    """
    siblings = _siblings(*[float(p) for p in priorities])
    anchor = data.draw(st.sampled_from(siblings))

    result = priority_after(anchor, siblings)

    assert result > anchor.sort_priority
    later = [s.sort_priority for s in siblings if s.sort_priority > anchor.sort_priority]
    if later:
        assert result < min(later)
        assert result == (anchor.sort_priority + min(later)) / 2.0
    else:
        assert result == anchor.sort_priority + DUPLICATE_GAP
