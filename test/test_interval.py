"""
Tests for the interval variants, the intersection rules and walking
through the contained values.
"""

import datetime
import itertools

import pytest

from orderinterval import (
    DATES,
    INT32,
    INTEGERS,
    Empty,
    ExclusiveLower,
    ExclusiveUpper,
    InclusiveLower,
    InclusiveUpper,
    IntegralDomain,
    Intersection,
    NotSoEmpty,
    Ordering,
    SoEmpty,
    Universe,
    left_closed_right_open,
    left_open_right_closed,
)


class TestContains:
    def test_universe_and_empty(self):
        for t in (-(10**9), 0, 10**9):
            assert Universe().contains(t)
            assert not Empty().contains(t)

    def test_single_bounds(self):
        assert InclusiveLower(3).contains(3)
        assert not InclusiveLower(3).contains(2)
        assert not ExclusiveLower(3).contains(3)
        assert ExclusiveLower(3).contains(4)
        assert InclusiveUpper(3).contains(3)
        assert not InclusiveUpper(3).contains(4)
        assert not ExclusiveUpper(3).contains(3)
        assert ExclusiveUpper(3).contains(2)

    def test_intersection(self):
        i = Intersection(InclusiveLower(3), ExclusiveUpper(7))
        assert [t for t in range(0, 10) if i.contains(t)] == [3, 4, 5, 6]

    def test_in_operator(self):
        assert 5 in InclusiveLower(3)
        assert 2 not in InclusiveLower(3)

    def test_explicit_ordering(self):
        backwards = Ordering.natural().reverse()
        # under the reversed order, "at least 5" means "at most 5"
        assert InclusiveLower(5).contains(3, backwards)
        assert not InclusiveLower(5).contains(6, backwards)

    def test_key_ordering(self):
        by_length = Ordering.by(len)
        assert ExclusiveUpper("abc").contains("zz", by_length)
        assert not ExclusiveUpper("abc").contains("aaa", by_length)


class TestIntersectBounds:
    """The three primitive rule families"""

    def test_lower_lower_keeps_the_larger(self):
        assert InclusiveLower(3) & InclusiveLower(5) == InclusiveLower(5)
        assert InclusiveLower(5) & InclusiveLower(3) == InclusiveLower(5)
        assert ExclusiveLower(3) & InclusiveLower(4) == InclusiveLower(4)
        assert InclusiveLower(4) & ExclusiveLower(3) == InclusiveLower(4)

    def test_lower_lower_tie_prefers_exclusive(self):
        assert InclusiveLower(5) & ExclusiveLower(5) == ExclusiveLower(5)
        assert ExclusiveLower(5) & InclusiveLower(5) == ExclusiveLower(5)

    def test_upper_upper_keeps_the_smaller(self):
        assert InclusiveUpper(3) & InclusiveUpper(5) == InclusiveUpper(3)
        assert InclusiveUpper(5) & ExclusiveUpper(3) == ExclusiveUpper(3)
        assert ExclusiveUpper(3) & InclusiveUpper(5) == ExclusiveUpper(3)

    def test_upper_upper_tie_prefers_exclusive(self):
        assert InclusiveUpper(5) & ExclusiveUpper(5) == ExclusiveUpper(5)
        assert ExclusiveUpper(5) & InclusiveUpper(5) == ExclusiveUpper(5)

    def test_lower_upper_overlapping(self):
        expected = Intersection(InclusiveLower(3), ExclusiveUpper(7))
        assert InclusiveLower(3) & ExclusiveUpper(7) == expected
        assert ExclusiveUpper(7) & InclusiveLower(3) == expected

    @pytest.mark.parametrize(
        "lower, upper, overlaps",
        [
            (InclusiveLower(5), InclusiveUpper(5), True),
            (InclusiveLower(5), InclusiveUpper(4), False),
            (InclusiveLower(5), ExclusiveUpper(5), False),
            (InclusiveLower(5), ExclusiveUpper(6), True),
            (ExclusiveLower(5), InclusiveUpper(5), False),
            (ExclusiveLower(5), InclusiveUpper(6), True),
            (ExclusiveLower(5), ExclusiveUpper(5), False),
            (ExclusiveLower(5), ExclusiveUpper(6), True),
        ],
    )
    def test_intersects(self, lower, upper, overlaps):
        assert lower.intersects(upper) == overlaps
        if overlaps:
            assert lower & upper == Intersection(lower, upper)
            assert upper & lower == Intersection(lower, upper)
        else:
            assert lower & upper == Empty()
            assert upper & lower == Empty()

    def test_degenerate_collapse(self):
        i = InclusiveLower(5) & InclusiveUpper(4)
        assert i == Empty()
        assert not any(i.contains(t) for t in range(-10, 10))

    def test_adjacent_exclusive_bounds_are_a_false_positive(self):
        i = ExclusiveLower(5) & ExclusiveUpper(6)
        assert isinstance(i, Intersection)
        assert not any(i.contains(t) for t in range(0, 10))
        assert list(i.least_to_greatest(INTEGERS)) == []

    def test_pathological_bound_at_domain_maximum(self):
        top = INT32.max_value
        assert InclusiveLower(top) & ExclusiveUpper(top) == Empty()


class TestIntersectComposite:
    def test_universe_is_identity(self):
        i = InclusiveLower(3) & ExclusiveUpper(7)
        assert Universe() & i == i
        assert i & Universe() == i
        assert Universe() & Universe() == Universe()

    def test_empty_absorbs(self):
        i = InclusiveLower(3) & ExclusiveUpper(7)
        assert Empty() & i == Empty()
        assert i & Empty() == Empty()
        assert Universe() & Empty() == Empty()

    def test_intersection_and_lower(self):
        i = InclusiveLower(3) & ExclusiveUpper(7)
        assert i & InclusiveLower(5) == Intersection(InclusiveLower(5), ExclusiveUpper(7))
        assert InclusiveLower(5) & i == Intersection(InclusiveLower(5), ExclusiveUpper(7))
        assert i & InclusiveLower(1) == i
        assert i & ExclusiveLower(7) == Empty()

    def test_intersection_and_upper(self):
        i = InclusiveLower(3) & ExclusiveUpper(7)
        assert i & InclusiveUpper(5) == Intersection(InclusiveLower(3), InclusiveUpper(5))
        assert InclusiveUpper(5) & i == Intersection(InclusiveLower(3), InclusiveUpper(5))
        assert ExclusiveUpper(3) & i == Empty()

    def test_intersection_and_intersection(self):
        a = InclusiveLower(3) & ExclusiveUpper(7)
        b = ExclusiveLower(5) & InclusiveUpper(10)
        assert a & b == Intersection(ExclusiveLower(5), ExclusiveUpper(7))
        assert b & a == Intersection(ExclusiveLower(5), ExclusiveUpper(7))

    def test_disjoint_intersections(self):
        a = InclusiveLower(0) & ExclusiveUpper(3)
        b = InclusiveLower(3) & ExclusiveUpper(6)
        assert a & b == Empty()

    def test_explicit_ordering_is_used_throughout(self):
        backwards = Ordering.natural().reverse()
        # under the reversed order 7 comes before 3
        i = InclusiveLower(7).intersect(ExclusiveUpper(3), backwards)
        assert i == Intersection(InclusiveLower(7), ExclusiveUpper(3))
        assert [t for t in range(10) if i.contains(t, backwards)] == [4, 5, 6, 7]


class TestHalfOpen:
    def test_left_closed_right_open(self):
        r = left_closed_right_open(3, 7)
        assert r == NotSoEmpty(Intersection(InclusiveLower(3), ExclusiveUpper(7)))
        assert not r.is_empty
        assert r.to_interval() == r.get

    def test_left_open_right_closed(self):
        r = left_open_right_closed(3, 7)
        assert r == NotSoEmpty(Intersection(ExclusiveLower(3), InclusiveUpper(7)))
        assert [t for t in range(10) if r.get.contains(t)] == [4, 5, 6, 7]

    @pytest.mark.parametrize("constructor", [left_closed_right_open, left_open_right_closed])
    @pytest.mark.parametrize("lower, upper", [(3, 3), (4, 3)])
    def test_no_points(self, constructor, lower, upper):
        r = constructor(lower, upper)
        assert r == SoEmpty()
        assert r.is_empty
        assert r.to_interval() == Empty()

    def test_ordering_decides(self):
        backwards = Ordering.natural().reverse()
        assert not left_closed_right_open(7, 3, backwards).is_empty
        assert left_closed_right_open(3, 7, backwards).is_empty


class TestTraversal:
    def test_least(self):
        assert InclusiveLower(3).least(INTEGERS) == 3
        assert ExclusiveLower(3).least(INTEGERS) == 4
        assert ExclusiveLower(INT32.max_value).least(INT32) is None

    def test_greatest(self):
        assert InclusiveUpper(3).greatest(INTEGERS) == 3
        assert ExclusiveUpper(3).greatest(INTEGERS) == 2
        assert ExclusiveUpper(INT32.min_value).greatest(INT32) is None

    def test_strict_bounds(self):
        assert InclusiveLower(3).strict_lower_bound(INTEGERS) == 2
        assert ExclusiveLower(3).strict_lower_bound(INTEGERS) == 3
        assert InclusiveLower(INT32.min_value).strict_lower_bound(INT32) is None
        assert InclusiveUpper(3).strict_upper_bound(INTEGERS) == 4
        assert ExclusiveUpper(3).strict_upper_bound(INTEGERS) == 3
        assert InclusiveUpper(INT32.max_value).strict_upper_bound(INT32) is None

    def test_lower_is_walked_lazily(self):
        values = InclusiveLower(10).to_iterable(INTEGERS)
        assert list(itertools.islice(values, 3)) == [10, 11, 12]

    def test_upper_is_walked_downwards(self):
        values = ExclusiveUpper(10).to_iterable(INTEGERS)
        assert list(itertools.islice(values, 3)) == [9, 8, 7]

    def test_pathological_bounds_walk_nothing(self):
        assert list(ExclusiveLower(INT32.max_value).to_iterable(INT32)) == []
        assert list(ExclusiveUpper(INT32.min_value).to_iterable(INT32)) == []

    def test_least_to_greatest(self):
        i = InclusiveLower(3) & ExclusiveUpper(7)
        assert list(i.least_to_greatest(INTEGERS)) == [3, 4, 5, 6]

    def test_greatest_to_least(self):
        i = ExclusiveLower(3) & InclusiveUpper(7)
        assert list(i.greatest_to_least(INTEGERS)) == [7, 6, 5, 4]

    def test_traversal_restarts(self):
        values = (InclusiveLower(3) & ExclusiveUpper(7)).least_to_greatest(INTEGERS)
        assert list(values) == list(values) == [3, 4, 5, 6]

    def test_stops_at_domain_maximum(self):
        top = INT32.max_value
        i = InclusiveLower(top - 2) & InclusiveUpper(top)
        assert list(i.least_to_greatest(INT32)) == [top - 2, top - 1, top]

    def test_stops_at_domain_minimum(self):
        bottom = INT32.min_value
        i = InclusiveLower(bottom) & ExclusiveUpper(bottom + 2)
        assert list(i.greatest_to_least(INT32)) == [bottom + 1, bottom]

    def test_far_away_bound_does_not_scan_the_domain(self):
        i = InclusiveLower(0) & ExclusiveUpper(10)
        assert len(list(i.least_to_greatest(INTEGERS))) == 10
        i = InclusiveLower(-(10**18)) & InclusiveUpper(10**18)
        assert list(itertools.islice(i.least_to_greatest(INTEGERS), 2)) == [-(10**18), -(10**18) + 1]

    @pytest.mark.slow
    def test_walks_a_whole_fixed_width_domain(self):
        steps = IntegralDomain.signed(16)
        i = InclusiveLower(steps.min_value) & InclusiveUpper(steps.max_value)
        upwards = list(i.least_to_greatest(steps))
        assert upwards == list(range(-(2**15), 2**15))
        assert list(i.greatest_to_least(steps)) == upwards[::-1]

    def test_dates(self):
        i = InclusiveLower(datetime.date(2024, 2, 27)) & ExclusiveUpper(datetime.date(2024, 3, 2))
        assert list(i.least_to_greatest(DATES)) == [
            datetime.date(2024, 2, 27),
            datetime.date(2024, 2, 28),
            datetime.date(2024, 2, 29),
            datetime.date(2024, 3, 1),
        ]


class TestToLeftClosedRightOpen:
    def test_normalizes(self):
        i = ExclusiveLower(3) & InclusiveUpper(7)
        assert i.to_left_closed_right_open(INTEGERS) == Intersection(InclusiveLower(4), ExclusiveUpper(8))

    def test_already_normal(self):
        i = InclusiveLower(3) & ExclusiveUpper(7)
        assert i.to_left_closed_right_open(INTEGERS) == i

    def test_adjacent_exclusive_bounds(self):
        i = ExclusiveLower(3) & ExclusiveUpper(4)
        assert i.to_left_closed_right_open(INTEGERS) is None

    def test_upper_bound_at_domain_maximum(self):
        i = InclusiveLower(0) & InclusiveUpper(INT32.max_value)
        assert i.to_left_closed_right_open(INT32) is None


class TestMapNonDecreasing:
    def test_maps_every_bound(self):
        i = InclusiveLower(1) & ExclusiveUpper(3)
        assert i.map_non_decreasing(lambda x: x * 10) == Intersection(
            InclusiveLower(10), ExclusiveUpper(30)
        )
        assert ExclusiveLower(2).map_non_decreasing(str) == ExclusiveLower("2")
        assert InclusiveUpper(2).map_non_decreasing(lambda x: x + 1) == InclusiveUpper(3)

    def test_universe_and_empty_are_fixed(self):
        assert Universe().map_non_decreasing(abs) == Universe()
        assert Empty().map_non_decreasing(abs) == Empty()

    def test_days_to_dates(self):
        epoch = datetime.date(2024, 1, 1)
        days = InclusiveLower(0) & ExclusiveUpper(31)
        january = days.map_non_decreasing(lambda n: epoch + datetime.timedelta(days=n))
        assert january.contains(datetime.date(2024, 1, 31))
        assert not january.contains(datetime.date(2024, 2, 1))


class TestValues:
    def test_structural_equality(self):
        assert Universe() == Universe()
        assert Empty() == Empty()
        assert Universe() != Empty()
        assert InclusiveLower(3) != ExclusiveLower(3)
        assert InclusiveLower(3) != InclusiveUpper(3)

    def test_hashable(self):
        seen = {InclusiveLower(3), InclusiveLower(3), InclusiveLower(3) & ExclusiveUpper(7)}
        assert len(seen) == 2

    def test_immutable(self):
        with pytest.raises(AttributeError):
            InclusiveLower(3).lower = 4

    @pytest.mark.parametrize(
        "interval, text",
        [
            (Universe(), "(-inf, inf)"),
            (Empty(), "{}"),
            (InclusiveLower(3), "[3, inf)"),
            (ExclusiveLower(3), "(3, inf)"),
            (InclusiveUpper(7), "(-inf, 7]"),
            (ExclusiveUpper(7), "(-inf, 7)"),
            (Intersection(ExclusiveLower(3), InclusiveUpper(7)), "(3, 7]"),
        ],
    )
    def test_math(self, interval, text):
        assert str(interval) == text
