"""
orderinterval.interval

A single interval over a totally ordered domain.

An interval is one of six values: `Universe`, `Empty`, one of the four
single bounds (`InclusiveLower`, `ExclusiveLower`, `InclusiveUpper`,
`ExclusiveUpper`), or an `Intersection` of exactly one lower and one upper
bound. Intervals are closed under `intersect`, and every value is
immutable.

The order is never looked up implicitly, operations that compare values
take an `Ordering` (the natural one by default). Walking the members of an
interval needs a `Successible` or `Predecessible` from
`orderinterval.domain`.

"""

import itertools
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable, Iterable, Iterator, Optional

from orderinterval.domain import Predecessible, Successible
from orderinterval.ordering import NATURAL, Ordering


@dataclass(frozen=True)
class Traversal[T](Iterable[T]):
    """A lazy sequence that starts over every time it is iterated"""

    start: Callable[[], Iterator[T]]

    def __iter__(self) -> Iterator[T]:
        return self.start()


class Interval[T](ABC):
    """A set of T expressible by bounds"""

    @abstractmethod
    def contains(self, t: T, ordering: Ordering[T] = NATURAL) -> bool: ...

    @abstractmethod
    def intersect(
        self, that: "Interval[T]", ordering: Ordering[T] = NATURAL
    ) -> "Interval[T]": ...

    @abstractmethod
    def map_non_decreasing[U](self, fn: Callable[[T], U]) -> "Interval[U]":
        """
        Map the bounds of the interval through fn.

        fn must be non-decreasing. A function like x**2 over negative
        and positive values gives a meaningless result, and nothing checks
        for it.
        """
        ...

    @abstractmethod
    def math(self) -> str: ...

    def __contains__(self, t: T) -> bool:
        return self.contains(t)

    def __and__(self, that: "Interval[T]") -> "Interval[T]":
        return self.intersect(that)

    def __str__(self) -> str:
        return self.math()


@dataclass(frozen=True)
class Universe[T](Interval[T]):
    def contains(self, t: T, ordering: Ordering[T] = NATURAL) -> bool:
        return True

    def intersect(self, that: Interval[T], ordering: Ordering[T] = NATURAL) -> Interval[T]:
        return that

    def map_non_decreasing[U](self, fn: Callable[[T], U]) -> Interval[U]:
        return Universe()

    def math(self) -> str:
        return "(-inf, inf)"


@dataclass(frozen=True)
class Empty[T](Interval[T]):
    def contains(self, t: T, ordering: Ordering[T] = NATURAL) -> bool:
        return False

    def intersect(self, that: Interval[T], ordering: Ordering[T] = NATURAL) -> Interval[T]:
        return self

    def map_non_decreasing[U](self, fn: Callable[[T], U]) -> Interval[U]:
        return Empty()

    def math(self) -> str:
        return "{}"


class Lower[T](Interval[T]):
    """A lower bound. Only InclusiveLower and ExclusiveLower are Lower."""

    @abstractmethod
    def intersects(self, u: "Upper[T]", ordering: Ordering[T] = NATURAL) -> bool:
        """
        Whether some value lies between this bound and u.

        This may give a false positive. ExclusiveLower(0) and
        ExclusiveUpper(1) intersect according to the order alone, but no
        integer lies strictly between 0 and 1. Telling the two apart needs a
        Successible, which an ordering does not provide.
        """
        ...

    @abstractmethod
    def least(self, s: Successible[T]) -> Optional[T]:
        """
        The smallest contained value.

        None for pathological bounds like ExclusiveLower(INT32.max_value),
        which contain nothing.
        """
        ...

    @abstractmethod
    def strict_lower_bound(self, p: Predecessible[T]) -> Optional[T]:
        """The greatest value that is not contained"""
        ...

    @abstractmethod
    def map_non_decreasing[U](self, fn: Callable[[T], U]) -> "Lower[U]": ...

    @abstractmethod
    def left_end(self) -> str: ...

    def to_iterable(self, s: Successible[T]) -> Iterable[T]:
        """All contained values from least to greatest"""

        def start() -> Iterator[T]:
            least = self.least(s)
            if least is None:
                return iter(())
            return s.iterate_next(least)

        return Traversal(start)

    def math(self) -> str:
        return f"{self.left_end()}, inf)"


class Upper[T](Interval[T]):
    """An upper bound. Only InclusiveUpper and ExclusiveUpper are Upper."""

    @abstractmethod
    def greatest(self, p: Predecessible[T]) -> Optional[T]:
        """
        The greatest contained value.

        None for pathological bounds like ExclusiveUpper(INT32.min_value),
        which contain nothing.
        """
        ...

    @abstractmethod
    def strict_upper_bound(self, s: Successible[T]) -> Optional[T]:
        """The smallest value that is not contained"""
        ...

    @abstractmethod
    def map_non_decreasing[U](self, fn: Callable[[T], U]) -> "Upper[U]": ...

    @abstractmethod
    def right_end(self) -> str: ...

    def to_iterable(self, p: Predecessible[T]) -> Iterable[T]:
        """All contained values from greatest to least"""

        def start() -> Iterator[T]:
            greatest = self.greatest(p)
            if greatest is None:
                return iter(())
            return p.iterate_prev(greatest)

        return Traversal(start)

    def math(self) -> str:
        return f"(-inf, {self.right_end()}"


@dataclass(frozen=True)
class InclusiveLower[T](Lower[T]):
    lower: T

    def contains(self, t: T, ordering: Ordering[T] = NATURAL) -> bool:
        return ordering.lteq(self.lower, t)

    def intersect(self, that: Interval[T], ordering: Ordering[T] = NATURAL) -> Interval[T]:
        match that:
            case Universe():
                return self
            case Empty():
                return that
            case InclusiveUpper() | ExclusiveUpper():
                return Intersection(self, that) if self.intersects(that, ordering) else Empty()
            case InclusiveLower(lower=thatlb) | ExclusiveLower(lower=thatlb):
                return self if ordering.gt(self.lower, thatlb) else that
            case Intersection(lower=thatl, upper=thatu):
                return self.intersect(thatl, ordering).intersect(thatu, ordering)
        raise TypeError(f"Not an interval: {that!r}")

    def intersects(self, u: "Upper[T]", ordering: Ordering[T] = NATURAL) -> bool:
        match u:
            case InclusiveUpper(upper=upper):
                return ordering.lteq(self.lower, upper)
            case ExclusiveUpper(upper=upper):
                return ordering.lt(self.lower, upper)
        raise TypeError(f"Not an upper bound: {u!r}")

    def least(self, s: Successible[T]) -> Optional[T]:
        return self.lower

    def strict_lower_bound(self, p: Predecessible[T]) -> Optional[T]:
        return p.prev(self.lower)

    def map_non_decreasing[U](self, fn: Callable[[T], U]) -> "InclusiveLower[U]":
        return InclusiveLower(fn(self.lower))

    def left_end(self) -> str:
        return f"[{self.lower}"


@dataclass(frozen=True)
class ExclusiveLower[T](Lower[T]):
    lower: T

    def contains(self, t: T, ordering: Ordering[T] = NATURAL) -> bool:
        return ordering.lt(self.lower, t)

    def intersect(self, that: Interval[T], ordering: Ordering[T] = NATURAL) -> Interval[T]:
        match that:
            case Universe():
                return self
            case Empty():
                return that
            case InclusiveUpper() | ExclusiveUpper():
                return Intersection(self, that) if self.intersects(that, ordering) else Empty()
            case InclusiveLower(lower=thatlb) | ExclusiveLower(lower=thatlb):
                # on a tie the exclusive bound is the tighter one, and that is us
                return self if ordering.gteq(self.lower, thatlb) else that
            case Intersection(lower=thatl, upper=thatu):
                return self.intersect(thatl, ordering).intersect(thatu, ordering)
        raise TypeError(f"Not an interval: {that!r}")

    def intersects(self, u: "Upper[T]", ordering: Ordering[T] = NATURAL) -> bool:
        match u:
            case InclusiveUpper(upper=upper):
                return ordering.lt(self.lower, upper)
            case ExclusiveUpper(upper=upper):
                # false positive for (x, next(x))
                return ordering.lt(self.lower, upper)
        raise TypeError(f"Not an upper bound: {u!r}")

    def least(self, s: Successible[T]) -> Optional[T]:
        return s.next(self.lower)

    def strict_lower_bound(self, p: Predecessible[T]) -> Optional[T]:
        return self.lower

    def map_non_decreasing[U](self, fn: Callable[[T], U]) -> "ExclusiveLower[U]":
        return ExclusiveLower(fn(self.lower))

    def left_end(self) -> str:
        return f"({self.lower}"


@dataclass(frozen=True)
class InclusiveUpper[T](Upper[T]):
    upper: T

    def contains(self, t: T, ordering: Ordering[T] = NATURAL) -> bool:
        return ordering.lteq(t, self.upper)

    def intersect(self, that: Interval[T], ordering: Ordering[T] = NATURAL) -> Interval[T]:
        match that:
            case Universe():
                return self
            case Empty():
                return that
            case InclusiveLower() | ExclusiveLower():
                return Intersection(that, self) if that.intersects(self, ordering) else Empty()
            case InclusiveUpper(upper=thatub) | ExclusiveUpper(upper=thatub):
                return self if ordering.lt(self.upper, thatub) else that
            case Intersection(lower=thatl, upper=thatu):
                return thatl.intersect(self.intersect(thatu, ordering), ordering)
        raise TypeError(f"Not an interval: {that!r}")

    def greatest(self, p: Predecessible[T]) -> Optional[T]:
        return self.upper

    def strict_upper_bound(self, s: Successible[T]) -> Optional[T]:
        return s.next(self.upper)

    def map_non_decreasing[U](self, fn: Callable[[T], U]) -> "InclusiveUpper[U]":
        return InclusiveUpper(fn(self.upper))

    def right_end(self) -> str:
        return f"{self.upper}]"


@dataclass(frozen=True)
class ExclusiveUpper[T](Upper[T]):
    upper: T

    def contains(self, t: T, ordering: Ordering[T] = NATURAL) -> bool:
        return ordering.lt(t, self.upper)

    def intersect(self, that: Interval[T], ordering: Ordering[T] = NATURAL) -> Interval[T]:
        match that:
            case Universe():
                return self
            case Empty():
                return that
            case InclusiveLower() | ExclusiveLower():
                return Intersection(that, self) if that.intersects(self, ordering) else Empty()
            case InclusiveUpper(upper=thatub) | ExclusiveUpper(upper=thatub):
                return self if ordering.lteq(self.upper, thatub) else that
            case Intersection(lower=thatl, upper=thatu):
                return thatl.intersect(self.intersect(thatu, ordering), ordering)
        raise TypeError(f"Not an interval: {that!r}")

    def greatest(self, p: Predecessible[T]) -> Optional[T]:
        return p.prev(self.upper)

    def strict_upper_bound(self, s: Successible[T]) -> Optional[T]:
        return self.upper

    def map_non_decreasing[U](self, fn: Callable[[T], U]) -> "ExclusiveUpper[U]":
        return ExclusiveUpper(fn(self.upper))

    def right_end(self) -> str:
        return f"{self.upper})"


@dataclass(frozen=True)
class Intersection[T](Interval[T]):
    """
    The values above `lower` and below `upper`.

    Only the four single bounds fit in here, never Universe, Empty or
    another Intersection. Build one through `intersect` unless the bounds
    are known to overlap, otherwise an empty range ends up stored as an
    Intersection.
    """

    lower: Lower[T]
    upper: Upper[T]

    def contains(self, t: T, ordering: Ordering[T] = NATURAL) -> bool:
        return self.lower.contains(t, ordering) and self.upper.contains(t, ordering)

    def intersect(self, that: Interval[T], ordering: Ordering[T] = NATURAL) -> Interval[T]:
        match that:
            case Universe():
                return self
            case Empty():
                return that
            case InclusiveLower() | ExclusiveLower():
                return that.intersect(self.lower, ordering).intersect(self.upper, ordering)
            case InclusiveUpper() | ExclusiveUpper():
                return self.lower.intersect(that.intersect(self.upper, ordering), ordering)
            case Intersection(lower=thatl, upper=thatu):
                return self.lower.intersect(thatl, ordering).intersect(
                    self.upper.intersect(thatu, ordering), ordering
                )
        raise TypeError(f"Not an interval: {that!r}")

    def map_non_decreasing[U](self, fn: Callable[[T], U]) -> "Intersection[U]":
        return Intersection(self.lower.map_non_decreasing(fn), self.upper.map_non_decreasing(fn))

    def math(self) -> str:
        return f"{self.lower.left_end()}, {self.upper.right_end()}"

    def least_to_greatest(self, s: Successible[T]) -> Iterable[T]:
        """All contained values, lowest first"""
        # must stop at the first value past the upper bound
        return Traversal(
            lambda: itertools.takewhile(
                lambda t: self.upper.contains(t, s.ordering), iter(self.lower.to_iterable(s))
            )
        )

    def greatest_to_least(self, p: Predecessible[T]) -> Iterable[T]:
        """All contained values, highest first"""
        return Traversal(
            lambda: itertools.takewhile(
                lambda t: self.lower.contains(t, p.ordering), iter(self.upper.to_iterable(p))
            )
        )

    def to_left_closed_right_open(self, s: Successible[T]) -> Optional["Intersection[T]"]:
        """
        The same set written as [least, strict upper bound).

        None does not mean the interval is empty or universal, just that it
        cannot be written this way. (0, 1) on the integers has no least
        element in range, [0, INT32.max_value] has no strict upper bound.
        """
        least = self.lower.least(s)
        bound = self.upper.strict_upper_bound(s)
        if least is None or bound is None or not s.ordering.lt(least, bound):
            return None
        return Intersection(InclusiveLower(least), ExclusiveUpper(bound))


class MaybeEmpty[T](ABC):
    """
    The result of a half-open constructor.

    `Empty()` would lose the fact that a non-empty result is always an
    Intersection, so the constructors say so with `SoEmpty` and
    `NotSoEmpty` instead.
    """

    @property
    @abstractmethod
    def is_empty(self) -> bool: ...

    @abstractmethod
    def to_interval(self) -> Interval[T]: ...


@dataclass(frozen=True)
class SoEmpty[T](MaybeEmpty[T]):
    @property
    def is_empty(self) -> bool:
        return True

    def to_interval(self) -> Interval[T]:
        return Empty()


@dataclass(frozen=True)
class NotSoEmpty[T](MaybeEmpty[T]):
    get: Intersection[T]

    @property
    def is_empty(self) -> bool:
        return False

    def to_interval(self) -> Interval[T]:
        return self.get


def left_closed_right_open[T](lower: T, upper: T, ordering: Ordering[T] = NATURAL) -> MaybeEmpty[T]:
    """[lower, upper)"""
    if ordering.lt(lower, upper):
        return NotSoEmpty(Intersection(InclusiveLower(lower), ExclusiveUpper(upper)))
    return SoEmpty()


def left_open_right_closed[T](lower: T, upper: T, ordering: Ordering[T] = NATURAL) -> MaybeEmpty[T]:
    """(lower, upper]"""
    if ordering.lt(lower, upper):
        return NotSoEmpty(Intersection(ExclusiveLower(lower), InclusiveUpper(upper)))
    return SoEmpty()

