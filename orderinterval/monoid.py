"""
orderinterval.monoid

Monoids, and intervals as a monoid under intersection.

"""

import functools
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Iterable, Optional

from orderinterval.interval import Interval, Universe
from orderinterval.ordering import NATURAL, Ordering


class Monoid[T](ABC):
    """An associative `plus` with an identity `zero`"""

    @property
    @abstractmethod
    def zero(self) -> T: ...

    @abstractmethod
    def plus(self, left: T, right: T) -> T: ...

    def is_non_zero(self, value: T) -> bool:
        return value != self.zero

    def sum(self, items: Iterable[T]) -> T:
        return functools.reduce(self.plus, items, self.zero)

    def sum_option(self, items: Iterable[T]) -> Optional[T]:
        """Like sum, but None when there is nothing to add"""
        iterator = iter(items)
        try:
            first = next(iterator)
        except StopIteration:
            return None
        return functools.reduce(self.plus, iterator, first)


@dataclass(frozen=True)
class IntervalMonoid[T](Monoid[Interval[T]]):
    ordering: Ordering[T] = field(default=NATURAL)

    @property
    def zero(self) -> Interval[T]:
        return Universe()

    def plus(self, left: Interval[T], right: Interval[T]) -> Interval[T]:
        return left.intersect(right, self.ordering)


def interval_monoid(ordering: Ordering[Any] = NATURAL) -> IntervalMonoid[Any]:
    return IntervalMonoid(ordering)
