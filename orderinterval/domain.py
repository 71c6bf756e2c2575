"""
orderinterval.domain

Stepping through a domain one value at a time.

A `Successible` knows the next value, a `Predecessible` the previous one.
Both answer None at the edge of the domain, which is how enumeration
knows when to stop.

It is recommended to import this module qualified

from orderinterval import domain

"""

import datetime
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Iterator, Optional

from orderinterval.ordering import NATURAL, Ordering


class Successible[T](ABC):
    @abstractmethod
    def next(self, old: T) -> Optional[T]:
        """The smallest value greater than old, None if there is none"""
        ...

    @property
    @abstractmethod
    def ordering(self) -> Ordering[T]: ...

    def iterate_next(self, old: T) -> Iterator[T]:
        """All values from old upwards, old included"""
        current: Optional[T] = old
        while current is not None:
            yield current
            current = self.next(current)


class Predecessible[T](ABC):
    @abstractmethod
    def prev(self, old: T) -> Optional[T]:
        """The greatest value less than old, None if there is none"""
        ...

    @property
    @abstractmethod
    def ordering(self) -> Ordering[T]: ...

    def iterate_prev(self, old: T) -> Iterator[T]:
        """All values from old downwards, old included"""
        current: Optional[T] = old
        while current is not None:
            yield current
            current = self.prev(current)


@dataclass(frozen=True)
class IntegralDomain(Successible[int], Predecessible[int]):
    """
    The integers, optionally cut to [min_value, max_value] like a fixed
    width machine integer.
    """

    min_value: Optional[int] = None
    max_value: Optional[int] = None

    @property
    def ordering(self) -> Ordering[int]:
        return NATURAL

    def next(self, old: int) -> Optional[int]:
        if self.max_value is not None and old >= self.max_value:
            return None
        return old + 1

    def prev(self, old: int) -> Optional[int]:
        if self.min_value is not None and old <= self.min_value:
            return None
        return old - 1

    @classmethod
    def signed(cls, bits: int) -> "IntegralDomain":
        return cls(-(2 ** (bits - 1)), 2 ** (bits - 1) - 1)


@dataclass(frozen=True)
class DateDomain(Successible[datetime.date], Predecessible[datetime.date]):
    """Calendar days"""

    @property
    def ordering(self) -> Ordering[datetime.date]:
        return NATURAL

    def next(self, old: datetime.date) -> Optional[datetime.date]:
        if old >= datetime.date.max:
            return None
        return old + datetime.timedelta(days=1)

    def prev(self, old: datetime.date) -> Optional[datetime.date]:
        if old <= datetime.date.min:
            return None
        return old - datetime.timedelta(days=1)


INTEGERS = IntegralDomain()
INT32 = IntegralDomain.signed(32)
INT64 = IntegralDomain.signed(64)
DATES = DateDomain()
