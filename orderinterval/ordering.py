"""
orderinterval.ordering

A total order over a domain, as a value that can be passed around.

Everything is derived from a single three-way `compare`.

"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable


class Ordering[T](ABC):
    """A total order on T"""

    @abstractmethod
    def compare(self, x: T, y: T) -> int: ...

    def lt(self, x: T, y: T) -> bool:
        return self.compare(x, y) < 0

    def lteq(self, x: T, y: T) -> bool:
        return self.compare(x, y) <= 0

    def gt(self, x: T, y: T) -> bool:
        return self.compare(x, y) > 0

    def gteq(self, x: T, y: T) -> bool:
        return self.compare(x, y) >= 0

    def equiv(self, x: T, y: T) -> bool:
        return self.compare(x, y) == 0

    def max(self, x: T, y: T) -> T:
        return y if self.lt(x, y) else x

    def min(self, x: T, y: T) -> T:
        return x if self.lteq(x, y) else y

    def reverse(self) -> "Ordering[T]":
        return Reversed(self)

    @staticmethod
    def natural() -> "Ordering[Any]":
        return NATURAL

    @staticmethod
    def by[K](key: Callable[[T], K]) -> "Ordering[T]":
        """Order values by comparing key(value) naturally"""
        return KeyOrdering(key)


class NaturalOrdering(Ordering[Any]):
    """The order given by the values' own comparison operators"""

    def compare(self, x, y) -> int:
        return (x > y) - (x < y)

    def __repr__(self) -> str:
        return "Ordering.natural()"


@dataclass(frozen=True)
class KeyOrdering[T, K](Ordering[T]):
    key: Callable[[T], K]

    def compare(self, x: T, y: T) -> int:
        kx, ky = self.key(x), self.key(y)
        return (kx > ky) - (kx < ky)


@dataclass(frozen=True)
class Reversed[T](Ordering[T]):
    underlying: Ordering[T]

    def compare(self, x: T, y: T) -> int:
        return self.underlying.compare(y, x)

    def reverse(self) -> Ordering[T]:
        return self.underlying


NATURAL = NaturalOrdering()
