"""
orderinterval

Intervals over a totally ordered domain, closed under intersection.

"""

from orderinterval.domain import (
    DATES,
    INT32,
    INT64,
    INTEGERS,
    DateDomain,
    IntegralDomain,
    Predecessible,
    Successible,
)
from orderinterval.interval import (
    Empty,
    ExclusiveLower,
    ExclusiveUpper,
    InclusiveLower,
    InclusiveUpper,
    Intersection,
    Interval,
    Lower,
    MaybeEmpty,
    NotSoEmpty,
    SoEmpty,
    Universe,
    Upper,
    left_closed_right_open,
    left_open_right_closed,
)
from orderinterval.monoid import IntervalMonoid, Monoid, interval_monoid
from orderinterval.ordering import NATURAL, Ordering
from orderinterval.parser import parse

__all__ = [
    "DATES",
    "INT32",
    "INT64",
    "INTEGERS",
    "NATURAL",
    "DateDomain",
    "Empty",
    "ExclusiveLower",
    "ExclusiveUpper",
    "InclusiveLower",
    "InclusiveUpper",
    "IntegralDomain",
    "Intersection",
    "Interval",
    "IntervalMonoid",
    "Lower",
    "MaybeEmpty",
    "Monoid",
    "NotSoEmpty",
    "Ordering",
    "Predecessible",
    "SoEmpty",
    "Successible",
    "Universe",
    "Upper",
    "interval_monoid",
    "left_closed_right_open",
    "left_open_right_closed",
    "parse",
]
