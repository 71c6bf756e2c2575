"""
orderinterval.parser

Reading intervals written the way they are printed.

    [3, 7)              InclusiveLower(3) & ExclusiveUpper(7)
    (3, inf)            ExclusiveLower(3)
    (-inf, 7]           InclusiveUpper(7)
    (-inf, inf)         Universe
    {}  or  empty       Empty
    [0, 10) & (5, inf)  intersection of the terms

Bound values are decoded by a caller supplied function, `int` by default.

"""

import re
from collections import namedtuple
from dataclasses import dataclass
from typing import Any, Callable, Iterator, NoReturn, Optional

from orderinterval.interval import (
    Empty,
    ExclusiveLower,
    ExclusiveUpper,
    InclusiveLower,
    InclusiveUpper,
    Interval,
    Universe,
)
from orderinterval.logger import log
from orderinterval.monoid import IntervalMonoid
from orderinterval.ordering import NATURAL, Ordering


def parse(
    string: str, decode: Callable[[str], Any] = int, ordering: Ordering[Any] = NATURAL
) -> Interval[Any]:
    result = IntervalParser(string, decode, ordering).parse_expression()
    log.debug(f"Parsed {string!r} as {result}")
    return result


@dataclass
class IntervalParser:
    Token = namedtuple("Token", "kind value")

    input: str
    decode: Callable[[str], Any]
    ordering: Ordering[Any]
    head: Optional["IntervalParser.Token"]
    _tokens: Iterator["IntervalParser.Token"]

    def __init__(self, input, decode=int, ordering=NATURAL) -> None:
        self.input = input
        self.decode = decode
        self.ordering = ordering
        self._tokens = IntervalParser.tokenize(input)
        self.next()

    @staticmethod
    def tokenize(string):
        token_specification = [
            ("OPEN", r"[\[(]"),
            ("CLOSE", r"[\])]"),
            ("EMPTY", r"\{\}|\bempty\b"),
            ("INF", r"[+-]?\binf\b"),
            ("COMMA", r","),
            ("AND", r"&"),
            ("VALUE", r"[^\s,\[\]()&{}]+"),
            ("SKIP", r"[ \t]+"),
            ("MISMATCH", r"."),
        ]
        tok_regex = "|".join(f"(?P<{n}>{m})" for n, m in token_specification)

        for m in re.finditer(tok_regex, string):
            kind, value = m.lastgroup, m.group()
            if kind == "SKIP":
                continue
            if kind == "MISMATCH":
                raise ValueError(f"Unexpected character {value!r} in {string}")
            yield IntervalParser.Token(kind, value)

    def next(self):
        try:
            self.head = next(self._tokens)
        except StopIteration:
            self.head = None

    def expected(self, expected) -> NoReturn:
        raise ValueError(f"Expected {expected} but got {self.head} in {self.input}")

    def expect(self, expect) -> Token:
        head = self.head
        if head is None or expect != head.kind:
            self.expected(repr(expect))
        self.next()
        return head

    def eof(self):
        if self.head is None:
            return
        self.expected("end of input")

    def parse_expression(self) -> Interval[Any]:
        terms = [self.parse_term()]
        while self.head and self.head.kind == "AND":
            self.next()
            terms.append(self.parse_term())
        self.eof()
        return IntervalMonoid(self.ordering).sum(terms)

    def parse_term(self) -> Interval[Any]:
        head = self.head or self.expected("interval")
        match head.kind:
            case "EMPTY":
                self.next()
                return Empty()
            case "OPEN":
                return self.parse_range()
        self.expected("interval")

    def parse_range(self) -> Interval[Any]:
        inclusive_lower = self.expect("OPEN").value == "["
        lower = self.parse_lower(inclusive_lower)
        self.expect("COMMA")
        upper_tok = self.head
        upper_value = self.parse_bound()
        inclusive_upper = self.expect("CLOSE").value == "]"
        upper = self.to_upper(upper_tok, upper_value, inclusive_upper)
        return lower.intersect(upper, self.ordering)

    def parse_lower(self, inclusive: bool) -> Interval[Any]:
        tok = self.head
        value = self.parse_bound()
        if value is None:
            if tok.value != "-inf":
                self.expected_at(tok, "a value or -inf as lower bound")
            if inclusive:
                self.expected_at(tok, "'(' before -inf")
            return Universe()
        return InclusiveLower(value) if inclusive else ExclusiveLower(value)

    def to_upper(self, tok, value, inclusive: bool) -> Interval[Any]:
        if value is None:
            if tok.value == "-inf":
                self.expected_at(tok, "a value or inf as upper bound")
            if inclusive:
                self.expected_at(tok, "')' after inf")
            return Universe()
        return InclusiveUpper(value) if inclusive else ExclusiveUpper(value)

    def parse_bound(self) -> Optional[Any]:
        """A decoded value, or None for an infinite bound"""
        head = self.head or self.expected("bound")
        match head.kind:
            case "INF":
                self.next()
                return None
            case "VALUE":
                self.next()
                try:
                    return self.decode(head.value)
                except ValueError as e:
                    raise ValueError(f"Cannot decode bound {head.value!r} in {self.input}") from e
        self.expected("bound")

    def expected_at(self, tok, expected) -> NoReturn:
        raise ValueError(f"Expected {expected} but got {tok} in {self.input}")
