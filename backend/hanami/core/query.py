"""Query Vocabulary: filters and ordering accepted by the data adapter.

Invariants:
    - Pure values, no IO; the adapter translates them into SQL
    - Operators mirror the hosted data service: eq, neq, gt, gte, lt, lte, in, is, ilike
    - Unknown operators are rejected at construction time
"""

from dataclasses import dataclass
from typing import Any

OPERATORS = frozenset({"eq", "neq", "gt", "gte", "lt", "lte", "in", "is", "ilike"})


@dataclass(frozen=True)
class Filter:
    column: str
    op: str
    value: Any

    def __post_init__(self):
        if self.op not in OPERATORS:
            raise ValueError(f"unsupported filter operator: {self.op}")
        if self.op == "in" and not isinstance(self.value, (list, tuple, set, frozenset)):
            raise ValueError("'in' filter requires a sequence value")
        if self.op == "is" and self.value not in (None, True, False):
            raise ValueError("'is' filter accepts only None, True or False")


@dataclass(frozen=True)
class Order:
    column: str
    ascending: bool = True


def eq(column: str, value: Any) -> Filter:
    return Filter(column, "eq", value)


def neq(column: str, value: Any) -> Filter:
    return Filter(column, "neq", value)


def gt(column: str, value: Any) -> Filter:
    return Filter(column, "gt", value)


def gte(column: str, value: Any) -> Filter:
    return Filter(column, "gte", value)


def lt(column: str, value: Any) -> Filter:
    return Filter(column, "lt", value)


def lte(column: str, value: Any) -> Filter:
    return Filter(column, "lte", value)


def in_(column: str, values) -> Filter:
    return Filter(column, "in", tuple(values))


def is_(column: str, value: bool | None) -> Filter:
    return Filter(column, "is", value)


def ilike(column: str, pattern: str) -> Filter:
    return Filter(column, "ilike", pattern)


def desc(column: str) -> Order:
    return Order(column, ascending=False)
