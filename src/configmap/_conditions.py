"""Composable predicates over an optional config value.

Conditions are evaluated against the result of a lookup, which may be
``None`` when the path did not resolve. Every predicate except
:data:`is_absent` is false for an absent value.

Conditions combine with ``|`` (or), ``&`` (and) and ``~`` (not)::

    cfg.check("http/port", is_int | is_float)
    check_that(cfg.get("hosts"), is_list_with(is_str) & ~is_exactly_list([]))

Evaluation never raises and never mutates the value it inspects.
"""

from __future__ import annotations

import datetime as dt
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable

from ._value import Bool, CfgValue, Datetime, Float, Int, List, Map, Null, Str

if TYPE_CHECKING:
    from ._map import CfgMap


class Condition(ABC):
    """Base class of all conditions. Subclasses implement :meth:`evaluate`."""

    @abstractmethod
    def evaluate(self, value: CfgValue | None) -> bool:
        ...

    def __call__(self, value: CfgValue | None) -> bool:
        return self.evaluate(value)

    def __or__(self, other: Condition) -> Condition:
        if not isinstance(other, Condition):
            return NotImplemented
        return AnyOf((self, other))

    def __and__(self, other: Condition) -> Condition:
        if not isinstance(other, Condition):
            return NotImplemented
        return AllOf((self, other))

    def __invert__(self) -> Condition:
        return Not(self)


# ---------------------------------------------------------------------------
# Primitive predicates
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class IsKind(Condition):
    """True when the value is an instance of *variant*."""

    variant: type[CfgValue]

    def evaluate(self, value: CfgValue | None) -> bool:
        return isinstance(value, self.variant)

    def __repr__(self) -> str:
        return f"is_{self.variant.kind}"


@dataclass(frozen=True)
class IsAbsent(Condition):
    """True only when the lookup found nothing."""

    def evaluate(self, value: CfgValue | None) -> bool:
        return value is None

    def __repr__(self) -> str:
        return "is_absent"


@dataclass(frozen=True)
class IsExactly(Condition):
    """True when the value has the same variant as *expected* and equals it."""

    expected: CfgValue

    def evaluate(self, value: CfgValue | None) -> bool:
        return value is not None and value == self.expected

    def __repr__(self) -> str:
        return f"is_exactly({self.expected!r})"


@dataclass(frozen=True)
class IsListWith(Condition):
    """True when the value is a list and every element satisfies *element*.

    An empty list satisfies any element condition.
    """

    element: Condition

    def evaluate(self, value: CfgValue | None) -> bool:
        if not isinstance(value, List):
            return False
        return all(self.element.evaluate(item) for item in value.value)

    def __repr__(self) -> str:
        return f"is_list_with({self.element!r})"


# ---------------------------------------------------------------------------
# Combinators
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class AnyOf(Condition):
    conditions: tuple[Condition, ...]

    def evaluate(self, value: CfgValue | None) -> bool:
        return any(condition.evaluate(value) for condition in self.conditions)

    def __repr__(self) -> str:
        return "(" + " | ".join(repr(c) for c in self.conditions) + ")"


@dataclass(frozen=True)
class AllOf(Condition):
    conditions: tuple[Condition, ...]

    def evaluate(self, value: CfgValue | None) -> bool:
        return all(condition.evaluate(value) for condition in self.conditions)

    def __repr__(self) -> str:
        return "(" + " & ".join(repr(c) for c in self.conditions) + ")"


@dataclass(frozen=True)
class Not(Condition):
    condition: Condition

    def evaluate(self, value: CfgValue | None) -> bool:
        return not self.condition.evaluate(value)

    def __repr__(self) -> str:
        return f"~{self.condition!r}"


# ---------------------------------------------------------------------------
# Vocabulary
# ---------------------------------------------------------------------------

is_int = IsKind(Int)
is_float = IsKind(Float)
is_str = IsKind(Str)
is_bool = IsKind(Bool)
is_list = IsKind(List)
is_map = IsKind(Map)
is_datetime = IsKind(Datetime)
is_null = IsKind(Null)
is_absent = IsAbsent()
is_present = Not(is_absent)


def is_exactly(value: CfgValue) -> Condition:
    return IsExactly(value)


def is_exactly_int(value: int) -> Condition:
    return IsExactly(Int(value))


def is_exactly_float(value: float) -> Condition:
    return IsExactly(Float(value))


def is_exactly_str(value: str) -> Condition:
    return IsExactly(Str(value))


def is_exactly_bool(value: bool) -> Condition:
    return IsExactly(Bool(value))


def is_exactly_list(values: Iterable[CfgValue]) -> Condition:
    return IsExactly(List(list(values)))


def is_exactly_map(value: CfgMap) -> Condition:
    return IsExactly(Map(value))


def is_exactly_datetime(value: dt.datetime | dt.date | dt.time) -> Condition:
    return IsExactly(Datetime(value))


def is_list_with(element: Condition) -> Condition:
    return IsListWith(element)


def any_of(*conditions: Condition) -> Condition:
    return AnyOf(tuple(conditions))


def all_of(*conditions: Condition) -> Condition:
    return AllOf(tuple(conditions))


def not_(condition: Condition) -> Condition:
    return Not(condition)


def check_that(value: CfgValue | None, condition: Condition) -> bool:
    """Evaluate *condition* against the result of a lookup.

    >>> check_that(Int(3), is_int | is_float)
    True
    >>> check_that(None, is_int)
    False
    """
    return condition.evaluate(value)
