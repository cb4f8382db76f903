"""The closed family of configuration values.

Every entry in a :class:`~configmap.CfgMap` is an instance of one of the
variant classes below. Each variant is its own class so equality is
variant-sensitive for free: ``Int(3) != Float(3.0)`` and
``Int(1) != Bool(True)``.

>>> Int(8080).as_int()
8080
>>> Str("8080").as_int() is None
True
"""

from __future__ import annotations

import datetime as dt
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, ClassVar

if TYPE_CHECKING:
    from ._conditions import Condition
    from ._map import CfgMap

INT_MIN = -(2**63)
INT_MAX = 2**63 - 1


@dataclass(eq=True, repr=False)
class CfgValue:
    """Base class of all config values. Not instantiated directly."""

    value: Any
    kind: ClassVar[str] = "value"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.value!r})"

    # -- kind checks --------------------------------------------------------

    def is_int(self) -> bool:
        return isinstance(self, Int)

    def is_float(self) -> bool:
        return isinstance(self, Float)

    def is_str(self) -> bool:
        return isinstance(self, Str)

    def is_bool(self) -> bool:
        return isinstance(self, Bool)

    def is_list(self) -> bool:
        return isinstance(self, List)

    def is_map(self) -> bool:
        return isinstance(self, Map)

    def is_datetime(self) -> bool:
        return isinstance(self, Datetime)

    def is_null(self) -> bool:
        return isinstance(self, Null)

    # -- projections --------------------------------------------------------

    def as_int(self) -> int | None:
        return self.value if isinstance(self, Int) else None

    def as_float(self) -> float | None:
        return self.value if isinstance(self, Float) else None

    def as_str(self) -> str | None:
        return self.value if isinstance(self, Str) else None

    def as_bool(self) -> bool | None:
        return self.value if isinstance(self, Bool) else None

    def as_list(self) -> list[CfgValue] | None:
        return self.value if isinstance(self, List) else None

    def as_map(self) -> CfgMap | None:
        return self.value if isinstance(self, Map) else None

    def as_datetime(self) -> dt.datetime | dt.date | dt.time | None:
        return self.value if isinstance(self, Datetime) else None

    # -- numeric coercion ---------------------------------------------------

    def to_int(self) -> int | None:
        """Return the value as an ``int``, truncating a ``Float``.

        ``None`` for non-numeric variants and for floats with no signed 64-bit
        integer value (NaN, infinities, out-of-range magnitudes).
        """
        if isinstance(self, Int):
            return self.value
        if isinstance(self, Float):
            try:
                truncated = int(self.value)
            except (OverflowError, ValueError):
                return None
            return truncated if INT_MIN <= truncated <= INT_MAX else None
        return None

    def to_float(self) -> float | None:
        """Return the value as a ``float``, widening an ``Int``."""
        if isinstance(self, (Int, Float)):
            return float(self.value)
        return None

    # -- conditions ---------------------------------------------------------

    def check_that(self, condition: Condition) -> bool:
        return condition.evaluate(self)


@dataclass(eq=True, repr=False)
class Int(CfgValue):
    """A signed 64-bit integer."""

    value: int
    kind: ClassVar[str] = "int"

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise TypeError(f"Int expects an int, got {type(self.value).__name__}")
        if not INT_MIN <= self.value <= INT_MAX:
            raise ValueError(f"{self.value} does not fit in a signed 64-bit integer")


@dataclass(eq=True, repr=False)
class Float(CfgValue):
    """A 64-bit float."""

    value: float
    kind: ClassVar[str] = "float"

    def __post_init__(self) -> None:
        if not isinstance(self.value, float):
            raise TypeError(f"Float expects a float, got {type(self.value).__name__}")


@dataclass(eq=True, repr=False)
class Str(CfgValue):
    value: str
    kind: ClassVar[str] = "str"

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            raise TypeError(f"Str expects a str, got {type(self.value).__name__}")


@dataclass(eq=True, repr=False)
class Bool(CfgValue):
    value: bool
    kind: ClassVar[str] = "bool"

    def __post_init__(self) -> None:
        if not isinstance(self.value, bool):
            raise TypeError(f"Bool expects a bool, got {type(self.value).__name__}")


@dataclass(eq=True, repr=False)
class List(CfgValue):
    """An ordered list of values. Elements may be of differing kinds."""

    value: list[CfgValue] = field(default_factory=list)
    kind: ClassVar[str] = "list"

    def __post_init__(self) -> None:
        if not isinstance(self.value, list):
            raise TypeError(f"List expects a list, got {type(self.value).__name__}")
        for item in self.value:
            if not isinstance(item, CfgValue):
                raise TypeError(f"List elements must be CfgValue, got {type(item).__name__}")


@dataclass(eq=True, repr=False)
class Map(CfgValue):
    """A nested configuration map."""

    value: CfgMap
    kind: ClassVar[str] = "map"

    def __post_init__(self) -> None:
        from ._map import CfgMap

        if not isinstance(self.value, CfgMap):
            raise TypeError(f"Map expects a CfgMap, got {type(self.value).__name__}")


@dataclass(eq=True, repr=False)
class Datetime(CfgValue):
    """A date, time or datetime. Only produced when an adapter enables it."""

    value: dt.datetime | dt.date | dt.time
    kind: ClassVar[str] = "datetime"

    def __post_init__(self) -> None:
        if not isinstance(self.value, (dt.datetime, dt.date, dt.time)):
            raise TypeError(f"Datetime expects a date/time, got {type(self.value).__name__}")


@dataclass(eq=True, repr=False)
class Null(CfgValue):
    """An explicit null. Distinct from an absent value, which is ``None``."""

    value: None = None
    kind: ClassVar[str] = "null"

    def __post_init__(self) -> None:
        if self.value is not None:
            raise TypeError("Null carries no payload")

    def __repr__(self) -> str:
        return "Null()"
