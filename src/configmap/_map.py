"""``CfgMap``, the configuration map itself.

A ``CfgMap`` behaves like a ``dict`` of :class:`~configmap.CfgValue` keyed by
strings. The mapping protocol (``cfg[key]``, ``in``, ``len``, iteration)
works on literal top-level keys. The named methods understand slash paths::

    cfg = CfgMap.with_default("default")
    cfg.get("servers/0/host")
    cfg.get_option("http", "port")   # http/port, else default/port

Lookups report a miss as ``None``; writes report a miss as ``False``.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping, MutableMapping
from typing import Any

from pydantic import GetCoreSchemaHandler
from pydantic_core import CoreSchema, core_schema

from ._conditions import Condition
from ._path import SEPARATOR, join_path, list_index, resolve, resolve_parent
from ._value import CfgValue

logger = logging.getLogger(__name__)


def _require_value(value: Any) -> CfgValue:
    if not isinstance(value, CfgValue):
        raise TypeError(f"CfgMap values must be CfgValue, got {type(value).__name__}")
    return value


class CfgMap(MutableMapping[str, CfgValue]):
    """A mapping of string keys to config values with path and default-section access.

    Parameters
    ----------
    entries:
        Initial top-level entries.
    default_key:
        Key (or path) of the section that :meth:`get_option` falls back to.
        An empty string makes the map's own root the fallback.
    """

    __slots__ = ("_entries", "default_key")

    def __init__(
        self,
        entries: Mapping[str, CfgValue] | None = None,
        *,
        default_key: str = "",
    ) -> None:
        self._entries: dict[str, CfgValue] = {}
        self.default_key = default_key
        for key, value in (entries or {}).items():
            self[key] = value

    @classmethod
    def with_default(cls, default_key: str) -> CfgMap:
        """Create an empty map whose default section is *default_key*."""
        return cls(default_key=default_key)

    # -- mapping protocol (literal keys) ------------------------------------

    def __getitem__(self, key: str) -> CfgValue:
        return self._entries[key]

    def __setitem__(self, key: str, value: CfgValue) -> None:
        self._entries[key] = _require_value(value)

    def __delitem__(self, key: str) -> None:
        del self._entries[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CfgMap):
            return NotImplemented
        return self.default_key == other.default_key and self._entries == other._entries

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        if self.default_key:
            return f"CfgMap({self._entries!r}, default_key={self.default_key!r})"
        return f"CfgMap({self._entries!r})"

    # -- path access --------------------------------------------------------

    def get(self, key: str, default: CfgValue | None = None) -> CfgValue | None:  # type: ignore[override]
        """Return the value at the slash path *key*, or *default* if it does not resolve.

        ``""`` returns the whole map wrapped in a ``Map`` value.
        """
        found = resolve(self, key)
        return default if found is None else found

    def contains_key(self, key: str) -> bool:
        """Return whether the slash path *key* resolves to a value."""
        return resolve(self, key) is not None

    def add(self, key: str, value: CfgValue) -> bool:
        """Insert *value* at *key* only if nothing is there yet.

        The parent of a multi-segment *key* must already be a map. Returns
        ``False`` without changing anything if the key is present or the
        parent does not resolve to a map.
        """
        _require_value(value)
        located = resolve_parent(self, key)
        if located is None:
            logger.debug("add(%r): parent path does not resolve", key)
            return False

        parent, last = located
        if not isinstance(parent, CfgMap):
            logger.debug("add(%r): parent is a list, not a map", key)
            return False
        if last in parent:
            return False
        parent[last] = value
        return True

    def set(self, key: str, value: CfgValue) -> bool:
        """Insert or overwrite the value at *key*.

        A list parent accepts an existing index only. Returns ``False`` if
        the parent does not resolve.
        """
        _require_value(value)
        located = resolve_parent(self, key)
        if located is None:
            logger.debug("set(%r): parent path does not resolve", key)
            return False

        parent, last = located
        if isinstance(parent, CfgMap):
            parent[last] = value
            return True

        index = list_index(parent, last)
        if index is None:
            logger.debug("set(%r): list index out of range", key)
            return False
        parent[index] = value
        return True

    def remove(self, key: str) -> CfgValue | None:
        """Remove the value at *key* and return it, or ``None`` if absent."""
        located = resolve_parent(self, key)
        if located is None:
            return None

        parent, last = located
        if isinstance(parent, CfgMap):
            return parent._entries.pop(last, None)

        index = list_index(parent, last)
        return None if index is None else parent.pop(index)

    def _replace(self, key: str, value: CfgValue) -> CfgValue | None:
        # Overwrite an existing entry only; the previous value is returned.
        located = resolve_parent(self, key)
        if located is None:
            return None

        parent, last = located
        if isinstance(parent, CfgMap):
            previous = parent._entries.get(last)
            if previous is not None:
                parent[last] = value
            return previous

        index = list_index(parent, last)
        if index is None:
            return None
        previous = parent[index]
        parent[index] = value
        return previous

    # -- default-section access ---------------------------------------------

    def _default_path(self, option: str) -> str | None:
        # An empty option would otherwise address the root itself.
        if not option:
            return None
        return join_path(self.default_key, option)

    def _lookup(self, path: str | None) -> CfgValue | None:
        return None if path is None else resolve(self, path)

    def get_option(self, section: str, option: str) -> CfgValue | None:
        """Return ``section/option``, falling back to the default section.

        With no ``default_key`` the fallback is ``option`` at the root.
        """
        found = resolve(self, f"{section}{SEPARATOR}{option}")
        if found is not None:
            return found
        return self._lookup(self._default_path(option))

    def update_option(self, section: str, option: str, value: CfgValue) -> CfgValue | None:
        """Overwrite the effective value of ``section/option``.

        The option is looked up the same way as :meth:`get_option`, but the
        new value is always written into *section*: the default section is
        never modified. When the option exists in neither place nothing is
        written.

        Returns the previous effective value, or ``None`` if nothing was
        updated.
        """
        _require_value(value)
        concrete = f"{section}{SEPARATOR}{option}"

        previous = self._replace(concrete, value)
        if previous is not None:
            return previous

        inherited = self._lookup(self._default_path(option))
        if inherited is None:
            logger.debug("update_option(%r, %r): option not found", section, option)
            return None

        if not self.set(concrete, value):
            logger.debug("update_option(%r, %r): section %r does not resolve", section, option, section)
            return None
        return inherited

    # -- conditions ---------------------------------------------------------

    def check(self, key: str, condition: Condition) -> bool:
        """Evaluate *condition* against the value at *key*."""
        return condition.evaluate(self.get(key))

    def check_option(self, section: str, option: str, condition: Condition) -> bool:
        """Evaluate *condition* against :meth:`get_option` for the pair."""
        return condition.evaluate(self.get_option(section, option))

    # -- Pydantic v2 integration --------------------------------------------

    @classmethod
    def __get_pydantic_core_schema__(
        cls,
        source_type: Any,
        handler: GetCoreSchemaHandler,
    ) -> CoreSchema:
        def _validate(value: Any) -> CfgMap:
            if isinstance(value, CfgMap):
                return value
            if isinstance(value, Mapping):
                from ._adapters import from_mapping

                return from_mapping(value)
            raise ValueError(f"expected a mapping, got {type(value).__name__}")

        return core_schema.no_info_plain_validator_function(_validate)
