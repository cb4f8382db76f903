"""Conversion of parsed documents into config values.

The parsers themselves are the usual libraries: :mod:`json`, :mod:`tomllib`
and PyYAML. This module only maps the Python objects they produce onto the
``CfgValue`` variants:

- ``dict`` becomes ``Map`` (string keys only)
- ``list`` and ``tuple`` become ``List``
- ``bool``, ``int``, ``float``, ``str`` become ``Bool``, ``Int``, ``Float``, ``Str``
- dates and times become ``Datetime`` when ``allow_datetime`` is set
- ``None`` becomes ``Null`` when ``allow_null`` is set

Anything else raises :class:`~configmap.ConversionError` naming the path of
the offending value.
"""

from __future__ import annotations

import datetime as dt
import json
import logging
import tomllib
from collections.abc import Mapping
from typing import Any

import yaml
from pydantic import BaseModel

from ._map import CfgMap
from ._path import SEPARATOR
from ._types import ConversionError
from ._value import INT_MAX, INT_MIN, Bool, CfgValue, Datetime, Float, Int, List, Map, Null, Str

logger = logging.getLogger(__name__)


def _child_path(path: str, key: str | int) -> str:
    return f"{path}{SEPARATOR}{key}" if path else str(key)


def _convert(obj: Any, path: str, allow_datetime: bool, allow_null: bool) -> CfgValue:
    if isinstance(obj, CfgValue):
        return _copy_value(obj, path, allow_datetime, allow_null)
    # bool is a subclass of int and must be matched first.
    if isinstance(obj, bool):
        return Bool(obj)
    if isinstance(obj, int):
        if not INT_MIN <= obj <= INT_MAX:
            raise ConversionError(path, f"integer {obj} does not fit in 64 bits")
        return Int(obj)
    if isinstance(obj, float):
        return Float(obj)
    if isinstance(obj, str):
        return Str(obj)
    if isinstance(obj, Mapping):
        return Map(_convert_mapping(obj, path, allow_datetime, allow_null))
    if isinstance(obj, (list, tuple)):
        return List(
            [
                _convert(item, _child_path(path, index), allow_datetime, allow_null)
                for index, item in enumerate(obj)
            ]
        )
    if isinstance(obj, (dt.datetime, dt.date, dt.time)):
        if not allow_datetime:
            raise ConversionError(path, "datetime values are not enabled")
        return Datetime(obj)
    if obj is None:
        if not allow_null:
            raise ConversionError(path, "null values are not enabled")
        return Null()
    raise ConversionError(path, f"unsupported type {type(obj).__name__}")


def _copy_value(value: CfgValue, path: str, allow_datetime: bool, allow_null: bool) -> CfgValue:
    # Existing values are rebuilt so the result never shares nodes with its input.
    if isinstance(value, Map):
        return Map(_convert_mapping(value.value, path, allow_datetime, allow_null))
    if isinstance(value, List):
        return List(
            [
                _convert(item, _child_path(path, index), allow_datetime, allow_null)
                for index, item in enumerate(value.value)
            ]
        )
    return type(value)(value.value)


def _convert_mapping(
    obj: Mapping[Any, Any],
    path: str,
    allow_datetime: bool,
    allow_null: bool,
    default_key: str | None = None,
) -> CfgMap:
    if default_key is None:
        default_key = obj.default_key if isinstance(obj, CfgMap) else ""
    result = CfgMap(default_key=default_key)
    for key, item in obj.items():
        if not isinstance(key, str):
            raise ConversionError(path, f"map key {key!r} is not a string")
        result[key] = _convert(item, _child_path(path, key), allow_datetime, allow_null)
    return result


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def to_value(obj: Any, *, allow_datetime: bool = False, allow_null: bool = False) -> CfgValue:
    """Convert a plain Python object into a ``CfgValue``.

    >>> to_value([1, "two", 3.0])
    List([Int(1), Str('two'), Float(3.0)])
    """
    return _convert(obj, "", allow_datetime, allow_null)


def from_mapping(
    obj: Mapping[str, Any],
    *,
    default_key: str | None = None,
    allow_datetime: bool = False,
    allow_null: bool = False,
) -> CfgMap:
    """Convert a top-level mapping into a new ``CfgMap``.

    When *default_key* is omitted, a ``CfgMap`` input keeps its own and any
    other mapping gets ``""``. Nested plain mappings get ``""`` and nested
    ``CfgMap``s keep theirs. ``CfgValue`` entries are copied, never shared.
    """
    if not isinstance(obj, Mapping):
        raise ConversionError("", f"top level must be a mapping, got {type(obj).__name__}")
    return _convert_mapping(obj, "", allow_datetime, allow_null, default_key)


def from_json(
    text: str | bytes,
    *,
    default_key: str = "",
    allow_null: bool = False,
) -> CfgMap:
    """Parse a JSON document with :func:`json.loads` and convert it."""
    logger.debug("Converting JSON document (%d chars)", len(text))
    return from_mapping(json.loads(text), default_key=default_key, allow_null=allow_null)


def from_toml(
    text: str,
    *,
    default_key: str = "",
    allow_datetime: bool = False,
) -> CfgMap:
    """Parse a TOML document with :func:`tomllib.loads` and convert it.

    TOML dates, times and datetimes require ``allow_datetime=True``.
    """
    logger.debug("Converting TOML document (%d chars)", len(text))
    return from_mapping(
        tomllib.loads(text),
        default_key=default_key,
        allow_datetime=allow_datetime,
    )


def from_yaml(
    text: str,
    *,
    default_key: str = "",
    allow_datetime: bool = False,
    allow_null: bool = False,
) -> CfgMap:
    """Parse a YAML document with :func:`yaml.safe_load` and convert it.

    An empty document yields an empty map.
    """
    logger.debug("Converting YAML document (%d chars)", len(text))
    document = yaml.safe_load(text)
    if document is None:
        return CfgMap(default_key=default_key)
    return from_mapping(
        document,
        default_key=default_key,
        allow_datetime=allow_datetime,
        allow_null=allow_null,
    )


def from_model(
    model: BaseModel,
    *,
    default_key: str = "",
    allow_datetime: bool = False,
    allow_null: bool = False,
) -> CfgMap:
    """Convert a Pydantic model instance through ``model_dump()``."""
    logger.debug("Converting %s model", type(model).__name__)
    return from_mapping(
        model.model_dump(),
        default_key=default_key,
        allow_datetime=allow_datetime,
        allow_null=allow_null,
    )
