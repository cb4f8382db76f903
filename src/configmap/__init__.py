"""Typed, hierarchical configuration maps.

Provides a closed set of config value kinds, slash-path access into nested
maps and lists, default-section fallback, and composable conditions for
validating what a lookup returned.
"""

from ._adapters import from_json, from_mapping, from_model, from_toml, from_yaml, to_value
from ._conditions import (
    Condition,
    all_of,
    any_of,
    check_that,
    is_absent,
    is_bool,
    is_datetime,
    is_exactly,
    is_exactly_bool,
    is_exactly_datetime,
    is_exactly_float,
    is_exactly_int,
    is_exactly_list,
    is_exactly_map,
    is_exactly_str,
    is_float,
    is_int,
    is_list,
    is_list_with,
    is_map,
    is_null,
    is_present,
    is_str,
    not_,
)
from ._map import CfgMap
from ._types import ConfigError, ConversionError
from ._value import Bool, CfgValue, Datetime, Float, Int, List, Map, Null, Str
from ._version import __version__

__all__ = [
    "__version__",
    # Core
    "CfgMap",
    "ConfigError",
    "ConversionError",
    # Values
    "CfgValue",
    "Int",
    "Float",
    "Str",
    "Bool",
    "List",
    "Map",
    "Datetime",
    "Null",
    # Conditions
    "Condition",
    "check_that",
    "is_int",
    "is_float",
    "is_str",
    "is_bool",
    "is_list",
    "is_map",
    "is_datetime",
    "is_null",
    "is_absent",
    "is_present",
    "is_exactly",
    "is_exactly_int",
    "is_exactly_float",
    "is_exactly_str",
    "is_exactly_bool",
    "is_exactly_list",
    "is_exactly_map",
    "is_exactly_datetime",
    "is_list_with",
    "any_of",
    "all_of",
    "not_",
    # Adapters
    "to_value",
    "from_mapping",
    "from_json",
    "from_toml",
    "from_yaml",
    "from_model",
]
