"""Core layer — pure helpers over plain Python values.

Rules
-----
* No ``print()`` calls.
* No filesystem or network I/O.
* No imports from ``cli``.
* Missing values are reported with sentinels, never exceptions.
"""

from dotkit.core.arrays import (
    ItemList,
    array_max,
    array_min,
    filter_containing,
    find_index,
    last,
    remove,
    replace,
)
from dotkit.core.models import ABSENT, NOT_FOUND
from dotkit.core.numbers import to_int, truncate
from dotkit.core.paths import Record, object_index
from dotkit.core.protocols import IntConvertible, SupportsContains
from dotkit.core.strings import Text, contains, format_placeholders, is_json, parse_int

__all__: list[str] = [
    "ABSENT",
    "NOT_FOUND",
    "IntConvertible",
    "ItemList",
    "Record",
    "SupportsContains",
    "Text",
    "array_max",
    "array_min",
    "contains",
    "filter_containing",
    "find_index",
    "format_placeholders",
    "is_json",
    "last",
    "object_index",
    "parse_int",
    "remove",
    "replace",
    "to_int",
    "truncate",
]
