"""dotkit — dotted-path lookup and small collection/string helpers.

Every helper is a pure function over plain Python values.  Opt-in
subclasses (:class:`Record`, :class:`ItemList`, :class:`Text`) expose
the same helpers as methods without touching built-in types.
"""

from dotkit.core import (
    ABSENT,
    NOT_FOUND,
    IntConvertible,
    ItemList,
    Record,
    SupportsContains,
    Text,
    array_max,
    array_min,
    contains,
    filter_containing,
    find_index,
    format_placeholders,
    is_json,
    last,
    object_index,
    parse_int,
    remove,
    replace,
    to_int,
    truncate,
)
from dotkit.version import __version__

__all__: list[str] = [
    "ABSENT",
    "NOT_FOUND",
    "IntConvertible",
    "ItemList",
    "Record",
    "SupportsContains",
    "Text",
    "__version__",
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
