"""Pure(ish) sequence helpers keyed by an identity field.

Identity search compares the value found at a dotted *uid* path on each
element against the same path on a "template" object.  Not-found is
reported as :data:`~dotkit.core.models.NOT_FOUND` (``-1``), never as a
falsy value that could be mistaken for index ``0``.

:func:`remove` and :func:`replace` mutate the given list in place; every
other helper leaves its input untouched.
"""

from __future__ import annotations

import math
import numbers
from collections.abc import Iterable, MutableSequence, Sequence
from decimal import Decimal
from typing import Any, TypeVar

from dotkit.core.models import ABSENT, NOT_FOUND
from dotkit.core.paths import object_index
from dotkit.core.protocols import SupportsContains
from dotkit.core.strings import contains

T = TypeVar("T")

DEFAULT_UID: str = "id"


# ---------------------------------------------------------------------------
# Identity search
# ---------------------------------------------------------------------------

def _strictly_equal(left: Any, right: Any) -> bool:
    """Equality that keeps booleans apart from numbers (``True != 1``)."""
    if isinstance(left, bool) != isinstance(right, bool):
        return False
    return bool(left == right)


def find_index(items: Sequence[Any], template: Any, uid: str = DEFAULT_UID) -> int:
    """Return the position of the first element matching *template*.

    An element matches when the value at *uid* on it is present and
    strictly equal to the value at *uid* on *template*.  Returns
    ``NOT_FOUND`` when the template has no *uid* value or nothing
    matches.
    """
    wanted = object_index(template, uid)
    if wanted is ABSENT:
        return NOT_FOUND
    for position, item in enumerate(items):
        identity = object_index(item, uid)
        if identity is not ABSENT and _strictly_equal(identity, wanted):
            return position
    return NOT_FOUND


def remove(items: MutableSequence[Any], template: Any, uid: str = DEFAULT_UID) -> bool:
    """Delete the first element matching *template*.

    Returns ``True`` if an element was removed.
    """
    position = find_index(items, template, uid)
    if position == NOT_FOUND:
        return False
    del items[position]
    return True


def replace(
    items: MutableSequence[T],
    obj: T,
    uid: str = DEFAULT_UID,
) -> MutableSequence[T]:
    """Overwrite the element matching *obj* with *obj*, or append it.

    Returns *items* itself so calls can be chained.
    """
    position = find_index(items, obj, uid)
    if position == NOT_FOUND:
        items.append(obj)
    else:
        items[position] = obj
    return items


# ---------------------------------------------------------------------------
# Substring filter
# ---------------------------------------------------------------------------

def _element_contains(item: Any, query: str, case_sensitive: bool) -> bool:
    if isinstance(item, SupportsContains):
        return item.contains(query, case_sensitive)
    if isinstance(item, str):
        return contains(item, query, case_sensitive)
    return False


def filter_containing(
    items: Iterable[T],
    query: str,
    case_sensitive: bool = False,
) -> list[T]:
    """Return the elements that contain *query*, in their original order.

    Only ``str`` values and :class:`~dotkit.core.protocols.SupportsContains`
    implementers take part; any other element is silently skipped.
    """
    return [item for item in items if _element_contains(item, query, case_sensitive)]


# ---------------------------------------------------------------------------
# Min / max / last
# ---------------------------------------------------------------------------

def _is_plain_number(item: Any) -> bool:
    """True for real numbers and ``Decimal``, excluding booleans and ``NaN``."""
    if isinstance(item, bool):
        return False
    if isinstance(item, numbers.Rational):
        return True
    if isinstance(item, Decimal):
        return not item.is_nan()
    return isinstance(item, numbers.Real) and not math.isnan(item)


def _numeric_values(items: Iterable[Any]) -> list[Any] | None:
    """Return *items* as a list, or ``None`` if any element is not a plain number."""
    values: list[Any] = []
    for item in items:
        if not _is_plain_number(item):
            return None
        values.append(item)
    return values or None


def array_min(items: Iterable[Any]) -> Any:
    """Return the numeric minimum of *items*.

    Real numbers and ``Decimal`` values take part, integers of any size
    included.  An empty sequence, or any other element (booleans and text
    included) or a ``NaN``, yields ``float("nan")``.  Nothing is coerced.
    """
    values = _numeric_values(items)
    if values is None:
        return math.nan
    return min(values)


def array_max(items: Iterable[Any]) -> Any:
    """Return the numeric maximum of *items*.

    Same ``NaN`` rules as :func:`array_min`.
    """
    values = _numeric_values(items)
    if values is None:
        return math.nan
    return max(values)


def last(value: Any) -> Any:
    """Return the final element of an array-like *value*, else ``None``.

    ``str``, ``bytes`` and anything that is not a
    :class:`~collections.abc.Sequence` are rejected with ``None`` before
    any indexing happens, as are empty sequences.
    """
    if isinstance(value, (str, bytes, bytearray)) or not isinstance(value, Sequence):
        return None
    if not value:
        return None
    return value[-1]


# ---------------------------------------------------------------------------
# Method form
# ---------------------------------------------------------------------------

class ItemList(list[T]):
    """A ``list`` carrying the sequence helpers as methods.

    Method names avoid the built-in ``list.index`` / ``list.remove``
    so that ordinary list behaviour is unchanged.
    """

    def find_by(self, template: Any, uid: str = DEFAULT_UID) -> int:
        return find_index(self, template, uid)

    def remove_by(self, template: Any, uid: str = DEFAULT_UID) -> bool:
        return remove(self, template, uid)

    def upsert(self, obj: T, uid: str = DEFAULT_UID) -> ItemList[T]:
        replace(self, obj, uid)
        return self

    def filter_containing(self, query: str, case_sensitive: bool = False) -> ItemList[T]:
        return ItemList(filter_containing(self, query, case_sensitive))

    def minimum(self) -> Any:
        return array_min(self)

    def maximum(self) -> Any:
        return array_max(self)

    def last(self) -> T | None:
        return self[-1] if self else None
