"""Dotted-path resolution against nested mappings.

``object_index({"field": {"property": 100}}, "field.property") == 100``

Resolution folds left to right over the path segments.  It stops with
the *default* (``ABSENT`` unless overridden) as soon as the current
value is falsy, is not a mapping, or lacks the next segment.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from dotkit.core.models import ABSENT

DEFAULT_DELIMITER: str = "."


def split_path(path: str, delimiter: str = DEFAULT_DELIMITER) -> list[str]:
    """Split *path* into its key segments."""
    return path.split(delimiter)


def object_index(
    obj: Any,
    path: str,
    *,
    delimiter: str = DEFAULT_DELIMITER,
    default: Any = ABSENT,
) -> Any:
    """Resolve a delimiter-joined *path* against a nested mapping.

    Parameters
    ----------
    obj:
        The root value.  Usually a mapping.
    path:
        Key segments joined by *delimiter* (e.g. ``"field.property"``).
    delimiter:
        Segment separator, ``"."`` by default.
    default:
        Returned when the path does not resolve.

    Returns
    -------
    Any
        The resolved value, which may itself be falsy, or *default*
        when an intermediate value is falsy or not a mapping, or a
        segment is missing.
    """
    current = obj
    for segment in split_path(path, delimiter):
        if not current or not isinstance(current, Mapping):
            return default
        if segment not in current:
            return default
        current = current[segment]
    return current


class Record(dict[str, Any]):
    """A ``dict`` that resolves dotted paths via :meth:`index`.

    >>> Record({"field": {"property": 100}}).index("field.property")
    100
    """

    def index(
        self,
        path: str,
        *,
        delimiter: str = DEFAULT_DELIMITER,
        default: Any = ABSENT,
    ) -> Any:
        """Method form of :func:`object_index` bound to this record."""
        return object_index(self, path, delimiter=delimiter, default=default)
