"""Pure string helpers.

* :func:`contains` — substring containment, case-insensitive by default.
* :func:`parse_int` — leading-integer parse with a ``0`` fallback.
* :func:`is_json` — whether text decodes as a JSON document.
* :func:`format_placeholders` — ``{0}``, ``{1}``, … substitution.

:class:`Text` exposes the same helpers as methods on a ``str`` subclass.
"""

from __future__ import annotations

import json
import re
from typing import Any, NoReturn

_LEADING_INT = re.compile(r"[ \t\n\r\f\v]*([+-]?[0-9]+)")
_PLACEHOLDER = re.compile(r"\{(0|[1-9][0-9]*)\}")


# ---------------------------------------------------------------------------
# Containment
# ---------------------------------------------------------------------------

def contains(subject: str, query: str, case_sensitive: bool = False) -> bool:
    """Return whether *query* occurs anywhere within *subject*.

    Case-insensitive mode lowercases both operands before comparing.
    """
    if case_sensitive:
        return query in subject
    return query.lower() in subject.lower()


# ---------------------------------------------------------------------------
# Integer parsing
# ---------------------------------------------------------------------------

def parse_int(text: str) -> int:
    """Parse the longest leading integer of *text*.

    Leading ASCII whitespace and a single sign are accepted, followed by
    ASCII digits only.  Parsing stops at the first non-digit, so
    ``"3.9kg"`` gives ``3``.  Returns ``0`` when no digits lead the text.
    """
    match = _LEADING_INT.match(text)
    if match is None:
        return 0
    return int(match.group(1))


# ---------------------------------------------------------------------------
# JSON validity
# ---------------------------------------------------------------------------

def _reject_constant(name: str) -> NoReturn:
    raise ValueError(f"non-standard JSON constant: {name}")


def loads_strict(text: str | bytes | bytearray) -> Any:
    """Decode a JSON document, rejecting ``NaN`` and ``Infinity``.

    Raises ``ValueError`` for malformed text and ``RecursionError`` for
    nesting deeper than the decoder can follow.
    """
    return json.loads(text, parse_constant=_reject_constant)


def is_json(text: Any) -> bool:
    """Return ``True`` if *text* decodes as a JSON document.

    Scalar documents count: ``"true"``, ``"123"`` and ``'"x"'`` are all
    valid.  ``NaN`` and ``Infinity`` are rejected since they are not
    part of JSON proper, and so are documents nested too deeply to
    decode.  Non-text input is never valid.
    """
    if not isinstance(text, (str, bytes, bytearray)):
        return False
    try:
        loads_strict(text)
    except (ValueError, RecursionError):
        return False
    return True


# ---------------------------------------------------------------------------
# Placeholder substitution
# ---------------------------------------------------------------------------

def format_placeholders(template: str, *args: object) -> str:
    """Replace each ``{N}`` in *template* with ``str(args[N])``.

    Substitution is a single pass, so text inserted for one placeholder
    is never scanned for further placeholders.  A placeholder whose
    index has no matching argument is left as written, and so is a token
    with a leading zero such as ``{01}``.

    >>> format_placeholders("{0}-{2}", "a", "b")
    'a-{2}'
    """

    def _substitute(match: re.Match[str]) -> str:
        position = int(match.group(1))
        if position < len(args):
            return str(args[position])
        return match.group(0)

    return _PLACEHOLDER.sub(_substitute, template)


# ---------------------------------------------------------------------------
# Method form
# ---------------------------------------------------------------------------

class Text(str):
    """A ``str`` carrying the string helpers as methods.

    Implements both :class:`~dotkit.core.protocols.SupportsContains`
    and :class:`~dotkit.core.protocols.IntConvertible`.
    """

    __slots__ = ()

    def contains(self, query: str, case_sensitive: bool = False) -> bool:
        return contains(self, query, case_sensitive)

    def to_int(self) -> int:
        return parse_int(self)

    def is_json(self) -> bool:
        return is_json(str(self))

    def substitute(self, *args: object) -> Text:
        """Method form of :func:`format_placeholders`."""
        return Text(format_placeholders(self, *args))
