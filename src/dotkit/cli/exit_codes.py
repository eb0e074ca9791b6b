"""Process exit statuses returned by ``dotkit`` commands."""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    """Exit status of a ``dotkit`` invocation.

    Members are plain ints, so they can be passed straight to
    ``sys.exit`` and compared with the integers a shell sees.
    """

    SUCCESS = 0
    # A DotkitError: bad JSON argument, unresolved path, unmatched item.
    GENERAL_ERROR = 1
    UNEXPECTED_ERROR = 2
    KEYBOARD_INTERRUPT = 130
