"""CLI application entry point and command routing for dotkit.

This module is the **sole error boundary** for the command line.  It
catches :class:`~dotkit.exceptions.DotkitError`, ``KeyboardInterrupt``,
and any unexpected ``Exception``, rendering messages via Rich and
returning well-defined exit codes.

Architecture notes
------------------
* No helper logic lives here — every command delegates to ``core``.
* JSON arguments are decoded here; ``core`` only ever sees Python values.
* Sentinel results (``ABSENT``, ``NOT_FOUND``) become typed errors here.
"""

from __future__ import annotations

import argparse
import sys
from typing import Any

from rich.markup import escape

from dotkit.cli.exit_codes import ExitCode
from dotkit.cli.console import console, err_console
from dotkit.core.arrays import filter_containing, find_index, replace
from dotkit.core.models import ABSENT, NOT_FOUND
from dotkit.core.numbers import to_int
from dotkit.core.paths import DEFAULT_DELIMITER, object_index
from dotkit.core.strings import contains, format_placeholders, is_json, loads_strict
from dotkit.exceptions import (
    DotkitError,
    InvalidDocumentError,
    ItemNotFoundError,
    PathNotFoundError,
    UsageError,
)
from dotkit.version import __version__


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _add_uid_option(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--uid",
        default="id",
        help="Dotted path of the identity field (default: id).",
    )


def _add_case_option(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "-s",
        "--case-sensitive",
        action="store_true",
        help="Match letter case exactly.",
    )


def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser with one sub-command per helper."""
    parser = argparse.ArgumentParser(
        prog="dotkit",
        description="Dotted-path lookup and small collection/string helpers.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    commands = parser.add_subparsers(dest="command", metavar="COMMAND")

    get = commands.add_parser("get", help="Resolve a dotted path in a JSON document.")
    get.add_argument("document", help="JSON object to search.")
    get.add_argument("path", help="Dotted path, e.g. field.property")
    get.add_argument("--delimiter", default=DEFAULT_DELIMITER, help="Path separator.")

    find = commands.add_parser("find", help="Index of the item matching a template.")
    find.add_argument("items", help="JSON array of objects.")
    find.add_argument("template", help="JSON object carrying the identity field.")
    _add_uid_option(find)

    upsert = commands.add_parser("upsert", help="Replace the matching item or append it.")
    upsert.add_argument("items", help="JSON array of objects.")
    upsert.add_argument("object", help="JSON object to insert.")
    _add_uid_option(upsert)

    grep = commands.add_parser("grep", help="Keep the items containing a substring.")
    grep.add_argument("query")
    grep.add_argument("items", nargs="*")
    _add_case_option(grep)

    contains_cmd = commands.add_parser("contains", help="Substring containment check.")
    contains_cmd.add_argument("subject")
    contains_cmd.add_argument("query")
    _add_case_option(contains_cmd)

    to_int_cmd = commands.add_parser("to-int", help="Coerce a value to an integer.")
    to_int_cmd.add_argument("value")

    is_json_cmd = commands.add_parser("is-json", help="Check whether text is valid JSON.")
    is_json_cmd.add_argument("text")

    fmt = commands.add_parser("format", help="Substitute {0}, {1}, ... placeholders.")
    fmt.add_argument("template")
    fmt.add_argument("args", nargs="*")

    return parser


# ---------------------------------------------------------------------------
# Input / output helpers
# ---------------------------------------------------------------------------

def _decode(text: str, label: str) -> Any:
    """Decode a JSON argument, mapping failures to :class:`InvalidDocumentError`."""
    try:
        return loads_strict(text)
    except (ValueError, RecursionError) as exc:
        raise InvalidDocumentError(
            f"{label} is not valid JSON: {text!r}",
            hint="Quote the argument for your shell, e.g. '{\"id\": 1}'.",
        ) from exc


def _decode_array(text: str, label: str) -> list[Any]:
    value = _decode(text, label)
    if not isinstance(value, list):
        raise UsageError(f"{label} must be a JSON array, got {type(value).__name__}.")
    return value


def _echo(text: str) -> None:
    console.print(text, markup=False)


def _echo_bool(flag: bool) -> None:
    _echo("true" if flag else "false")


# ---------------------------------------------------------------------------
# Command handlers
# ---------------------------------------------------------------------------

def _handle_get(args: argparse.Namespace) -> int:
    document = _decode(args.document, "document")
    value = object_index(document, args.path, delimiter=args.delimiter)
    if value is ABSENT:
        raise PathNotFoundError(
            f"Path {args.path!r} does not resolve.",
            hint="Every segment except the last must name a non-empty object.",
        )
    console.print_json(data=value, indent=None, highlight=False)
    return ExitCode.SUCCESS


def _handle_find(args: argparse.Namespace) -> int:
    items = _decode_array(args.items, "items")
    template = _decode(args.template, "template")
    position = find_index(items, template, args.uid)
    if position == NOT_FOUND:
        raise ItemNotFoundError(
            f"No item matches on {args.uid!r}.",
            hint="Check that the template carries the identity field.",
        )
    _echo(str(position))
    return ExitCode.SUCCESS


def _handle_upsert(args: argparse.Namespace) -> int:
    items = _decode_array(args.items, "items")
    obj = _decode(args.object, "object")
    console.print_json(data=replace(items, obj, args.uid), indent=None, highlight=False)
    return ExitCode.SUCCESS


def _handle_grep(args: argparse.Namespace) -> int:
    for item in filter_containing(args.items, args.query, args.case_sensitive):
        _echo(item)
    return ExitCode.SUCCESS


def _handle_contains(args: argparse.Namespace) -> int:
    _echo_bool(contains(args.subject, args.query, args.case_sensitive))
    return ExitCode.SUCCESS


def _handle_to_int(args: argparse.Namespace) -> int:
    _echo(str(to_int(args.value)))
    return ExitCode.SUCCESS


def _handle_is_json(args: argparse.Namespace) -> int:
    _echo_bool(is_json(args.text))
    return ExitCode.SUCCESS


def _handle_format(args: argparse.Namespace) -> int:
    _echo(format_placeholders(args.template, *args.args))
    return ExitCode.SUCCESS


_HANDLERS = {
    "get": _handle_get,
    "find": _handle_find,
    "upsert": _handle_upsert,
    "grep": _handle_grep,
    "contains": _handle_contains,
    "to-int": _handle_to_int,
    "is-json": _handle_is_json,
    "format": _handle_format,
}


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the dotkit CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return ExitCode.SUCCESS

    return _HANDLERS[args.command](args)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point."""
    try:
        code = main()
        sys.exit(code)
    except DotkitError as exc:
        err_console.print(f"[bold red]Error:[/bold red] {escape(str(exc))}")
        if exc.hint:
            err_console.print(f"[yellow]Hint:[/yellow] {escape(exc.hint)}")
        sys.exit(ExitCode.GENERAL_ERROR)
    except KeyboardInterrupt:
        err_console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(ExitCode.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        err_console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {escape(str(exc))}"
        )
        sys.exit(ExitCode.UNEXPECTED_ERROR)
