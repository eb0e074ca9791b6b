"""Allow ``python -m dotkit`` invocation.

Delegates to the CLI error-boundary entry point so that
``python -m dotkit`` behaves identically to the ``dotkit`` console
script.
"""

from __future__ import annotations

from dotkit.cli.app import cli

if __name__ == "__main__":
    cli()
