"""Rich consoles shared by the CLI layer.

``console`` carries command results on stdout; ``err_console`` carries
errors and hints on stderr.  Neither resolves its stream until it
prints, so redirected or captured streams are honoured.
"""

from __future__ import annotations

from rich.console import Console

console = Console(highlight=False, soft_wrap=True, emoji=False)
err_console = Console(stderr=True, highlight=False, soft_wrap=True)
