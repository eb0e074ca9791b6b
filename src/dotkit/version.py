"""Single source of truth for the dotkit version string."""

__version__: str = "0.1.0"
