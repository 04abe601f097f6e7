"""Watch GitHub repositories for new issues and comments."""

__version__ = "0.1.0"
