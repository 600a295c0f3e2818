"""Small, terse file and system command-line utilities, one module per command."""

__version__ = "0.1.0"