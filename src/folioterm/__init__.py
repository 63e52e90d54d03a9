"""folioterm — portfolio site with a terminal-style command interpreter."""

__version__ = "0.1.0"
