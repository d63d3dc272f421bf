"""cmdshell - an interactive command interpreter with builtins and PATH lookup."""

__version__ = "0.1.0"
