"""
Base utilities for command implementations.

This module provides common helper functions that command modules can use
to reduce code duplication and maintain consistency.
"""

from typing import Optional

from ..exceptions import CommandSyntaxError
from ..process import Process


def first_arg(process: Process) -> Optional[str]:
    """
    Get the first argument, if any.

    Args:
        process: The process object

    Returns:
        The first argument, or None when there are no arguments
    """
    return process.args[0] if process.args else None


def require_arg(process: Process, usage: str) -> str:
    """
    Get the first argument or fail with a usage error.

    Args:
        process: The process object
        usage: Message describing what was expected

    Returns:
        The first argument

    Raises:
        CommandSyntaxError: If there are no arguments
    """
    arg = first_arg(process)
    if arg is None:
        raise CommandSyntaxError(process.command, usage)
    return arg


__all__ = [
    'first_arg',
    'require_arg',
]
