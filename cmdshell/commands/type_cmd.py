"""
TYPE command - describe how a command name would be interpreted.

Note: Module name is type_cmd.py because 'type' is a Python builtin.
"""

from ..process import Process
from ..resolver import is_builtin, resolve_external
from ..response import Response
from .base import require_arg


def cmd_type(process: Process) -> Response:
    """
    Describe a command name

    Usage: type <name>

    Examples:
        type echo     # echo is a shell builtin
        type ls       # ls is /bin/ls
        type nope     # nope: not found
    """
    name = require_arg(process, 'expected an argument of a command name')

    description = is_builtin(name)
    if description is not None:
        return Response.success(description)

    context = process.context
    path = resolve_external(name, context.search_path, context.filesystem)
    if path is not None:
        return Response.success(f"{name} is {path}")

    return Response.error(f"{name}: not found")
