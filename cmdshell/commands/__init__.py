"""
Built-in command implementations.

Each builtin lives in its own module and takes a Process, returning a
Response. The table below is the complete, fixed set; it is keyed by the
closed Builtin enum and is not meant to be extended at runtime.
"""

from types import MappingProxyType

from ..resolver import Builtin
from .cd import cmd_cd
from .echo import cmd_echo
from .exit_cmd import cmd_exit
from .pwd import cmd_pwd
from .type_cmd import cmd_type

BUILTINS = MappingProxyType({
    Builtin.ECHO: cmd_echo,
    Builtin.TYPE: cmd_type,
    Builtin.EXIT: cmd_exit,
    Builtin.PWD: cmd_pwd,
    Builtin.CD: cmd_cd,
})


def get_builtin(builtin: Builtin):
    """
    Get the executor for a builtin.

    Example:
        >>> get_builtin(Builtin.ECHO).__name__
        'cmd_echo'
    """
    return BUILTINS[builtin]


__all__ = [
    'BUILTINS',
    'get_builtin',
]
