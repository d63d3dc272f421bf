"""
EXIT command - terminate the shell.

Note: Module name is exit_cmd.py to avoid shadowing the exit() builtin.
"""

import re

from ..control_flow import ExitShell
from ..exceptions import InvalidArgumentError
from ..exit_codes import EXIT_CODE_SUCCESS
from ..process import Process
from ..response import Response
from .base import first_arg

# Optional minus sign followed by ASCII digits
STATUS_PATTERN = re.compile(r'-?[0-9]+')


def cmd_exit(process: Process) -> Response:
    """
    Terminate the shell with an optional exit status

    Usage: exit [n]

    The status is reduced modulo 256, as the OS reports it.

    Examples:
        exit          # Exit with status 0
        exit 3        # Exit with status 3
        exit 256      # Exit with status 0
        exit -1       # Exit with status 255
    """
    exit_code = EXIT_CODE_SUCCESS
    arg = first_arg(process)
    if arg is not None:
        if not STATUS_PATTERN.fullmatch(arg):
            raise InvalidArgumentError('exit', arg, 'numeric argument required')
        exit_code = int(arg) % 256

    # Caught by the shell loop, never returns
    raise ExitShell(exit_code)
