"""
PWD command - print working directory.
"""

from ..process import Process
from ..response import Response


def cmd_pwd(process: Process) -> Response:
    """
    Print working directory

    Usage: pwd

    Note:
        A working directory that cannot be determined is not a shell error;
        the OSError propagates and ends the shell.
    """
    return Response.success(process.context.cwd)
