"""
ECHO command - print arguments.
"""

from ..process import Process
from ..response import Response


def cmd_echo(process: Process) -> Response:
    """
    Print arguments separated by single spaces

    Usage: echo [arg...]
    """
    return Response.success(' '.join(process.args))
