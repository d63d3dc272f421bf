"""
External command execution.

Runs a resolved executable as a child process, blocks until it exits and
returns its captured standard output as the Response.
"""

import logging
import subprocess

from .exceptions import CommandExecutionError
from .process import Process
from .response import Response

logger = logging.getLogger(__name__)


def trim_trailing_newline(text: str) -> str:
    """
    Remove exactly one trailing newline sequence.

    Examples:
        >>> trim_trailing_newline('a\\n\\n')
        'a\\n'
        >>> trim_trailing_newline('a\\r\\n')
        'a'
        >>> trim_trailing_newline('a')
        'a'
    """
    if text.endswith('\r\n'):
        return text[:-2]
    if text.endswith('\n'):
        return text[:-1]
    return text


class ExternalCommand:
    """
    Executor for a program found on the search path.

    The child gets the typed command name as argv[0], no stdin, and the
    parent's stderr. Only stdout is captured.

    Example:
        process = Process('ls', ['-a'], context, executor=ExternalCommand('/bin/ls'))
        response = process.execute()
    """

    def __init__(self, path: str):
        self.path = path

    def __call__(self, process: Process) -> Response:
        argv = [process.command] + list(process.args)
        logger.debug("spawning %s as %r", self.path, argv)

        try:
            completed = subprocess.run(
                argv,
                executable=self.path,
                stdin=subprocess.DEVNULL,
                stdout=subprocess.PIPE,
                stderr=None,
                check=False,
            )
        except OSError as e:
            logger.warning("failed to execute %s: %s", self.path, e)
            raise CommandExecutionError(process.command, e.strerror or str(e)) from e
        except ValueError as e:
            # Arguments with an embedded NUL cannot be passed to exec
            logger.warning("failed to execute %s: %s", self.path, e)
            raise CommandExecutionError(process.command, str(e)) from e

        logger.debug("%s exited with status %d", self.path, completed.returncode)
        output = completed.stdout.decode('utf-8', errors='replace')
        # A signal-terminated child reports a negative status
        exit_code = completed.returncode if completed.returncode >= 0 else 128 - completed.returncode
        return Response.success(trim_trailing_newline(output), exit_code=exit_code)

    def __repr__(self):
        return f"ExternalCommand({self.path!r})"
