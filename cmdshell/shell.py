"""
Shell - the read-eval-print loop around the Dispatcher.

Writes a prompt, reads one line, dispatches it, and prints the Response:
success text to stdout, error text to stderr, nothing for an empty Response.
"""

import logging
import sys
from typing import Optional, TextIO

from .context import CommandContext
from .control_flow import ExitShell
from .dispatcher import Dispatcher
from .exceptions import ShellIOError
from .exit_codes import EXIT_CODE_SUCCESS
from .response import Response

logger = logging.getLogger(__name__)

DEFAULT_PROMPT = "$ "


class Shell:
    """
    Interactive command interpreter.

    Attributes:
        context: CommandContext shared by every command
        dispatcher: Dispatcher executing each line
        prompt: String written before each read
    """

    def __init__(
        self,
        context: Optional[CommandContext] = None,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
        stderr: Optional[TextIO] = None,
        prompt: str = DEFAULT_PROMPT,
    ):
        self.context = context or CommandContext.from_environ()
        self.dispatcher = Dispatcher(self.context)
        self.stdin = stdin or sys.stdin
        self.stdout = stdout or sys.stdout
        self.stderr = stderr or sys.stderr
        self.prompt = prompt

    def read_line(self) -> Optional[str]:
        """
        Write the prompt and read one line.

        Returns:
            The line including its newline, or None at end of input

        Raises:
            ShellIOError: If the prompt cannot be written or input cannot be read
        """
        try:
            self.stdout.write(self.prompt)
            self.stdout.flush()
        except OSError as e:
            raise ShellIOError("writing shell prompt to stdout", e) from e

        try:
            line = self.stdin.readline()
        except OSError as e:
            raise ShellIOError("reading from stdin", e) from e

        return line or None

    def write_response(self, response: Response) -> None:
        """
        Print a response to the stream it belongs on.

        Raises:
            ShellIOError: If the stream cannot be written
        """
        if response.is_empty:
            return

        if response.is_error:
            self._write(self.stderr, "stderr", f"{response.text}\n")
        else:
            self._write(self.stdout, "stdout", f"{response.text}\n")

    @staticmethod
    def _write(stream: TextIO, name: str, text: str) -> None:
        try:
            stream.write(text)
            stream.flush()
        except OSError as e:
            raise ShellIOError(f"writing message to {name}", e) from e

    def execute(self, line: str) -> Response:
        """
        Execute one line and print its response.

        Raises:
            ExitShell: When the line runs the exit builtin
        """
        response = self.dispatcher.dispatch(line)
        self.write_response(response)
        return response

    def run(self) -> int:
        """
        Run the loop until exit or end of input.

        Returns:
            Exit status for the process
        """
        while True:
            line = self.read_line()
            if line is None:
                logger.debug("end of input")
                # Terminate the pending prompt line
                self._write(self.stdout, "stdout", "\n")
                return EXIT_CODE_SUCCESS

            try:
                self.execute(line)
            except ExitShell as e:
                logger.debug("exit requested with status %d", e.exit_code)
                return e.exit_code
