"""
Dispatcher - turns one line of input into one Response.

The line is tokenized, the leading token resolved, and the matching
builtin or external program run through a Process.
"""

import logging
from typing import Optional

from .commands import get_builtin
from .context import CommandContext
from .external import ExternalCommand
from .lexer import CommandLine
from .process import Executor, Process
from .resolver import ResolutionResult, resolve
from .response import Response

logger = logging.getLogger(__name__)


class Dispatcher:
    """
    Executes command lines against a CommandContext.

    Example:
        >>> dispatcher = Dispatcher(CommandContext.from_environ())
        >>> dispatcher.dispatch('echo a   b').text
        'a b'
    """

    def __init__(self, context: CommandContext):
        self.context = context

    def dispatch(self, line: str) -> Response:
        """
        Execute one line of input.

        Args:
            line: Raw input line (a trailing newline is fine)

        Returns:
            The line's Response; empty for a blank line

        Raises:
            ExitShell: When the line runs the exit builtin
        """
        command_line = CommandLine.parse(line)
        if command_line.is_empty:
            return Response.empty()

        result = resolve(command_line.command, self.context)
        logger.debug("%r resolved as %s", command_line, result.kind.value)

        process = Process(
            command=command_line.command,
            args=command_line.args,
            context=self.context,
            executor=self._executor_for(result),
        )
        return process.execute()

    @staticmethod
    def _executor_for(result: ResolutionResult) -> Optional[Executor]:
        if result.is_builtin:
            return get_builtin(result.builtin)
        if result.is_external:
            return ExternalCommand(result.path)
        return None
