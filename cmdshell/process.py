"""Process class for command execution"""

import logging
from typing import Callable, List, Optional

from .context import CommandContext
from .control_flow import ControlFlowException
from .exceptions import CommandNotFoundError, ShellError
from .response import Response

logger = logging.getLogger(__name__)

Executor = Callable[['Process'], Response]


class Process:
    """Represents a single command invocation"""

    def __init__(
        self,
        command: str,
        args: List[str],
        context: CommandContext,
        executor: Optional[Executor] = None,
    ):
        """
        Initialize a process

        Args:
            command: Command name as typed
            args: Command arguments
            context: CommandContext with environment, search path and filesystem
            executor: Callable that runs the command and returns its Response;
                None means the command could not be resolved
        """
        self.command = command
        self.args = args
        self.context = context
        self.executor = executor

    def execute(self) -> Response:
        """
        Execute the process

        Shell errors raised by the executor become error responses.
        Control flow exceptions (exit) and any other exception propagate.

        Returns:
            The command's Response
        """
        if self.executor is None:
            response = Response.from_exception(CommandNotFoundError(self.command))
        else:
            try:
                response = self.executor(self)
            except ControlFlowException:
                raise
            except ShellError as e:
                logger.debug("%s failed: %s", self.command, e)
                response = Response.from_exception(e)

        return response

    def __repr__(self):
        args_str = ' '.join(self.args) if self.args else ''
        return f"Process({self.command} {args_str})"
