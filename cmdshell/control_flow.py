"""
Control flow exceptions.

These are not errors: they unwind from a command back to the shell loop.
Process.execute() lets them propagate untouched.
"""

from .exit_codes import EXIT_CODE_SUCCESS


class ControlFlowException(Exception):
    """Base class for exceptions that transfer control to the shell loop"""
    pass


class ExitShell(ControlFlowException):
    """
    Raised by the exit builtin to terminate the shell.

    Attributes:
        exit_code: Status the process should terminate with
    """

    def __init__(self, exit_code: int = EXIT_CODE_SUCCESS):
        super().__init__(f"exit {exit_code}")
        self.exit_code = exit_code
