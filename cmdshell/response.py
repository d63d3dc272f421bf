"""Response - the single textual result of executing one command line."""

from dataclasses import dataclass

from .exceptions import ShellError
from .exit_codes import EXIT_CODE_FAILURE, EXIT_CODE_SUCCESS


@dataclass(frozen=True)
class Response:
    """
    Result of one command line.

    An empty text means "no output, no error". Error responses are routed
    to stderr by the shell loop, everything else to stdout.

    Example:
        >>> Response.success('a b')
        Response(text='a b', is_error=False, exit_code=0)
        >>> Response.empty().is_empty
        True
    """

    text: str = ''
    is_error: bool = False
    exit_code: int = EXIT_CODE_SUCCESS

    @classmethod
    def empty(cls) -> 'Response':
        return cls()

    @classmethod
    def success(cls, text: str, exit_code: int = EXIT_CODE_SUCCESS) -> 'Response':
        return cls(text=text, is_error=False, exit_code=exit_code)

    @classmethod
    def error(cls, text: str, exit_code: int = EXIT_CODE_FAILURE) -> 'Response':
        return cls(text=text, is_error=True, exit_code=exit_code)

    @classmethod
    def from_exception(cls, error: ShellError) -> 'Response':
        """Build an error response carrying the exception's message and exit code"""
        return cls.error(error.message, exit_code=error.exit_code)

    @property
    def is_empty(self) -> bool:
        return not self.text
