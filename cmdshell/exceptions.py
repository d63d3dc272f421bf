"""
Custom exception hierarchy for cmdshell.

This module defines a structured exception hierarchy that provides:
- Clear error categorization
- The exact user-facing message for each failure
- Proper exit codes

Commands raise these; Process.execute() turns them into error Responses.

Usage:
    from cmdshell.exceptions import CommandNotFoundError

    try:
        ...
    except ShellError as e:
        print(e, file=sys.stderr)
        return e.exit_code
"""

import errno
from typing import Optional

from .exit_codes import (
    EXIT_CODE_CANNOT_EXECUTE,
    EXIT_CODE_FAILURE,
    EXIT_CODE_NOT_FOUND,
    EXIT_CODE_USAGE,
)


class ShellError(Exception):
    """
    Base class for all shell errors.

    All custom exceptions should inherit from this class.
    This allows catching all shell-specific errors with a single except clause.

    Attributes:
        message: Error message, already formatted for the user
        exit_code: Suggested exit code (default: 1)
    """

    def __init__(self, message: str, exit_code: int = EXIT_CODE_FAILURE):
        super().__init__(message)
        self.message = message
        self.exit_code = exit_code

    def __str__(self):
        return self.message


class ShellIOError(ShellError):
    """
    Raised when the shell cannot read its input or write its output.

    Fatal for the read-eval-print loop; there is no retry.
    """

    def __init__(self, operation: str, error: Optional[BaseException] = None):
        message = f"Failed {operation}"
        if error is not None:
            message = f"{message}: {error}"
        super().__init__(message, exit_code=EXIT_CODE_FAILURE)
        self.operation = operation


# =============================================================================
# File System Errors
# =============================================================================

class FileSystemError(ShellError):
    """
    Base class for filesystem-related errors.

    Raised when filesystem operations fail.
    """

    def __init__(self, message: str, path: Optional[str] = None,
                 exit_code: int = EXIT_CODE_FAILURE, strerror: Optional[str] = None):
        super().__init__(message, exit_code)
        self.path = path
        self.strerror = strerror or message


class FileNotFoundError(FileSystemError):
    """
    Raised when a file or directory does not exist.

    Example:
        raise FileNotFoundError("/path/to/file")
    """

    def __init__(self, path: str, message: Optional[str] = None):
        if message is None:
            message = f"{path}: No such file or directory"
        super().__init__(message, path, strerror="No such file or directory")


class PermissionDeniedError(FileSystemError):
    """
    Raised when permission is denied for a filesystem operation.

    Example:
        raise PermissionDeniedError("/root")
    """

    def __init__(self, path: str, message: Optional[str] = None):
        if message is None:
            message = f"{path}: Permission denied"
        super().__init__(message, path, strerror="Permission denied")


class NotADirectoryError(FileSystemError):
    """
    Raised when a directory operation is attempted on a file.

    Example:
        raise NotADirectoryError("/etc/passwd")
    """

    def __init__(self, path: str, message: Optional[str] = None):
        if message is None:
            message = f"{path}: Not a directory"
        super().__init__(message, path, strerror="Not a directory")


# =============================================================================
# Command Errors
# =============================================================================

class CommandError(ShellError):
    """
    Base class for command-related errors.

    Raised when command execution fails.
    """

    def __init__(self, command: str, message: str, exit_code: int = EXIT_CODE_FAILURE):
        super().__init__(message, exit_code)
        self.command = command


class CommandNotFoundError(CommandError):
    """
    Raised when a command is neither a builtin nor on the search path.

    Example:
        raise CommandNotFoundError("nonexistent")
    """

    def __init__(self, command: str):
        message = f"{command}: command not found"
        super().__init__(command, message, exit_code=EXIT_CODE_NOT_FOUND)


class CommandExecutionError(CommandError):
    """
    Raised when a resolved executable cannot be launched.

    Example:
        raise CommandExecutionError("ls", "Exec format error")
    """

    def __init__(self, command: str, reason: Optional[str] = None):
        message = f"{command}: failed to execute"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(command, message, exit_code=EXIT_CODE_CANNOT_EXECUTE)
        self.reason = reason


class InvalidArgumentError(CommandError):
    """
    Raised when invalid arguments are provided to a command.

    Example:
        raise InvalidArgumentError("exit", "abc", "numeric argument required")
    """

    def __init__(self, command: str, argument: str, details: str = "invalid argument"):
        message = f"{command}: {argument}: {details}"
        super().__init__(command, message, exit_code=EXIT_CODE_FAILURE)
        self.argument = argument


class CommandSyntaxError(CommandError):
    """
    Raised when a command is called with the wrong shape of arguments.

    Example:
        raise CommandSyntaxError("type", "expected an argument of a command name")
    """

    def __init__(self, command: str, details: str):
        message = f"{command}: {details}"
        super().__init__(command, message, exit_code=EXIT_CODE_USAGE)


class HomeNotSetError(CommandError):
    """Raised when a command needs HOME and the environment has none."""

    def __init__(self, command: str):
        message = f"{command}: HOME environment variable not set"
        super().__init__(command, message, exit_code=EXIT_CODE_FAILURE)


# =============================================================================
# Utility Functions
# =============================================================================

def translate_os_error(error: OSError, path: Optional[str] = None) -> FileSystemError:
    """
    Translate an OSError into a specific FileSystemError.

    Classification uses errno, never the message text.

    Args:
        error: The OSError raised by the operating system
        path: Optional path that caused the error

    Returns:
        Specific FileSystemError subclass

    Example:
        try:
            os.chdir(path)
        except OSError as e:
            raise translate_os_error(e, path)
    """
    path = path if path is not None else (error.filename or "unknown")

    if error.errno == errno.ENOENT:
        return FileNotFoundError(path)

    if error.errno in (errno.EACCES, errno.EPERM):
        return PermissionDeniedError(path)

    if error.errno == errno.ENOTDIR:
        return NotADirectoryError(path)

    strerror = error.strerror or str(error)
    return FileSystemError(f"{path}: {strerror}", path=path, strerror=strerror)
