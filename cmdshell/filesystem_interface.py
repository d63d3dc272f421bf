"""
FileSystemInterface - Abstract interface for the filesystem operations the shell needs.

This module provides the FileSystemInterface abstract base class that lets the
resolver and the builtins work against either the real process filesystem
(LocalFileSystem) or a fabricated one in tests.
"""

import logging
import os
import stat
from abc import ABC, abstractmethod

logger = logging.getLogger(__name__)

# Any of the owner/group/other execute bits
EXECUTE_BITS = stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH


class FileSystemInterface(ABC):
    """
    Abstract interface for filesystem operations.

    Implementations:
    - LocalFileSystem (production, the real process state)
    - MockFileSystem (tests, see tests/conftest.py)
    """

    @abstractmethod
    def getcwd(self) -> str:
        """
        Get the absolute path of the current working directory.

        Raises:
            OSError: If the directory cannot be determined (e.g. it was deleted)
        """
        pass

    @abstractmethod
    def chdir(self, path: str) -> None:
        """
        Change the current working directory.

        Args:
            path: Target directory (absolute or relative to the current one)

        Raises:
            OSError: With errno set (ENOENT, EACCES, ENOTDIR, ...) on failure
            ValueError: If the path cannot be represented (embedded NUL)
        """
        pass

    @abstractmethod
    def is_executable_file(self, path: str) -> bool:
        """
        Check whether ``path`` is a regular file with an execute bit set.

        Decided from file metadata only, never by opening the file.
        Missing paths, directories and paths the OS rejects (e.g. an
        embedded NUL) return False.
        """
        pass


class LocalFileSystem(FileSystemInterface):
    """Filesystem backed by the running process (os module)."""

    def getcwd(self) -> str:
        return os.getcwd()

    def chdir(self, path: str) -> None:
        os.chdir(path)
        logger.debug("changed directory to %s", path)

    def is_executable_file(self, path: str) -> bool:
        try:
            mode = os.stat(path).st_mode
        except (OSError, ValueError):
            return False
        return stat.S_ISREG(mode) and bool(mode & EXECUTE_BITS)
