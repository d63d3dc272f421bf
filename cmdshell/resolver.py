"""
Command resolution.

Maps a command name to a builtin, an executable on the search path,
or nothing. The builtin set is the closed Builtin enum; there is no
registration API.
"""

import logging
import os
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .context import CommandContext
from .filesystem_interface import FileSystemInterface
from .path_manager import SearchPath

logger = logging.getLogger(__name__)


class Builtin(Enum):
    """Commands implemented by the shell itself."""

    ECHO = "echo"
    TYPE = "type"
    EXIT = "exit"
    PWD = "pwd"
    CD = "cd"

    @classmethod
    def lookup(cls, name: str) -> Optional['Builtin']:
        """Return the builtin called ``name``, or None"""
        try:
            return cls(name)
        except ValueError:
            return None


class ResolutionKind(Enum):
    """Outcome tag of resolving a command name."""

    BUILTIN = "builtin"
    EXTERNAL = "external"
    NOT_FOUND = "not_found"


@dataclass(frozen=True)
class ResolutionResult:
    """
    Tagged outcome of resolving a command name.

    Attributes:
        kind: Which outcome this is
        name: The name that was resolved
        builtin: The matching builtin (BUILTIN only)
        path: Path of the executable (EXTERNAL only)
    """

    kind: ResolutionKind
    name: str
    builtin: Optional[Builtin] = None
    path: Optional[str] = None

    @classmethod
    def for_builtin(cls, builtin: Builtin) -> 'ResolutionResult':
        return cls(ResolutionKind.BUILTIN, builtin.value, builtin=builtin)

    @classmethod
    def for_external(cls, name: str, path: str) -> 'ResolutionResult':
        return cls(ResolutionKind.EXTERNAL, name, path=path)

    @classmethod
    def not_found(cls, name: str) -> 'ResolutionResult':
        return cls(ResolutionKind.NOT_FOUND, name)

    @property
    def is_builtin(self) -> bool:
        return self.kind is ResolutionKind.BUILTIN

    @property
    def is_external(self) -> bool:
        return self.kind is ResolutionKind.EXTERNAL

    @property
    def is_found(self) -> bool:
        return self.kind is not ResolutionKind.NOT_FOUND


def is_builtin(name: str) -> Optional[str]:
    """
    Describe ``name`` if it is a builtin.

    Name-only check; it does not validate arguments.

    Examples:
        >>> is_builtin('cd')
        'cd is a shell builtin'
        >>> is_builtin('ls') is None
        True
    """
    if Builtin.lookup(name) is None:
        return None
    return f"{name} is a shell builtin"


def is_command_name(name: str) -> bool:
    """Check that ``name`` names a file directly inside a directory"""
    if name in ("", os.curdir, os.pardir):
        return False
    return os.sep not in name and not (os.altsep and os.altsep in name)


def resolve_external(name: str, search_path: SearchPath,
                     filesystem: FileSystemInterface) -> Optional[str]:
    """
    Find the first executable called ``name`` on the search path.

    A candidate matches only if it is a regular file directly inside one of
    the directories and has at least one execute permission bit.
    Names containing a path separator, and the empty, '.' and '..' names,
    never resolve.

    Args:
        name: Command name
        search_path: Directories to search, in order
        filesystem: Filesystem used for the metadata checks

    Returns:
        Path of the first match, or None
    """
    if not is_command_name(name):
        logger.debug("%r is not a plain command name", name)
        return None

    for candidate in search_path.candidates(name):
        if filesystem.is_executable_file(candidate):
            logger.debug("resolved %s to %s", name, candidate)
            return candidate
    logger.debug("%s not found in %d search directories", name, len(search_path))
    return None


def resolve(name: str, context: CommandContext) -> ResolutionResult:
    """Classify ``name`` as a builtin, an external executable, or not found"""
    builtin = Builtin.lookup(name)
    if builtin is not None:
        return ResolutionResult.for_builtin(builtin)

    path = resolve_external(name, context.search_path, context.filesystem)
    if path is not None:
        return ResolutionResult.for_external(name, path)

    return ResolutionResult.not_found(name)
