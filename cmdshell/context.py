"""
CommandContext - Encapsulates all context needed for command execution.

This module provides the CommandContext dataclass that decouples commands
from the process-wide environment and working directory, so tests can
substitute a fabricated environment and filesystem without touching real
process state.
"""

from dataclasses import dataclass, field
from typing import Dict, Mapping, Optional
import os

from .filesystem_interface import FileSystemInterface, LocalFileSystem
from .path_manager import SearchPath


@dataclass
class CommandContext:
    """
    Encapsulates all context needed for command execution.

    This provides commands with access to:
    - Environment variables (an opaque key-value lookup)
    - The search path, parsed once from PATH
    - File system operations (working directory, executable checks)

    Example:
        >>> ctx = CommandContext(env={'HOME': '/home/u'},
        ...                      search_path=SearchPath.from_string('/bin'))
        >>> ctx.home
        '/home/u'
        >>> list(ctx.search_path)
        ['/bin']
    """

    env: Dict[str, str] = field(default_factory=dict)
    search_path: SearchPath = field(default_factory=SearchPath)
    filesystem: FileSystemInterface = field(default_factory=LocalFileSystem)

    @classmethod
    def from_environ(cls, environ: Optional[Mapping[str, str]] = None,
                     filesystem: Optional[FileSystemInterface] = None) -> 'CommandContext':
        """
        Build a context from a process environment.

        PATH is read here and only here; later changes to the environment
        do not affect the search path.

        Args:
            environ: Environment mapping (defaults to os.environ)
            filesystem: Filesystem implementation (defaults to LocalFileSystem)
        """
        env = dict(os.environ if environ is None else environ)
        return cls(
            env=env,
            search_path=SearchPath.from_string(env.get('PATH')),
            filesystem=filesystem or LocalFileSystem(),
        )

    def get_variable(self, name: str) -> Optional[str]:
        """
        Get an environment value.

        Examples:
            >>> ctx = CommandContext(env={'USER': 'alice'})
            >>> ctx.get_variable('USER')
            'alice'
            >>> ctx.get_variable('MISSING') is None
            True
        """
        return self.env.get(name)

    @property
    def home(self) -> Optional[str]:
        """HOME value, or None when unset or empty"""
        return self.get_variable('HOME') or None

    @property
    def cwd(self) -> str:
        """Absolute path of the current working directory"""
        return self.filesystem.getcwd()

    def change_directory(self, path: str) -> None:
        """Change the working directory; raises OSError or ValueError on failure"""
        self.filesystem.chdir(path)

    def __repr__(self):
        """String representation for debugging"""
        return (
            f"CommandContext(env_vars={len(self.env)}, "
            f"search_path={str(self.search_path)!r}, "
            f"filesystem={type(self.filesystem).__name__})"
        )
