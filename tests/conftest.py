"""
Pytest configuration and shared fixtures for cmdshell tests.

This module provides reusable test fixtures for:
- A fabricated filesystem (MockFileSystem) so cd/pwd/resolution can be
  tested without touching real process state
- Contexts and dispatchers built on it
- Real executables written to a temporary directory for process tests
"""

import errno
import os
import stat
from typing import Dict, Optional, Set

import pytest

from cmdshell.context import CommandContext
from cmdshell.dispatcher import Dispatcher
from cmdshell.filesystem_interface import FileSystemInterface, LocalFileSystem
from cmdshell.path_manager import SearchPath


# ============================================================================
# Mock Filesystem Implementation
# ============================================================================

def _os_error(cls, code: int, path: str) -> OSError:
    return cls(code, os.strerror(code), path)


class MockFileSystem(FileSystemInterface):
    """
    In-memory filesystem for testing without touching the real process.

    Tracks directories (with modes), files (with modes) and a virtual cwd.
    Directory changes raise the same OSError subclasses, with errno set,
    that os.chdir would.
    """

    def __init__(self, cwd: str = '/'):
        self.directories: Dict[str, int] = {'/': 0o755}
        self.files: Dict[str, int] = {}
        self.cwd = cwd
        self.getcwd_error: Optional[OSError] = None
        self.chdir_calls = []
        if cwd != '/':
            self.add_directory(cwd)

    def _normalize(self, path: str) -> str:
        if not path.startswith('/'):
            path = os.path.join(self.cwd, path)
        return os.path.normpath(path)

    def add_directory(self, path: str, mode: int = 0o755) -> None:
        """Create a directory and any missing parents."""
        path = self._normalize(path)
        parent = os.path.dirname(path)
        if parent not in self.directories:
            self.add_directory(parent)
        self.directories[path] = mode

    def add_file(self, path: str, mode: int = 0o644) -> None:
        """Create a file (and its parent directories) with the given mode."""
        path = self._normalize(path)
        parent = os.path.dirname(path)
        if parent not in self.directories:
            self.add_directory(parent)
        self.files[path] = mode

    def add_executable(self, path: str) -> None:
        self.add_file(path, mode=0o755)

    def getcwd(self) -> str:
        if self.getcwd_error is not None:
            raise self.getcwd_error
        return self.cwd

    def chdir(self, path: str) -> None:
        self.chdir_calls.append(path)
        target = self._normalize(path)
        if target in self.files:
            raise _os_error(NotADirectoryError, errno.ENOTDIR, path)
        if target not in self.directories:
            raise _os_error(FileNotFoundError, errno.ENOENT, path)
        if not self.directories[target] & stat.S_IXUSR:
            raise _os_error(PermissionError, errno.EACCES, path)
        self.cwd = target

    def is_executable_file(self, path: str) -> bool:
        mode = self.files.get(self._normalize(path))
        return mode is not None and bool(mode & 0o111)


# ============================================================================
# Filesystem and Context Fixtures
# ============================================================================

@pytest.fixture
def mock_filesystem():
    """
    Provides a fabricated filesystem with a small standard layout.

    Layout:
        /bin/ls, /usr/bin/ls, /usr/bin/git   (executables)
        /home/u, /home/u/sub                 (directories)
        /etc/passwd                          (regular file)
    """
    fs = MockFileSystem()
    fs.add_executable('/bin/ls')
    fs.add_executable('/usr/bin/ls')
    fs.add_executable('/usr/bin/git')
    fs.add_directory('/home/u/sub')
    fs.add_file('/etc/passwd')
    return fs


@pytest.fixture
def mock_env() -> Dict[str, str]:
    """Environment with HOME and a PATH matching mock_filesystem."""
    return {'HOME': '/home/u', 'PATH': '/bin:/usr/bin'}


@pytest.fixture
def mock_context(mock_filesystem, mock_env):
    """CommandContext over the fabricated filesystem."""
    return CommandContext.from_environ(mock_env, filesystem=mock_filesystem)


@pytest.fixture
def dispatcher(mock_context):
    """Dispatcher over the fabricated filesystem."""
    return Dispatcher(mock_context)


# ============================================================================
# Real Executables
# ============================================================================

def write_script(directory, name: str, body: str, mode: int = 0o755):
    """
    Write a /bin/sh script into ``directory`` and set its mode.

    Returns:
        pathlib.Path of the script
    """
    script = directory / name
    script.write_text(f"#!/bin/sh\n{body}\n")
    script.chmod(mode)
    return script


@pytest.fixture
def bin_dir(tmp_path):
    """An empty directory to put test executables in."""
    path = tmp_path / 'bin'
    path.mkdir()
    return path


@pytest.fixture
def local_context(bin_dir, tmp_path, monkeypatch):
    """
    CommandContext over the real filesystem with bin_dir as the only PATH entry.

    The process cwd is moved into tmp_path and restored after the test.
    """
    monkeypatch.chdir(tmp_path)
    env = {'HOME': str(tmp_path), 'PATH': str(bin_dir)}
    return CommandContext(
        env=env,
        search_path=SearchPath.from_string(env['PATH']),
        filesystem=LocalFileSystem(),
    )


# Make the script helper available to test modules
pytest.write_script = write_script
