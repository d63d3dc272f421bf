"""
Tests for command resolution.

Tests cover:
- Builtin: the closed set of builtin names
- is_builtin: name-only builtin descriptions
- resolve_external: search order and executable checks, on both the
  fabricated and the real filesystem
- resolve: the combined classification
"""

import os

import pytest

from cmdshell.filesystem_interface import LocalFileSystem
from cmdshell.path_manager import SearchPath
from cmdshell.resolver import (
    Builtin,
    ResolutionKind,
    ResolutionResult,
    is_builtin,
    resolve,
    resolve_external,
)


class TestBuiltin:
    """Tests for the Builtin enum."""

    def test_closed_set(self):
        """Test exactly the five builtins exist."""
        assert {b.value for b in Builtin} == {"echo", "type", "exit", "pwd", "cd"}

    def test_lookup(self):
        """Test lookup by name."""
        assert Builtin.lookup("cd") is Builtin.CD

    def test_lookup_unknown(self):
        """Test unknown names give None."""
        assert Builtin.lookup("ls") is None
        assert Builtin.lookup("ECHO") is None


class TestIsBuiltin:
    """Tests for is_builtin()."""

    @pytest.mark.parametrize("name", ["echo", "type", "exit", "pwd", "cd"])
    def test_builtins_described(self, name):
        """Test every builtin gets its description."""
        assert is_builtin(name) == f"{name} is a shell builtin"

    @pytest.mark.parametrize("name", ["ls", "", "echo2", "history"])
    def test_non_builtins(self, name):
        """Test other names give None."""
        assert is_builtin(name) is None


class TestResolveExternalMock:
    """Tests for resolve_external() on the fabricated filesystem."""

    def test_first_directory_wins(self, mock_filesystem):
        """Test the earliest directory in the path is used."""
        path = SearchPath.from_string("/bin:/usr/bin")
        assert resolve_external("ls", path, mock_filesystem) == "/bin/ls"

    def test_order_follows_search_path(self, mock_filesystem):
        """Test reversing the path reverses the result."""
        path = SearchPath.from_string("/usr/bin:/bin")
        assert resolve_external("ls", path, mock_filesystem) == "/usr/bin/ls"

    def test_later_directory_used_when_earlier_lacks_it(self, mock_filesystem):
        """Test searching continues past directories without a match."""
        path = SearchPath.from_string("/bin:/usr/bin")
        assert resolve_external("git", path, mock_filesystem) == "/usr/bin/git"

    def test_non_executable_skipped(self, mock_filesystem):
        """Test a file without execute bits is passed over."""
        mock_filesystem.add_file("/opt/bin/git", mode=0o644)
        path = SearchPath.from_string("/opt/bin:/usr/bin")
        assert resolve_external("git", path, mock_filesystem) == "/usr/bin/git"

    def test_directory_never_matches(self, mock_filesystem):
        """Test a directory with the command's name is not a match."""
        mock_filesystem.add_directory("/opt/bin/git", mode=0o755)
        path = SearchPath.from_string("/opt/bin")
        assert resolve_external("git", path, mock_filesystem) is None

    def test_not_found(self, mock_filesystem):
        """Test unknown commands give None."""
        path = SearchPath.from_string("/bin:/usr/bin")
        assert resolve_external("nonexistentcmd123", path, mock_filesystem) is None

    def test_empty_search_path(self, mock_filesystem):
        """Test nothing resolves with no directories."""
        assert resolve_external("ls", SearchPath(), mock_filesystem) is None

    def test_nested_name_not_resolved(self, mock_filesystem):
        """Test a file below a search directory is not a match."""
        mock_filesystem.add_executable("/bin/sub/tool")
        path = SearchPath.from_string("/bin")
        assert resolve_external("sub/tool", path, mock_filesystem) is None

    def test_absolute_name_not_resolved(self, mock_filesystem):
        """Test an absolute name does not escape the search directories."""
        path = SearchPath.from_string("/bin")
        assert resolve_external("/usr/bin/git", path, mock_filesystem) is None

    @pytest.mark.parametrize("name", ["", ".", ".."])
    def test_special_names_not_resolved(self, mock_filesystem, name):
        """Test names that are not file names never resolve."""
        mock_filesystem.add_executable("/bin/x")
        assert resolve_external(name, SearchPath.from_string("/bin"), mock_filesystem) is None


class TestResolveExternalLocal:
    """Tests for resolve_external() against real files."""

    def test_executable_found(self, bin_dir):
        """Test an executable regular file resolves."""
        script = pytest.write_script(bin_dir, "hello", "echo hi")
        path = SearchPath.from_string(str(bin_dir))
        assert resolve_external("hello", path, LocalFileSystem()) == str(script)

    @pytest.mark.parametrize("mode", [0o700, 0o710, 0o701, 0o100, 0o010, 0o001])
    def test_any_execute_bit_counts(self, bin_dir, mode):
        """Test owner, group or other execute bits are each enough."""
        script = pytest.write_script(bin_dir, "tool", "true", mode=mode)
        path = SearchPath.from_string(str(bin_dir))
        try:
            assert resolve_external("tool", path, LocalFileSystem()) == str(script)
        finally:
            script.chmod(0o644)

    def test_readable_but_not_executable(self, bin_dir):
        """Test read permission alone is not enough."""
        pytest.write_script(bin_dir, "tool", "true", mode=0o644)
        path = SearchPath.from_string(str(bin_dir))
        assert resolve_external("tool", path, LocalFileSystem()) is None

    def test_executable_directory_skipped(self, tmp_path, bin_dir):
        """Test a directory named like the command is skipped."""
        first = tmp_path / "first"
        (first / "tool").mkdir(parents=True)
        script = pytest.write_script(bin_dir, "tool", "true")
        path = SearchPath((str(first), str(bin_dir)))
        assert resolve_external("tool", path, LocalFileSystem()) == str(script)

    def test_first_match_in_order(self, tmp_path):
        """Test two executables with the same name resolve to the first directory."""
        a = tmp_path / "a"
        b = tmp_path / "b"
        a.mkdir()
        b.mkdir()
        pytest.write_script(a, "x", "echo a")
        pytest.write_script(b, "x", "echo b")
        fs = LocalFileSystem()
        assert resolve_external("x", SearchPath((str(a), str(b))), fs) == os.path.join(str(a), "x")
        assert resolve_external("x", SearchPath((str(b), str(a))), fs) == os.path.join(str(b), "x")

    def test_nested_executable_not_resolved(self, bin_dir):
        """Test an executable in a subdirectory of a search directory is skipped."""
        sub = bin_dir / "sub"
        sub.mkdir()
        pytest.write_script(sub, "tool", "echo nested")
        path = SearchPath.from_string(str(bin_dir))
        assert resolve_external("sub/tool", path, LocalFileSystem()) is None

    def test_absolute_executable_not_resolved(self, bin_dir, tmp_path):
        """Test an absolute path outside the search directories is not a match."""
        other = tmp_path / "other"
        other.mkdir()
        script = pytest.write_script(other, "tool", "true")
        path = SearchPath.from_string(str(bin_dir))
        assert resolve_external(str(script), path, LocalFileSystem()) is None

    def test_embedded_nul_not_resolved(self, bin_dir):
        """Test a name the OS cannot represent resolves to nothing."""
        path = SearchPath.from_string(str(bin_dir))
        assert resolve_external("ls\x00x", path, LocalFileSystem()) is None

    def test_missing_directory_ignored(self, tmp_path, bin_dir):
        """Test directories that do not exist are skipped."""
        script = pytest.write_script(bin_dir, "tool", "true")
        path = SearchPath((str(tmp_path / "missing"), str(bin_dir)))
        assert resolve_external("tool", path, LocalFileSystem()) == str(script)


class TestResolve:
    """Tests for resolve()."""

    def test_builtin_wins_over_path(self, mock_context, mock_filesystem):
        """Test a builtin name is a builtin even if an executable exists."""
        mock_filesystem.add_executable("/bin/echo")
        result = resolve("echo", mock_context)
        assert result.kind is ResolutionKind.BUILTIN
        assert result.builtin is Builtin.ECHO
        assert result.path is None

    def test_external(self, mock_context):
        """Test an executable on the path resolves externally."""
        result = resolve("ls", mock_context)
        assert result == ResolutionResult.for_external("ls", "/bin/ls")
        assert result.is_external
        assert result.is_found

    def test_not_found(self, mock_context):
        """Test unknown names are not found."""
        result = resolve("nope", mock_context)
        assert result.kind is ResolutionKind.NOT_FOUND
        assert not result.is_found
        assert result.name == "nope"
