"""Search path and home directory handling for cmdshell.

This module provides:
- SearchPath: the ordered, immutable list of directories consulted when
  resolving an external command name
- expand_home: replacement of a leading ``~`` with the home directory
"""

import os
from dataclasses import dataclass
from typing import Iterator, Optional, Tuple

PATH_SEPARATOR = ":"


@dataclass(frozen=True)
class SearchPath:
    """Ordered sequence of directories searched for executables.

    Built once per process from the PATH environment variable and never
    mutated afterwards. Order is significant: the first directory holding
    a matching executable wins.

    Attributes:
        directories: Directories in search order
    """

    directories: Tuple[str, ...] = ()

    @classmethod
    def from_string(cls, value: Optional[str]) -> "SearchPath":
        """Parse a colon-separated PATH value.

        Empty entries are skipped and a missing value gives an empty path.

        Examples:
            from_string('/usr/bin:/bin') -> SearchPath(('/usr/bin', '/bin'))
            from_string('/bin::/sbin')   -> SearchPath(('/bin', '/sbin'))
            from_string(None)            -> SearchPath(())
        """
        if not value:
            return cls()
        return cls(tuple(entry for entry in value.split(PATH_SEPARATOR) if entry))

    def candidates(self, name: str) -> Iterator[str]:
        """Yield the path of ``name`` inside each directory, in search order."""
        for directory in self.directories:
            yield os.path.join(directory, name)

    def __iter__(self) -> Iterator[str]:
        return iter(self.directories)

    def __len__(self) -> int:
        return len(self.directories)

    def __str__(self) -> str:
        return PATH_SEPARATOR.join(self.directories)


def has_home_prefix(path: str) -> bool:
    """Check whether ``path`` starts with a home-directory marker.

    Only ``~`` on its own or followed by ``/`` counts; ``~user`` forms and
    tildes later in the path do not.
    """
    return path == "~" or path.startswith("~/")


def expand_home(path: str, home: Optional[str]) -> str:
    """Replace a leading ``~`` with ``home``.

    Tildes anywhere else are kept literally. Paths without a home prefix,
    or calls without a home value, are returned unchanged.

    Examples:
        expand_home('~', '/home/u')        -> '/home/u'
        expand_home('~/sub', '/home/u')    -> '/home/u/sub'
        expand_home('a~b', '/home/u')      -> 'a~b'
        expand_home('~/sub', None)         -> '~/sub'
    """
    if not home or not has_home_prefix(path):
        return path
    return home + path[1:]
