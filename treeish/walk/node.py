"""Walk entries.

A WalkEntry is one file, directory or link found by a walk. Like the nodes
of a tree traversal, it is primarily a data container: how to find its
children is the adapter's job. Filesystem data is read on demand and cached.
"""

import os
import stat
from pathlib import Path
from typing import Optional, Tuple


class WalkEntry:
    """A filesystem entry produced by a walk."""

    def __init__(self,
                 path: Path,
                 root: Path,
                 depth: int = 0,
                 parts: Tuple[str, ...] = (),
                 parent: Optional['WalkEntry'] = None):
        """Initialize a walk entry.

        Args:
            path: Path to the entry, as it would be opened
            root: Root of the walk that found this entry
            depth: Depth below the root (root = 0)
            parts: Components of the path relative to the root
            parent: Entry this one was found in (None for the root)
        """
        self.path = path
        self.root = root
        self.depth = depth
        self.parts = parts
        self.parent = parent
        self._lstat: Optional[os.stat_result] = None

    @classmethod
    def for_root(cls, root: Path) -> 'WalkEntry':
        """Create the entry at the root of a walk.

        Raises:
            OSError: If the root cannot be read
        """
        entry = cls(root, root)
        entry.lstat()
        return entry

    def child(self, name: str) -> 'WalkEntry':
        return WalkEntry(
            self.path / name,
            self.root,
            depth=self.depth + 1,
            parts=self.parts + (name,),
            parent=self,
        )

    @property
    def relative_path(self) -> str:
        """Path relative to the root, with '/' separators ('' for the root)."""
        return "/".join(self.parts)

    def identifier(self) -> str:
        """Return absolute path as unique identifier."""
        return os.path.abspath(self.path)

    def lstat(self) -> os.stat_result:
        if self._lstat is None:
            self._lstat = os.lstat(self.path)
        return self._lstat

    def is_symlink(self) -> bool:
        try:
            return stat.S_ISLNK(self.lstat().st_mode)
        except OSError:
            return False

    def is_dir(self) -> bool:
        """Check if this is a directory, following links."""
        return self.path.is_dir()

    def is_file(self) -> bool:
        """Check if this is a regular file, following links."""
        return self.path.is_file()

    def is_root(self) -> bool:
        return self.parent is None

    def __fspath__(self) -> str:
        return os.fspath(self.path)

    def __str__(self) -> str:
        return str(self.path)

    def __repr__(self) -> str:
        return f"WalkEntry(path={self.path!r}, depth={self.depth})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, WalkEntry):
            return NotImplemented
        return self.identifier() == other.identifier()

    def __hash__(self) -> int:
        return hash(self.identifier())
