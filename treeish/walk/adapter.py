"""Filesystem adapter for walks.

The adapter knows how to navigate a filesystem tree: how to list the
children of an entry and whether an entry should be descended into. The
traverser decides the order; the adapter decides the structure.

Unlike a silent listing, a directory that cannot be read is reported as a
WalkError in place of its children, so callers see what was skipped.
"""

import logging
import os
from pathlib import Path
from typing import Iterator, Union

from ..config import LinkBehavior
from ..errors import WalkError
from .node import WalkEntry

logger = logging.getLogger(__name__)


class FileSystemAdapter:
    """Adapter for filesystem walks."""

    def __init__(self, link: LinkBehavior = LinkBehavior.READ_FILE):
        """Initialize filesystem adapter.

        Args:
            link: What to do with symbolic links below the root
        """
        self.link = link

    @property
    def follow_links(self) -> bool:
        return self.link is LinkBehavior.READ_TARGET

    def create_root(self, path: Union[str, Path]) -> Union[WalkEntry, WalkError]:
        """Create the root entry of a walk, or an error if it cannot be read."""
        root = Path(path)
        try:
            return WalkEntry.for_root(root)
        except OSError as e:
            logger.debug("cannot read walk root %s: %s", root, e)
            return WalkError(root, 0, e)

    def should_descend(self, entry: WalkEntry) -> bool:
        """Check if the children of an entry should be listed.

        The root is always descended into if it is a directory, even when it
        is reached through a link.
        """
        if not entry.is_root() and entry.is_symlink() and not self.follow_links:
            return False
        try:
            return entry.is_dir()
        except OSError:
            return False

    def get_children(self, entry: WalkEntry) -> Iterator[Union[WalkEntry, WalkError]]:
        """Get child entries (files and subdirectories), sorted by name."""
        try:
            names = sorted(os.listdir(entry.path))
        except OSError as e:
            logger.debug("cannot list %s: %s", entry.path, e)
            yield WalkError(entry.path, entry.depth, e)
            return

        for name in names:
            yield entry.child(name)

    def resolve(self, entry: WalkEntry) -> str:
        """Return the real path of an entry, with every link resolved."""
        return os.path.realpath(entry.path)
