"""Traversal for walks.

The traverser walks depth-first, pre-order: a directory is yielded before
its contents. Errors reported by the adapter are passed through in order and
never stop the traversal.
"""

import logging
from typing import FrozenSet, Iterator, Union

from ..config import DepthConfig
from ..errors import LinkCycleError, WalkError
from .adapter import FileSystemAdapter
from .node import WalkEntry

logger = logging.getLogger(__name__)


class DepthFirstPreOrderTraverser:
    """Depth-first pre-order traversal strategy.

    Visits parent before children. Children are read lazily, one directory
    at a time, as the caller pulls entries.
    """

    def __init__(self, adapter: FileSystemAdapter, depth: DepthConfig):
        """Initialize traverser with an adapter.

        Args:
            adapter: FileSystemAdapter for navigating the tree
            depth: Depth bounds for yielding and exploring
        """
        self.adapter = adapter
        self.depth = depth

    def traverse(self, root: WalkEntry) -> Iterator[Union[WalkEntry, WalkError]]:
        """Traverse the tree starting from root.

        Yields:
            WalkEntry for each entry within the depth bounds, and WalkError
            for each entry that could not be read
        """
        yield from self._traverse(root, frozenset())

    def _traverse(self,
                  entry: WalkEntry,
                  ancestors: FrozenSet[str]) -> Iterator[Union[WalkEntry, WalkError]]:
        if self.depth.should_yield(entry.depth):
            yield entry

        if not self.depth.should_explore(entry.depth) or not self.adapter.should_descend(entry):
            return

        # Only followed links can revisit a directory.
        if self.adapter.follow_links:
            real = self.adapter.resolve(entry)
            if real in ancestors:
                logger.debug("link cycle at %s -> %s", entry.path, real)
                yield LinkCycleError(entry.path, entry.depth, real)
                return
            ancestors = ancestors | {real}

        for child in self.adapter.get_children(entry):
            if isinstance(child, WalkError):
                yield child
            else:
                yield from self._traverse(child, ancestors)
