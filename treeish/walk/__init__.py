"""Walking the tree a Treeish names.

`walk()` maps each kind of Treeish onto a walk of the filesystem:

    PATH      every entry under the path (the path itself included)
    GLOB      entries under the working directory that match the glob
    GLOB_IN   entries under the tree that match the glob
    EMPTY     nothing

Walks are lazy and single-pass. Errors are yielded as WalkError objects
alongside the entries and do not end the walk.
"""

import logging
import os
from dataclasses import replace
from typing import Iterator, Optional, Union

from ..config import DepthConfig, WalkBehavior
from ..core.glob import Glob
from ..core.treeish import Treeish, TreeishKind
from ..errors import WalkError
from .adapter import FileSystemAdapter
from .node import WalkEntry
from .traverser import DepthFirstPreOrderTraverser

logger = logging.getLogger(__name__)

DEFAULT_ROOT = os.curdir

WalkItem = Union[WalkEntry, WalkError]


def _selects(glob: Glob, entry: WalkEntry) -> bool:
    if glob.is_empty():
        return True
    return not entry.is_root() and glob.is_match(entry.relative_path)


def walk_tree(root: Union[str, "os.PathLike[str]"],
              glob: Glob,
              behavior: WalkBehavior) -> Iterator[WalkItem]:
    """Walk everything under `root`, yielding entries whose path relative to
    `root` matches `glob`.

    The empty glob selects every entry, the root included. Any other glob is
    relative to the root, so the root itself is never one of its matches.
    """
    adapter = FileSystemAdapter(link=behavior.link)
    start = adapter.create_root(root)
    if isinstance(start, WalkError):
        yield start
        return

    traverser = DepthFirstPreOrderTraverser(adapter, behavior.depth)
    for item in traverser.traverse(start):
        if isinstance(item, WalkError) or _selects(glob, item):
            yield item


def walk_glob(glob: Glob,
              directory: Union[str, "os.PathLike[str]"],
              behavior: WalkBehavior) -> Iterator[WalkItem]:
    """Walk the entries matching `glob` relative to `directory`.

    The literal prefix of the glob is joined to `directory` and becomes the
    root of the walk, so only the part of the tree that can match is read.
    A rooted glob replaces `directory` entirely.
    """
    prefix, rest = glob.partition()
    root = os.fspath(directory)
    if not prefix.is_empty():
        root = os.path.join(root, prefix.as_str())

    if rest.is_empty():
        # A literal glob names exactly one entry: the root.
        behavior = replace(
            behavior,
            depth=DepthConfig(min_depth=behavior.depth.min_depth, max_depth=0),
        )
    logger.debug("walking %r under %r", rest.as_str(), root)
    return walk_tree(root, rest, behavior)


def walk(treeish: Treeish, behavior: Optional[WalkBehavior] = None) -> Iterator[WalkItem]:
    """Lazily walk the tree a Treeish names.

    Args:
        treeish: What to walk
        behavior: Depth bounds and link policy (default: unbounded, links
            are reported but not followed)

    Returns:
        Iterator of WalkEntry and WalkError objects

    Raises:
        ValueError: If `behavior` is inconsistent
    """
    behavior = behavior if behavior is not None else WalkBehavior()
    errors = behavior.validate()
    if errors:
        raise ValueError(f"Invalid walk behavior: {'; '.join(errors)}")

    kind = treeish.kind
    if kind is TreeishKind.EMPTY:
        return iter(())
    if kind is TreeishKind.PATH:
        return walk_tree(treeish.tree, Glob.empty(), behavior)
    if kind is TreeishKind.GLOB:
        return walk_glob(treeish.pattern, DEFAULT_ROOT, behavior)
    return walk_glob(treeish.pattern, treeish.tree, behavior)


__all__ = [
    "DEFAULT_ROOT",
    "DepthFirstPreOrderTraverser",
    "FileSystemAdapter",
    "WalkEntry",
    "WalkItem",
    "walk",
    "walk_glob",
    "walk_tree",
]
