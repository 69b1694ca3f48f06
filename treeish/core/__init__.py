"""Core types for treeish.

Nothing in this package touches the filesystem: it parses, validates and
holds values. Walking lives in treeish.walk.
"""

from .glob import Glob
from .text import Borrowed, Owned, Text
from .treeish import Treeish, TreeishGlob, TreeishKind, TreeishPath, Unrooted

__all__ = [
    "Borrowed",
    "Glob",
    "Owned",
    "Text",
    "Treeish",
    "TreeishGlob",
    "TreeishKind",
    "TreeishPath",
    "Unrooted",
]
