"""The Treeish entity.

A Treeish names part of a filesystem tree: a native path, a glob rooted at
the working directory, or a glob rooted at a native path. Values are built
once by parsing and validating an expression and never change afterwards.

Components are never empty. The empty expression produces the EMPTY kind,
which matches nothing, instead of a path or glob holding ''.
"""

import os
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING, Iterator, Optional, Tuple, Union

from ..errors import RuleError, TreeishConsumedError
from ..parse import (
    Partitioned,
    PartitionedGlob,
    PartitionedGlobIn,
    PartitionedPath,
    parse,
    partition_glob,
)
from .empty import path_text
from .glob import Glob
from .text import Borrowed, Text

if TYPE_CHECKING:
    from ..config import WalkBehavior
    from ..errors import WalkError
    from ..walk.node import WalkEntry


class TreeishKind(Enum):
    """Which components a Treeish holds."""
    EMPTY = "empty"        # Nothing; the empty expression
    PATH = "path"          # A native path
    GLOB = "glob"          # A glob rooted at the working directory
    GLOB_IN = "glob_in"    # A glob rooted at a native path


class TreeishPath:
    """A non-empty native path, kept exactly as it was written."""

    def __init__(self, text: Union[str, Text]):
        if isinstance(text, str):
            text = Borrowed(text)
        if text.is_empty():
            raise ValueError("TreeishPath cannot be empty")
        self._text = text

    @property
    def text(self) -> Text:
        return self._text

    def as_str(self) -> str:
        return self._text.as_str()

    def as_path(self) -> Path:
        return Path(self.as_str())

    def is_borrowed(self) -> bool:
        return self._text.is_borrowed()

    def into_owned(self) -> "TreeishPath":
        if not self.is_borrowed():
            return self
        return TreeishPath(self._text.into_owned())

    def __fspath__(self) -> str:
        return self.as_str()

    def __str__(self) -> str:
        return self.as_str()

    def __repr__(self) -> str:
        return f"TreeishPath({self.as_str()!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, TreeishPath):
            return self.as_str() == other.as_str()
        if isinstance(other, str):
            return self.as_str() == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.as_str())


class TreeishGlob:
    """A non-empty glob."""

    def __init__(self, glob: Glob):
        if glob.is_empty():
            raise ValueError("TreeishGlob cannot be empty")
        self._glob = glob

    @property
    def glob(self) -> Glob:
        return self._glob

    def into_owned(self) -> "TreeishGlob":
        if not self._glob.is_borrowed():
            return self
        return TreeishGlob(self._glob.into_owned())

    def __str__(self) -> str:
        return self._glob.as_str()

    def __repr__(self) -> str:
        return f"TreeishGlob({self._glob.as_str()!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TreeishGlob):
            return NotImplemented
        return self._glob == other._glob

    def __hash__(self) -> int:
        return hash(self._glob)


class Unrooted:
    """Marks a glob that has been checked to have no root.

    Only `Treeish.from_partitioned()` creates these.
    """

    def __init__(self, inner: TreeishGlob):
        self._inner = inner

    @property
    def inner(self) -> TreeishGlob:
        return self._inner

    @property
    def glob(self) -> Glob:
        return self._inner.glob

    def into_owned(self) -> "Unrooted":
        inner = self._inner.into_owned()
        if inner is self._inner:
            return self
        return Unrooted(inner)

    def __repr__(self) -> str:
        return f"Unrooted({self._inner!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Unrooted):
            return NotImplemented
        return self._inner == other._inner

    def __hash__(self) -> int:
        return hash(self._inner)


class Treeish:
    """A native path, a glob, or a glob within a native path.

    Build with `Treeish.new()`, `Treeish.from_path()`, `Treeish.from_glob()`
    or `Treeish.from_partitioned()`; all of them validate through
    `from_partitioned()`.

    `path()`, `glob()` and `glob_in()` consume the value: once one of them
    has been called, any further use raises TreeishConsumedError.

    Example:
        >>> treeish = Treeish.new("/mnt/media::**/*.txt")
        >>> treeish.kind
        <TreeishKind.GLOB_IN: 'glob_in'>
        >>> for entry in treeish.walk():
        ...     print(entry.path)
    """

    def __init__(self,
                 kind: TreeishKind,
                 tree: Optional[TreeishPath] = None,
                 glob: Optional[Union[TreeishGlob, Unrooted]] = None):
        object.__setattr__(self, "_kind", kind)
        object.__setattr__(self, "_tree", tree)
        object.__setattr__(self, "_glob", glob)
        object.__setattr__(self, "_consumed", False)

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name):
        raise AttributeError(f"{type(self).__name__} is immutable")

    # Construction

    @classmethod
    def new(cls, expression: str) -> "Treeish":
        """Parse and validate a treeish expression.

        Raises:
            GlobError: If a glob in the expression does not compile
            ParseError: If the expression cannot be parsed
            RuleError: If a native path is joined with a rooted glob
        """
        return cls.from_partitioned(parse(expression))

    @classmethod
    def empty(cls) -> "Treeish":
        return cls(TreeishKind.EMPTY)

    @classmethod
    def from_partitioned(cls, partitioned: Optional[Partitioned]) -> "Treeish":
        """Build a Treeish from parsed parts, enforcing construction rules.

        A native path cannot be joined with a rooted glob: doing so would
        discard one of the two roots.

        Raises:
            RuleError: If the parts are a path and a rooted glob
        """
        if partitioned is None:
            return cls.empty()
        if isinstance(partitioned, PartitionedPath):
            return cls(TreeishKind.PATH, tree=TreeishPath(partitioned.path))
        if isinstance(partitioned, PartitionedGlob):
            return cls(TreeishKind.GLOB, glob=TreeishGlob(partitioned.glob))
        if isinstance(partitioned, PartitionedGlobIn):
            if partitioned.glob.has_root():
                raise RuleError(partitioned.path.as_str(), partitioned.glob.as_str())
            return cls(
                TreeishKind.GLOB_IN,
                tree=TreeishPath(partitioned.path),
                glob=Unrooted(TreeishGlob(partitioned.glob)),
            )
        raise TypeError(f"cannot build a Treeish from {type(partitioned).__name__}")

    @classmethod
    def from_path(cls, path: Union[str, "os.PathLike[str]"]) -> "Treeish":
        """Build a Treeish from a native path, without reading it as a glob."""
        text = path_text(path)
        if not text:
            return cls.from_partitioned(None)
        return cls.from_partitioned(PartitionedPath(Borrowed(text)))

    @classmethod
    def from_glob(cls, glob: Union[str, Glob]) -> "Treeish":
        """Build a Treeish from a glob, moving its literal prefix into a path.

        Raises:
            GlobError: If `glob` is a string that does not compile
        """
        if isinstance(glob, str):
            glob = Glob.new(glob)
        return cls.from_partitioned(partition_glob(glob))

    # Queries

    def _live(self) -> None:
        if self._consumed:
            raise TreeishConsumedError("Treeish has already been consumed")

    @property
    def kind(self) -> TreeishKind:
        self._live()
        return self._kind

    def is_empty(self) -> bool:
        return self.kind is TreeishKind.EMPTY

    def has_path(self) -> bool:
        """Return True if there is an explicit native path component."""
        return self.kind in (TreeishKind.PATH, TreeishKind.GLOB_IN)

    def has_glob(self) -> bool:
        """Return True if there is a glob component."""
        return self.kind in (TreeishKind.GLOB, TreeishKind.GLOB_IN)

    def is_consumed(self) -> bool:
        return self._consumed

    def is_semantic_match(self, path: Union[str, "os.PathLike[str]"]) -> bool:
        """Match a path against this Treeish without walking.

        Not implemented: it is undecided whether a candidate should match the
        glob alone or must also lie within the tree.
        """
        self._live()
        raise NotImplementedError("semantic matching is not implemented")

    # Conversion

    def into_owned(self) -> "Treeish":
        """Return a Treeish that borrows nothing from the original expression."""
        self._live()
        tree = self._tree.into_owned() if self._tree is not None else None
        glob = self._glob.into_owned() if self._glob is not None else None
        if tree is self._tree and glob is self._glob:
            return self
        return Treeish(self._kind, tree=tree, glob=glob)

    def is_borrowed(self) -> bool:
        self._live()
        if self._tree is not None and self._tree.is_borrowed():
            return True
        return self._glob is not None and self._glob.glob.is_borrowed()

    # Consuming extractors

    def _consume(self) -> TreeishKind:
        kind = self.kind
        object.__setattr__(self, "_consumed", True)
        return kind

    def path(self) -> Optional[TreeishPath]:
        """Consume the Treeish; return its path if it is a PATH."""
        if self._consume() is TreeishKind.PATH:
            return self._tree
        return None

    def glob(self) -> Optional[Glob]:
        """Consume the Treeish; return its glob if it is a GLOB."""
        if self._consume() is TreeishKind.GLOB:
            return self._glob.glob
        return None

    def glob_in(self) -> Optional[Tuple[TreeishPath, Glob]]:
        """Consume the Treeish; return (tree, glob) if it is a GLOB_IN."""
        if self._consume() is TreeishKind.GLOB_IN:
            return self._tree, self._glob.glob
        return None

    # Borrowing accessors used by the walk adapter

    @property
    def tree(self) -> Optional[TreeishPath]:
        self._live()
        return self._tree

    @property
    def pattern(self) -> Optional[Glob]:
        self._live()
        return self._glob.glob if self._glob is not None else None

    # Walking

    def walk(self,
             behavior: Optional["WalkBehavior"] = None
             ) -> Iterator[Union["WalkEntry", "WalkError"]]:
        """Lazily walk the tree this Treeish names.

        Yields WalkEntry objects for matching entries and WalkError objects
        for entries that could not be read.
        """
        from ..walk import walk

        return walk(self, behavior)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Treeish):
            return NotImplemented
        return (self._kind, self._tree, self._glob) == (other._kind, other._tree, other._glob)

    def __hash__(self) -> int:
        return hash((self._kind, self._tree, self._glob))

    def __repr__(self) -> str:
        if self._consumed:
            return "Treeish(<consumed>)"
        if self._kind is TreeishKind.EMPTY:
            return "Treeish.empty()"
        if self._kind is TreeishKind.PATH:
            return f"Treeish.path({self._tree.as_str()!r})"
        if self._kind is TreeishKind.GLOB:
            return f"Treeish.glob({self._glob.glob.as_str()!r})"
        return f"Treeish.glob_in(tree={self._tree.as_str()!r}, glob={self._glob.glob.as_str()!r})"
