"""Parsing of treeish expressions.

A treeish expression is one of:

    <path>::<glob>      a glob rooted at an explicit native path
    ::<glob>            a glob rooted at the working directory
    <glob-or-path>      anything else

`parse()` only splits an expression into its parts. Whether the parts may be
combined is decided by `Treeish.from_partitioned()`, which enforces the
rules every Treeish must satisfy.

Only the first `::` separates; everything after it belongs to the glob.
There is no way to escape the separator.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Tuple

from .core.empty import non_empty
from .core.glob import Glob, compile_glob
from .core.text import Borrowed, Text
from .errors import ParseError

logger = logging.getLogger(__name__)

SEPARATOR = "::"

# Characters that can never appear in an expression. Paths cannot contain NUL.
_FORBIDDEN = "\0"


class Partitioned:
    """Base class of the parts an expression can be split into."""
    pass


@dataclass(frozen=True)
class PartitionedPath(Partitioned):
    """A native path and nothing else."""
    path: Text


@dataclass(frozen=True)
class PartitionedGlob(Partitioned):
    """A glob with no native path."""
    glob: Glob


@dataclass(frozen=True)
class PartitionedGlobIn(Partitioned):
    """A native path joined with a glob (not yet checked for a root)."""
    path: Text
    glob: Glob


def _combine(path: Optional[Text], glob: Optional[Glob]) -> Optional[Partitioned]:
    path = non_empty(path)
    glob = non_empty(glob)
    if path is not None and glob is not None:
        return PartitionedGlobIn(path, glob)
    if glob is not None:
        return PartitionedGlob(glob)
    if path is not None:
        return PartitionedPath(path)
    return None


def _consumable(source: Borrowed) -> Borrowed:
    """Return the longest prefix of `source` the grammar can consume."""
    text = source.as_str()
    ends = [index for index in (text.find(c) for c in _FORBIDDEN) if index >= 0]
    return source.slice(0, min(ends)) if ends else source


def _parse_separated(source: Borrowed) -> Optional[Tuple[int, Optional[Partitioned]]]:
    """Parse `<path>::<glob>`; return None if there is no separator.

    A glob that fails to compile after an explicit separator is an error,
    not a reason to try another interpretation.
    """
    index = source.as_str().find(SEPARATOR)
    if index < 0:
        return None
    path = source.slice(0, index)
    glob = Glob.new(source.slice(index + len(SEPARATOR)))
    logger.debug("separated expression into %r and %r", path.as_str(), glob.as_str())
    return len(source), _combine(path, glob)


def partition_glob(glob: Glob) -> Optional[Partitioned]:
    """Split a glob into its native path prefix and remaining glob.

    Returns None only for the empty glob.
    """
    if glob.is_empty():
        return None
    path, rest = glob.partition()
    partitioned = _combine(path, rest)
    if partitioned is None:
        raise AssertionError(f"non-empty glob {glob.as_str()!r} partitioned into nothing")
    return partitioned


def _parse_bare(source: Borrowed) -> Tuple[int, Optional[Partitioned]]:
    """Parse an expression without a separator.

    The expression is read as a glob when it compiles, preferring to move as
    much of it as possible into a native path. Otherwise it is a native path.
    """
    glob = compile_glob(source)
    if glob is None:
        logger.debug("%r is not a glob; reading it as a path", source.as_str())
        return len(source), _combine(source, None)
    return len(source), partition_glob(glob)


def parse(expression: str) -> Optional[Partitioned]:
    """Split an expression into a native path, a glob, or both.

    Returns None for the empty expression.

    Raises:
        GlobError: If the glob after a `::` separator does not compile
        ParseError: If the expression cannot be consumed entirely
    """
    if not isinstance(expression, str):
        raise TypeError(f"expression must be str, not {type(expression).__name__}")
    source = _consumable(Borrowed(expression))
    result = _parse_separated(source)
    if result is None:
        result = _parse_bare(source)
    consumed, partitioned = result
    if consumed != len(expression):
        raise ParseError(expression, consumed)
    return partitioned
