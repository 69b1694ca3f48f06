"""Glob patterns for treeish.

Matching is delegated to wcmatch. wcmatch is deliberately forgiving and
treats most malformed constructs as literal text, so `Glob.new` first checks
the syntax and rejects patterns whose intent is ambiguous. It also splits the
pattern into path components, which is what `partition()` and `has_root()`
are computed from.

Syntax (POSIX separators and escapes on every platform):

    *       any run of characters within a component
    ?       one character within a component
    **      zero or more components; must be a whole component
    [...]   character class ([!...] or [^...] negates)
    {a,b}   alternatives
    \\x     the literal character x, for x one of * ? [ ] { } ! ^ - , \\
"""

import logging
import re
from typing import List, NamedTuple, Optional, Tuple, Union

from wcmatch import glob as wcglob
from wcmatch import _wcparse

from ..errors import GlobError
from .text import Borrowed, Owned, Text

logger = logging.getLogger(__name__)

SEPARATOR = "/"
ESCAPE = "\\"
# Only characters with a meaning in globs may be escaped. Anything else, like
# the `\U` in `C:\Users`, is rejected so such text falls back to a native path.
ESCAPABLE = frozenset("*?[]{}!^-,\\")

WCMATCH_FLAGS = wcglob.GLOBSTAR | wcglob.BRACE | wcglob.DOTGLOB | wcglob.FORCEUNIX

_UNESCAPE = re.compile(r"\\(.)", re.DOTALL)


class _Component(NamedTuple):
    """A path component of a glob: text[start:end]."""
    start: int
    end: int
    literal: bool


def _check_escape(text: str, index: int) -> None:
    if index + 1 >= len(text):
        raise GlobError(text, index, "unpaired escape")
    if text[index + 1] not in ESCAPABLE:
        raise GlobError(text, index, f"cannot escape {text[index + 1]!r}")


def _scan_class(text: str, start: int) -> int:
    """Scan a character class opened at `start`; return the index after ']'."""
    i = start + 1
    if i < len(text) and text[i] in "!^":
        i += 1
    if i < len(text) and text[i] == "]":
        raise GlobError(text, start, "empty character class")
    while i < len(text) and text[i] != "]":
        if text[i] == SEPARATOR:
            raise GlobError(text, i, "separator in character class")
        if text[i] == ESCAPE:
            _check_escape(text, i)
            i += 1
        i += 1
    if i >= len(text):
        raise GlobError(text, start, "unclosed character class")
    return i + 1


def _scan(text: str) -> List[_Component]:
    """Check the syntax of `text` and split it into components.

    A leading separator produces an empty first component, which is how a
    rooted glob is recognized.
    """
    components: List[_Component] = []
    start = 0
    literal = True
    brace_depth = 0
    brace_open = 0
    i = 0
    while i < len(text):
        c = text[i]
        if c == ESCAPE:
            _check_escape(text, i)
            i += 2
            continue
        if c == "[":
            literal = False
            i = _scan_class(text, i)
            continue
        if c == "{":
            if brace_depth == 0:
                brace_open = i
            brace_depth += 1
            literal = False
        elif c == "}":
            if brace_depth == 0:
                raise GlobError(text, i, "unmatched '}'")
            brace_depth -= 1
        elif c == "*":
            run = 1
            while i + run < len(text) and text[i + run] == "*":
                run += 1
            if run > 2:
                raise GlobError(text, i, "too many adjacent '*'")
            if run == 2:
                component_end = i + 2 == len(text) or text[i + 2] == SEPARATOR
                if i != start or not component_end or brace_depth:
                    raise GlobError(text, i, "'**' must be a whole path component")
            literal = False
            i += run
            continue
        elif c == "?":
            literal = False
        elif c == SEPARATOR and brace_depth == 0:
            components.append(_Component(start, i, literal))
            start = i + 1
            literal = True
        i += 1
    if brace_depth:
        raise GlobError(text, brace_open, "unclosed alternative")
    components.append(_Component(start, len(text), literal))
    return components


def unescape(text: str) -> str:
    """Remove glob escapes from literal text."""
    return _UNESCAPE.sub(r"\1", text)


class Glob:
    """A compiled glob pattern.

    Build with `Glob.new()`. The pattern text is kept as `Text`, so a glob
    parsed out of a larger expression borrows from it until `into_owned()`.
    """

    def __init__(self, text: Text, components: List[_Component]):
        self._text = text
        self._components = components
        self._matcher = None

    @classmethod
    def new(cls, text: Union[str, Text]) -> "Glob":
        """Compile a glob.

        Raises:
            GlobError: If the pattern is malformed or too large to expand
        """
        if isinstance(text, str):
            text = Borrowed(text)
        raw = text.as_str()
        glob = cls(text, _scan(raw))
        if raw:
            try:
                glob._matcher = wcglob.compile(raw, flags=WCMATCH_FLAGS)
            except _wcparse.PatternLimitException as e:
                raise GlobError(raw, 0, str(e)) from e
        return glob

    @classmethod
    def empty(cls) -> "Glob":
        """Return the empty glob, which matches every candidate path."""
        return cls(Owned(""), [_Component(0, 0, True)])

    @property
    def text(self) -> Text:
        return self._text

    def as_str(self) -> str:
        return self._text.as_str()

    def is_empty(self) -> bool:
        return self._text.is_empty()

    def is_borrowed(self) -> bool:
        return self._text.is_borrowed()

    def has_root(self) -> bool:
        """Return True if the glob names an absolute location by itself."""
        return self.as_str().startswith(SEPARATOR)

    def is_literal(self) -> bool:
        return all(component.literal for component in self._components)

    def partition(self) -> Tuple[Text, "Glob"]:
        """Split into a literal path prefix and the remaining glob.

        Either side may be empty: `**/*.txt` has no prefix, and a glob with
        no metacharacters is all prefix. A leading separator stays with the
        prefix, so the remaining glob is never rooted unless the prefix is
        empty.
        """
        raw = self.as_str()
        first = next(
            (n for n, component in enumerate(self._components) if not component.literal),
            None,
        )
        if first is None:
            prefix_end, rest_start = len(raw), len(raw)
        elif first == 0:
            prefix_end, rest_start = 0, 0
        else:
            rest_start = self._components[first].start
            prefix_end = max(rest_start - 1, 1 if raw.startswith(SEPARATOR) else 0)

        prefix_raw = raw[:prefix_end]
        prefix_value = unescape(prefix_raw)
        if prefix_value == prefix_raw:
            prefix = self._text.slice(0, prefix_end)
        else:
            prefix = Owned(prefix_value)
        rest = Glob.new(self._text.slice(rest_start))
        logger.debug("partitioned glob %r into %r and %r", raw, prefix_value, rest.as_str())
        return prefix, rest

    def is_match(self, path: str) -> bool:
        """Match a relative POSIX path against the glob.

        The empty glob matches everything.
        """
        if self._matcher is None:
            return True
        return bool(self._matcher.match(path))

    def into_owned(self) -> "Glob":
        if not self._text.is_borrowed():
            return self
        glob = Glob(self._text.into_owned(), self._components)
        glob._matcher = self._matcher
        return glob

    def __str__(self) -> str:
        return self.as_str()

    def __repr__(self) -> str:
        return f"Glob({self.as_str()!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Glob):
            return NotImplemented
        return self.as_str() == other.as_str()

    def __hash__(self) -> int:
        return hash(self.as_str())


def compile_glob(text: Union[str, Text]) -> Optional[Glob]:
    """Compile `text`, returning None instead of raising on a bad pattern."""
    try:
        return Glob.new(text)
    except GlobError:
        return None
