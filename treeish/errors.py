"""Exception hierarchy for treeish.

Building a Treeish from an expression can fail in exactly three ways, all of
them deterministic: the pattern engine rejects a glob, the expression grammar
cannot be consumed, or a combined expression breaks the unrooted-glob rule.
All three derive from BuildError so callers can handle them together.

Walk errors are different: they are yielded alongside entries and never
abort a traversal (see treeish.walk).
"""

from typing import Optional


class TreeishError(Exception):
    """Base class for all errors raised by treeish."""
    pass


class BuildError(TreeishError):
    """Raised when an expression cannot be built into a Treeish."""
    pass


class GlobError(BuildError):
    """Raised when the pattern engine rejects a glob expression."""

    def __init__(self, text: str, position: int, reason: str):
        self.text = text
        self.position = position
        self.reason = reason
        super().__init__(f"invalid glob {text!r} at position {position}: {reason}")


class ParseError(BuildError):
    """Raised when the treeish grammar cannot consume the whole expression.

    The expression is always stored as an owned copy so the error can
    outlive whatever produced it.
    """

    def __init__(self, expression: str, position: Optional[int] = None):
        self.expression = str(expression)
        self.position = position
        if position is None:
            message = f"failed to parse treeish expression {self.expression!r}"
        else:
            message = (
                f"failed to parse treeish expression {self.expression!r}: "
                f"unexpected input at position {position}"
            )
        super().__init__(message)


class RuleError(BuildError):
    """Raised when a tree is combined with a glob that has its own root.

    A rooted glob cannot be joined to a native path without discarding
    one of the two roots, so `tree::/rooted/glob` is rejected.
    """

    def __init__(self, tree: str, glob: str):
        self.tree = tree
        self.glob = glob
        super().__init__(
            f"glob {glob!r} is rooted and cannot be joined to tree {tree!r}"
        )


class TreeishConsumedError(TreeishError):
    """Raised when a Treeish is used after a consuming extractor."""
    pass


class WalkError(TreeishError):
    """An error encountered while walking a tree.

    Walk errors are yielded in place of the entry that failed; they are
    never raised by the walk itself, so one unreadable directory does not
    end the traversal.
    """

    def __init__(self, path, depth: int, cause: Optional[BaseException] = None):
        self.path = path
        self.depth = depth
        self.cause = cause
        detail = f": {cause}" if cause is not None else ""
        super().__init__(f"failed to read {str(path)!r}{detail}")


class LinkCycleError(WalkError):
    """A followed symbolic link leads back to one of its ancestors."""

    def __init__(self, path, depth: int, target):
        self.target = target
        super().__init__(path, depth)
        self.args = (f"symbolic link {str(path)!r} forms a cycle with {str(target)!r}",)
