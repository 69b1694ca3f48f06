"""treeish - native paths and globs in one expression.

A treeish expression names part of a filesystem tree:

    /var/log/app.log        a native path
    **/*.txt                a glob under the working directory
    /mnt/media::**/*.txt    a glob under an explicit native path

Build one with `Treeish.new()` and walk it:

    from treeish import Treeish

    for entry in Treeish.new("/mnt/media::**/*.txt").walk():
        ...
"""

__version__ = "0.1.0"

from .config import DepthConfig, LinkBehavior, WalkBehavior
from .core import Glob, Treeish, TreeishGlob, TreeishKind, TreeishPath, Unrooted
from .errors import (
    BuildError,
    GlobError,
    LinkCycleError,
    ParseError,
    RuleError,
    TreeishConsumedError,
    TreeishError,
    WalkError,
)
from .walk import WalkEntry, walk

__all__ = [
    "__version__",
    # Core
    "Glob",
    "Treeish",
    "TreeishGlob",
    "TreeishKind",
    "TreeishPath",
    "Unrooted",
    # Config
    "DepthConfig",
    "LinkBehavior",
    "WalkBehavior",
    # Walking
    "WalkEntry",
    "walk",
    # Errors
    "BuildError",
    "GlobError",
    "LinkCycleError",
    "ParseError",
    "RuleError",
    "TreeishConsumedError",
    "TreeishError",
    "WalkError",
]
