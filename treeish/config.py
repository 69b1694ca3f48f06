"""Walk configuration for treeish.

WalkBehavior is passed through untouched from `Treeish.walk()` to the
traversal engine. It controls how deep the walk goes and what happens at
symbolic links.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


class LinkBehavior(Enum):
    """What to do when a walk reaches a symbolic link."""
    READ_FILE = "read_file"        # Report the link itself; never descend
    READ_TARGET = "read_target"    # Follow the link and walk its target


@dataclass
class DepthConfig:
    """Depth bounds, relative to the root of the walk (depth 0)."""

    min_depth: int = 0                  # Minimum depth to yield
    max_depth: Optional[int] = None     # Maximum depth to traverse

    def should_yield(self, depth: int) -> bool:
        """Check if entries at this depth should be yielded.

        Args:
            depth: Current depth

        Returns:
            True if depth is within configured range
        """
        if depth < self.min_depth:
            return False
        if self.max_depth is not None and depth > self.max_depth:
            return False
        return True

    def should_explore(self, depth: int) -> bool:
        """Check if children of an entry at this depth should be read.

        Args:
            depth: Current depth

        Returns:
            True if we should go deeper
        """
        if self.max_depth is not None:
            return depth < self.max_depth
        return True


@dataclass
class WalkBehavior:
    """Complete configuration for a walk."""

    depth: DepthConfig = field(default_factory=DepthConfig)
    link: LinkBehavior = LinkBehavior.READ_FILE

    @classmethod
    def bounded(cls,
                min_depth: int = 0,
                max_depth: Optional[int] = None,
                link: LinkBehavior = LinkBehavior.READ_FILE) -> 'WalkBehavior':
        """Create a behavior from plain depth bounds."""
        return cls(depth=DepthConfig(min_depth=min_depth, max_depth=max_depth), link=link)

    @classmethod
    def shallow(cls, max_depth: int = 1) -> 'WalkBehavior':
        """Create a behavior that reads only the first levels of a tree.

        Args:
            max_depth: How deep to walk (default 1 = immediate children only)
        """
        return cls.bounded(max_depth=max_depth)

    def follows_links(self) -> bool:
        return self.link is LinkBehavior.READ_TARGET

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if self.depth.min_depth < 0:
            errors.append("min_depth cannot be negative")

        if self.depth.max_depth is not None:
            if self.depth.max_depth < 0:
                errors.append("max_depth cannot be negative")
            if self.depth.max_depth < self.depth.min_depth:
                errors.append("max_depth cannot be less than min_depth")

        if not isinstance(self.link, LinkBehavior):
            errors.append(f"link must be a LinkBehavior, not {type(self.link).__name__}")

        return errors
