"""Shared fixtures for the treeish test suite."""

import os
import sys
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))


def create_test_tree(base_dir: Path) -> None:
    """Create a test directory structure.

    Structure:
    base_dir/
    ├── file1.txt
    ├── file2.py
    ├── dir1/
    │   ├── file3.txt
    │   ├── file4.py
    │   └── subdir1/
    │       └── file5.txt
    └── dir2/
        └── file6.txt
    """
    (base_dir / "dir1").mkdir()
    (base_dir / "dir1" / "subdir1").mkdir()
    (base_dir / "dir2").mkdir()

    (base_dir / "file1.txt").write_text("content1")
    (base_dir / "file2.py").write_text("# python file")
    (base_dir / "dir1" / "file3.txt").write_text("content3")
    (base_dir / "dir1" / "file4.py").write_text("# another python file")
    (base_dir / "dir1" / "subdir1" / "file5.txt").write_text("content5")
    (base_dir / "dir2" / "file6.txt").write_text("content6")


@pytest.fixture
def tree(tmp_path: Path) -> Path:
    """A populated directory tree (see create_test_tree)."""
    base = tmp_path / "tree"
    base.mkdir()
    create_test_tree(base)
    return base


@pytest.fixture
def make_symlink():
    """Create a directory symlink, skipping the test where that is not allowed."""
    def _make(target: Path, link: Path) -> None:
        try:
            os.symlink(target, link, target_is_directory=True)
        except (OSError, NotImplementedError) as e:
            pytest.skip(f"symbolic links unavailable: {e}")
    return _make
