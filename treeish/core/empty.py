"""Emptiness helpers.

Paths and globs can both be spelled as the empty string. Treeish values never
hold such degenerate components: an empty component is turned into `None`
with `non_empty()` before anything is built from it.
"""

import os
from typing import Any, Optional, TypeVar, Union

T = TypeVar("T")


def is_empty(value: Any) -> bool:
    """Return True if a path, glob or text value denotes nothing.

    Objects that know their own emptiness (Glob, Text) are asked directly;
    strings and path-like objects are empty when their text is ''.
    """
    if value is None:
        return True
    check = getattr(value, "is_empty", None)
    if callable(check):
        return bool(check())
    if isinstance(value, (str, bytes)):
        return len(value) == 0
    if isinstance(value, os.PathLike):
        return len(os.fspath(value)) == 0
    raise TypeError(f"cannot test emptiness of {type(value).__name__}")


def non_empty(value: Optional[T]) -> Optional[T]:
    """Return `value`, or None if it is empty."""
    if is_empty(value):
        return None
    return value


def path_text(path: Union[str, "os.PathLike[str]"]) -> str:
    """Return the text of a path without normalizing it.

    `pathlib.PurePath('')` renders as '.', so plain strings are passed
    through untouched to keep empty and literal paths exact.
    """
    if isinstance(path, str):
        return path
    return os.fspath(path)
