"""Splitting of repository-relative paths into components."""

from __future__ import annotations

import os
from dataclasses import dataclass

SEPARATOR = "/"


@dataclass(frozen=True)
class TokenizedPath:
    components: tuple[str, ...]
    is_dir: bool


def split_path(path: str, sep: str = SEPARATOR) -> list[str]:
    """Return the non-empty components of ``path``.

    Leading, trailing and repeated separators produce no empty components.
    """
    return [segment for segment in path.split(sep) if segment]


def has_trailing_separator(path: str, sep: str = SEPARATOR) -> bool:
    return path.endswith(sep)


def normalize_separators(path: str | os.PathLike[str], sep: str = os.sep) -> str:
    """Convert ``path`` to a string using ``/`` as its only separator."""
    value = os.fspath(path)
    if sep != SEPARATOR:
        value = value.replace(sep, SEPARATOR)
    if os.altsep and os.altsep != SEPARATOR:
        value = value.replace(os.altsep, SEPARATOR)
    return value


def tokenize(path: str) -> TokenizedPath:
    return TokenizedPath(
        components=tuple(split_path(path)),
        is_dir=has_trailing_separator(path),
    )
