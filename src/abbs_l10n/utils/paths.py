"""Path utility helpers."""
from __future__ import annotations

from pathlib import Path
from typing import Iterable


def resolve_start(path: Path) -> Path:
    """Return ``path`` as an absolute, symlink-resolved path.

    Raises :class:`FileNotFoundError` when ``path`` does not exist.
    """

    return Path(path).expanduser().resolve(strict=True)


def contains_fragment(path: Path, fragments: Iterable[str]) -> bool:
    """Return ``True`` if any fragment occurs anywhere in the string form of ``path``."""

    text = str(path)
    return any(fragment in text for fragment in fragments)
