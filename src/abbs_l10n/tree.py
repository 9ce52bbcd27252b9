"""Locate the root of an ABBS package tree."""
from __future__ import annotations

from pathlib import Path

from .errors import TreeNotFoundError
from .utils.logging import get_logger
from .utils.paths import resolve_start

LOGGER = get_logger(__name__)


def find_tree_root(start: Path = Path("."), marker: str = "groups") -> Path:
    """Walk upwards from ``start`` until a directory containing ``marker/`` is found.

    Only a directory named ``marker`` qualifies; a regular file of that name is
    ignored. Raises :class:`TreeNotFoundError` once the filesystem root has been
    checked without success.
    """

    tree = resolve_start(start)
    while True:
        if (tree / marker).is_dir():
            LOGGER.debug("Found package tree at %s", tree)
            return tree
        if tree.parent == tree:
            raise TreeNotFoundError(start, marker)
        tree = tree.parent
