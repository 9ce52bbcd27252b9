"""Enumerate package directories of an ABBS tree."""
from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import FrozenSet, Iterator, List, Optional, Sequence

from .errors import NoMatchingPackagesError
from .utils.logging import get_logger
from .utils.paths import contains_fragment

LOGGER = get_logger(__name__)

DEFAULT_EXCLUDES = (".git", "assets", "groups")


@dataclass(slots=True)
class ScanConfig:
    """Parameters controlling which package directories are visited."""

    root: Path
    names: Optional[Sequence[str]] = None
    exclude_fragments: Sequence[str] = DEFAULT_EXCLUDES

    def __post_init__(self) -> None:
        self.root = Path(self.root)
        if self.names is not None:
            self.names = tuple(self.names)

    @property
    def filtered(self) -> bool:
        return self.names is not None

    @property
    def wanted(self) -> FrozenSet[str]:
        return frozenset(self.names or ())


def _sorted_entries(directory: Path) -> List[os.DirEntry]:
    with os.scandir(directory) as it:
        return sorted(it, key=lambda entry: entry.name)


def iter_package_dirs(config: ScanConfig) -> Iterator[Path]:
    """Yield ``<root>/<category>/<package>`` directories in name order.

    Entries whose full path contains one of ``config.exclude_fragments`` are
    skipped, as are plain files at package depth. When ``config.names`` is set
    only directories with a matching base name are yielded.
    """

    wanted = config.wanted
    for category in _sorted_entries(config.root):
        if not category.is_dir(follow_symlinks=False):
            continue
        for entry in _sorted_entries(Path(category.path)):
            path = Path(entry.path)
            if contains_fragment(path, config.exclude_fragments):
                continue
            if path.is_file():
                continue
            if config.filtered and entry.name not in wanted:
                continue
            yield path


def select_packages(config: ScanConfig) -> Iterator[Path]:
    """Like :func:`iter_package_dirs`, failing if a filtered walk matched nothing.

    The check runs once the walk is exhausted, so requested names that are
    missing are ignored as long as at least one of them matched.
    """

    matched = 0
    for path in iter_package_dirs(config):
        matched += 1
        yield path
    if config.filtered and matched == 0:
        LOGGER.debug("No package directory under %s matched %s", config.root, config.names)
        raise NoMatchingPackagesError(config.names or ())
