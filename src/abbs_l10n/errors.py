"""Exception hierarchy raised by the synchronisation steps."""
from __future__ import annotations

from pathlib import Path
from typing import Iterable, Optional


class SyncError(Exception):
    """Base class for every error reported by abbs-l10n-sync."""


class TreeNotFoundError(SyncError):
    def __init__(self, start: Path, marker: str = "groups") -> None:
        super().__init__(f"Failed to get ABBS tree: no '{marker}' directory above {start}")
        self.start = start
        self.marker = marker


class CatalogError(SyncError):
    def __init__(self, path: Path, reason: object) -> None:
        super().__init__(f"Unable to use catalog {path}: {reason}")
        self.path = path
        self.reason = reason


class NoMatchingPackagesError(SyncError):
    def __init__(self, names: Iterable[str]) -> None:
        self.names = list(names)
        super().__init__(f"Packages: {self.names!r} does not exist or unsupport sub-package")


class GeneratorError(SyncError):
    """The metadata generator failed for a single package.

    ``returncode`` is ``None`` when the process could not be launched at all.
    """

    def __init__(self, package: str, returncode: Optional[int], reason: Optional[str] = None) -> None:
        if reason is None:
            reason = f"acbs-build return non-zero code: {returncode}"
        super().__init__(reason)
        self.package = package
        self.returncode = returncode
        self.reason = reason


class DescriptorError(SyncError):
    def __init__(self, path: Path, reason: object) -> None:
        super().__init__(f"Invalid package descriptor {path}: {reason}")
        self.path = path
        self.reason = reason
