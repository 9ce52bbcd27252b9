"""The ``l10n/en.json`` translation catalog and the merge rule applied to it."""
from __future__ import annotations

import json
from enum import Enum
from pathlib import Path
from typing import IO, Dict, Optional

from pydantic import TypeAdapter, ValidationError

from .errors import CatalogError
from .utils.logging import get_logger

LOGGER = get_logger(__name__)

_CATALOG_ADAPTER = TypeAdapter(Dict[str, str])


class MergeOutcome(str, Enum):
    INSERTED = "inserted"
    UPDATED = "updated"
    UNCHANGED = "unchanged"


def merge_entry(catalog: Dict[str, str], name: str, description: str) -> MergeOutcome:
    """Insert or refresh ``name`` in ``catalog``."""

    current = catalog.get(name)
    if current is None:
        catalog[name] = description
        return MergeOutcome.INSERTED
    if current == description:
        return MergeOutcome.UNCHANGED
    catalog[name] = description
    return MergeOutcome.UPDATED


class CatalogFile:
    """Hold the catalog open for reading and writing for the length of a run."""

    def __init__(self, path: Path, indent: Optional[int] = None) -> None:
        self.path = path
        self.indent = indent
        try:
            self._handle: IO[str] = path.open("r+", encoding="utf-8")
        except OSError as exc:
            raise CatalogError(path, exc) from exc

    def load(self) -> Dict[str, str]:
        try:
            self._handle.seek(0)
            payload = json.load(self._handle)
            return _CATALOG_ADAPTER.validate_python(payload, strict=True)
        except (OSError, UnicodeDecodeError, json.JSONDecodeError, ValidationError) as exc:
            raise CatalogError(self.path, exc) from exc

    def save(self, entries: Dict[str, str]) -> None:
        """Replace the file content with ``entries``."""

        if self.indent is None:
            text = json.dumps(entries, ensure_ascii=False, separators=(",", ":"))
        else:
            text = json.dumps(entries, ensure_ascii=False, indent=self.indent) + "\n"
        try:
            self._handle.seek(0)
            self._handle.write(text)
            self._handle.truncate()
            self._handle.flush()
        except OSError as exc:
            raise CatalogError(self.path, exc) from exc
        LOGGER.debug("Wrote %d entries to %s", len(entries), self.path)

    def close(self) -> None:
        self._handle.close()

    def __enter__(self) -> "CatalogFile":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
