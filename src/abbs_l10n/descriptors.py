"""Read, merge and consume the per-package descriptor files."""
from __future__ import annotations

import json
from pathlib import Path
from typing import Dict, List, Tuple

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .catalog import MergeOutcome, merge_entry
from .errors import DescriptorError
from .utils.logging import get_logger

LOGGER = get_logger(__name__)


class PackageDescriptor(BaseModel):
    """Name and description emitted by the generator for one package."""

    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(alias="PKGNAME")
    description: str = Field(alias="PKGDES")


def read_descriptor(path: Path) -> PackageDescriptor:
    """Parse ``path`` into a :class:`PackageDescriptor`."""

    try:
        with path.open("r", encoding="utf-8") as handle:
            payload = json.load(handle)
        return PackageDescriptor.model_validate(payload)
    except (OSError, UnicodeDecodeError, json.JSONDecodeError, ValidationError) as exc:
        raise DescriptorError(path, exc) from exc


def collect_descriptors(
    package_dir: Path,
    catalog: Dict[str, str],
    suffix: str = ".json",
) -> List[Tuple[PackageDescriptor, MergeOutcome]]:
    """Merge every descriptor directly inside ``package_dir`` into ``catalog``.

    Each consumed file is deleted whatever the merge outcome. A malformed
    descriptor raises :class:`DescriptorError` and stops the collection.
    """

    results: List[Tuple[PackageDescriptor, MergeOutcome]] = []
    for path in sorted(package_dir.iterdir()):
        if path.suffix != suffix:
            continue
        descriptor = read_descriptor(path)
        outcome = merge_entry(catalog, descriptor.name, descriptor.description)
        LOGGER.debug("%s: %s (%s)", descriptor.name, outcome.value, path.name)
        path.unlink()
        results.append((descriptor, outcome))
    return results
