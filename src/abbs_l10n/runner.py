"""Drive a full or filtered synchronisation run over a package tree."""
from __future__ import annotations

from pathlib import Path
from typing import Dict, List, Optional, Sequence

from pydantic import BaseModel, Field

from .catalog import CatalogFile, MergeOutcome
from .descriptors import collect_descriptors
from .errors import GeneratorError
from .generator import AcbsGenerator, MetadataGenerator
from .scanner import ScanConfig, select_packages
from .tree import find_tree_root
from .utils.config import AppConfig
from .utils.logging import get_logger

LOGGER = get_logger(__name__)


class RunReport(BaseModel):
    """What happened during one run."""

    tree: Path
    scanned: List[str] = Field(default_factory=list)
    failures: Dict[str, str] = Field(default_factory=dict)
    inserted: int = 0
    updated: int = 0
    unchanged: int = 0

    @property
    def succeeded(self) -> bool:
        return not self.failures

    @property
    def consumed(self) -> int:
        return self.inserted + self.updated + self.unchanged

    def record(self, outcome: MergeOutcome) -> None:
        if outcome is MergeOutcome.INSERTED:
            self.inserted += 1
        elif outcome is MergeOutcome.UPDATED:
            self.updated += 1
        else:
            self.unchanged += 1


class SyncRunner:
    """Regenerate descriptors and fold them into the tree's ``en.json``."""

    def __init__(
        self,
        config: Optional[AppConfig] = None,
        generator: Optional[MetadataGenerator] = None,
        start: Path = Path("."),
    ) -> None:
        self.config = config or AppConfig()
        self.generator = generator or AcbsGenerator.from_config(self.config)
        self.start = start

    def run(self, packages: Optional[Sequence[str]] = None) -> RunReport:
        """Process every package, or only those named in ``packages``.

        Generator failures are recorded in the report and do not stop the run.
        Every other error propagates before the catalog is written.
        """

        tree = find_tree_root(self.start, self.config.marker_dir)
        scan = ScanConfig(
            root=tree,
            names=list(packages) if packages else None,
            exclude_fragments=self.config.exclude_fragments,
        )
        report = RunReport(tree=tree)

        with CatalogFile(tree / self.config.catalog_path, indent=self.config.catalog_indent) as catalog_file:
            catalog = catalog_file.load()
            for package_dir in select_packages(scan):
                name = package_dir.name
                LOGGER.info("Scanning package %s", name)
                report.scanned.append(name)
                try:
                    self.generator.generate(name)
                except GeneratorError as exc:
                    LOGGER.error("%s: %s", name, exc)
                    report.failures[name] = str(exc)
                    continue
                for _, outcome in collect_descriptors(package_dir, catalog, self.config.descriptor_suffix):
                    report.record(outcome)
            catalog_file.save(catalog)

        return report
