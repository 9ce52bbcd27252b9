"""Synchronise ABBS package descriptions into the l10n translation catalog."""

from .catalog import CatalogFile, MergeOutcome, merge_entry
from .descriptors import PackageDescriptor, collect_descriptors
from .errors import (
    CatalogError,
    DescriptorError,
    GeneratorError,
    NoMatchingPackagesError,
    SyncError,
    TreeNotFoundError,
)
from .generator import AcbsGenerator, MetadataGenerator
from .runner import RunReport, SyncRunner
from .scanner import ScanConfig, iter_package_dirs, select_packages
from .tree import find_tree_root

__all__ = [
    "CatalogFile",
    "MergeOutcome",
    "merge_entry",
    "PackageDescriptor",
    "collect_descriptors",
    "CatalogError",
    "DescriptorError",
    "GeneratorError",
    "NoMatchingPackagesError",
    "SyncError",
    "TreeNotFoundError",
    "AcbsGenerator",
    "MetadataGenerator",
    "RunReport",
    "SyncRunner",
    "ScanConfig",
    "iter_package_dirs",
    "select_packages",
    "find_tree_root",
]
