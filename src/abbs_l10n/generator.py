"""Invoke the external package metadata generator."""
from __future__ import annotations

import subprocess
from abc import ABC, abstractmethod
from typing import List, Sequence

from .errors import GeneratorError
from .utils.config import AppConfig
from .utils.logging import get_logger

LOGGER = get_logger(__name__)

DEFAULT_COMMAND = ("acbs-build",)
DEFAULT_FLAG = "--generate-package-metadata"


class MetadataGenerator(ABC):
    """Produce descriptor files for a package as a side effect."""

    @abstractmethod
    def generate(self, package: str) -> None:
        """Run the generator for ``package``; raise :class:`GeneratorError` on failure."""


class AcbsGenerator(MetadataGenerator):
    """Run ``acbs-build --generate-package-metadata <package>`` and check its exit status."""

    def __init__(self, command: Sequence[str] = DEFAULT_COMMAND, flag: str = DEFAULT_FLAG) -> None:
        self.command = list(command)
        self.flag = flag

    @classmethod
    def from_config(cls, config: AppConfig) -> "AcbsGenerator":
        return cls(command=config.generator_command, flag=config.generator_flag)

    def argv(self, package: str) -> List[str]:
        return [*self.command, self.flag, package]

    def generate(self, package: str) -> None:
        argv = self.argv(package)
        LOGGER.debug("Running %s", " ".join(argv))
        try:
            completed = subprocess.run(argv, capture_output=True, check=False)
        except OSError as exc:
            raise GeneratorError(package, None, f"failed to run {self.command[0]}: {exc}") from exc
        if completed.returncode != 0:
            # Negative codes mean the process was killed by a signal.
            code = completed.returncode if completed.returncode > 0 else 1
            raise GeneratorError(package, code)
