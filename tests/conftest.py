from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Callable, Dict, Iterable, List, Optional

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_ROOT = PROJECT_ROOT / "src"
if str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))

from abbs_l10n.errors import GeneratorError  # noqa: E402
from abbs_l10n.generator import MetadataGenerator  # noqa: E402


class StubGenerator(MetadataGenerator):
    """Record invocations and fail for selected package names."""

    def __init__(self, failing: Iterable[str] = ()) -> None:
        self.failing = set(failing)
        self.calls: List[str] = []

    def generate(self, package: str) -> None:
        self.calls.append(package)
        if package in self.failing:
            raise GeneratorError(package, 2)


@pytest.fixture
def tree(tmp_path: Path) -> Path:
    root = tmp_path / "tree"
    (root / "groups").mkdir(parents=True)
    (root / "l10n").mkdir()
    (root / "l10n" / "en.json").write_text("{}", encoding="utf-8")
    return root


@pytest.fixture
def make_package(tree: Path) -> Callable[..., Path]:
    def _make(category: str, name: str, descriptors: Optional[Dict[str, object]] = None) -> Path:
        package_dir = tree / category / name
        package_dir.mkdir(parents=True)
        for filename, payload in (descriptors or {}).items():
            text = payload if isinstance(payload, str) else json.dumps(payload)
            (package_dir / filename).write_text(text, encoding="utf-8")
        return package_dir

    return _make


@pytest.fixture
def stub_generator() -> Callable[..., StubGenerator]:
    return StubGenerator


def read_catalog(root: Path) -> Dict[str, str]:
    return json.loads((root / "l10n" / "en.json").read_text(encoding="utf-8"))
