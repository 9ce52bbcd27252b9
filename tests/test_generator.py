from __future__ import annotations

import subprocess
import sys
from typing import Any

import pytest

from abbs_l10n.errors import GeneratorError
from abbs_l10n.generator import AcbsGenerator
from abbs_l10n.utils.config import AppConfig


def _python(script: str) -> AcbsGenerator:
    return AcbsGenerator(command=[sys.executable, "-c", script])


def test_default_argv() -> None:
    assert AcbsGenerator().argv("bash") == ["acbs-build", "--generate-package-metadata", "bash"]


def test_from_config() -> None:
    config = AppConfig(generator_command=["ciel", "build"], generator_flag="-g")
    assert AcbsGenerator.from_config(config).argv("bash") == ["ciel", "build", "-g", "bash"]


def test_success_passes_flag_and_name() -> None:
    generator = _python("import sys; sys.exit(0 if sys.argv[1:] == ['--generate-package-metadata', 'bash'] else 7)")
    generator.generate("bash")


def test_non_zero_exit_carries_code() -> None:
    generator = _python("import sys; sys.exit(3)")
    with pytest.raises(GeneratorError) as excinfo:
        generator.generate("bash")
    assert excinfo.value.returncode == 3
    assert excinfo.value.package == "bash"
    assert "3" in str(excinfo.value)


def test_output_is_not_interpreted() -> None:
    generator = _python("import sys; print('noise'); print('error', file=sys.stderr)")
    generator.generate("bash")


def test_launch_failure_has_no_code() -> None:
    generator = AcbsGenerator(command=["abbs-l10n-sync-no-such-program"])
    with pytest.raises(GeneratorError) as excinfo:
        generator.generate("bash")
    assert excinfo.value.returncode is None


def test_signal_termination_reports_one(monkeypatch: pytest.MonkeyPatch) -> None:
    def fake_run(argv: Any, **kwargs: Any) -> subprocess.CompletedProcess:
        return subprocess.CompletedProcess(argv, -9, b"", b"")

    monkeypatch.setattr(subprocess, "run", fake_run)
    with pytest.raises(GeneratorError) as excinfo:
        AcbsGenerator().generate("bash")
    assert excinfo.value.returncode == 1
