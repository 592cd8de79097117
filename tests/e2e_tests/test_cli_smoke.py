"""End-to-end smoke tests for the installed console script."""

from __future__ import annotations

import shutil
import subprocess
from pathlib import Path

import pytest

import helm_converter

pytestmark = pytest.mark.skipif(
    shutil.which("helm-to-smiles") is None,
    reason="helm-to-smiles console script is not installed",
)


def _run(*args: str) -> subprocess.CompletedProcess[str]:
    return subprocess.run(
        ["helm-to-smiles", *args],
        capture_output=True,
        text=True,
        check=False,
    )


def test_package_import_smoke() -> None:
    """Ensure package can be imported in the test process."""
    assert helm_converter.__version__


def test_cli_help_smoke() -> None:
    result = _run("--help")
    assert result.returncode == 0, result.stderr
    assert "canonical SMILES" in result.stdout


def test_cli_wrong_argument_count_exits_1(tmp_path: Path) -> None:
    result = _run(str(tmp_path / "only-one.txt"))
    assert result.returncode == 1
    assert "Usage: helm-to-smiles" in result.stderr


def test_cli_missing_input_exits_2(tmp_path: Path) -> None:
    """A missing input file is fatal and leaves no output behind."""
    output_path = tmp_path / "out.smi"
    result = _run(str(tmp_path / "definitely-missing.helm"), str(output_path))
    assert result.returncode == 2
    assert "could not read input file" in result.stderr.lower()
    assert not output_path.exists()
