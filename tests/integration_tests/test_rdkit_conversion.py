"""Integration tests against a real RDKit installation."""

from __future__ import annotations

from pathlib import Path

import pytest
from typer.testing import CliRunner

from helm_converter import convert_notation, helm_to_smiles
from helm_converter.api import convert_helm_file_to_smiles
from helm_converter.cli import cli as cli_module
from helm_converter.errors import NotationParseError

Chem = pytest.importorskip("rdkit.Chem")

runner = CliRunner()

TRIPEPTIDE = "PEPTIDE1{A.G.C}$$$$"
TWO_CHAINS = "PEPTIDE1{A.G}|PEPTIDE2{C}$$$$"


def _direct(helm: str) -> str:
    return Chem.MolToSmiles(Chem.MolFromHELM(helm), canonical=True)


def test_helm_to_smiles_matches_rdkit() -> None:
    assert helm_to_smiles(TRIPEPTIDE) == _direct(TRIPEPTIDE)


def test_sequence_notation_matches_rdkit() -> None:
    expected = Chem.MolToSmiles(Chem.MolFromSequence("AGC", flavor=0), canonical=True)
    assert convert_notation("AGC", "sequence") == expected


def test_unparseable_helm_raises() -> None:
    with pytest.raises(NotationParseError):
        helm_to_smiles("this is not helm")


def test_two_polymers_render_as_fragments() -> None:
    assert "." in helm_to_smiles(TWO_CHAINS)


def test_file_conversion_blanks_bad_lines(tmp_path: Path) -> None:
    input_path = tmp_path / "peptides.helm"
    input_path.write_text(
        f"{TRIPEPTIDE}\nnot helm at all\n\n  {TWO_CHAINS}  \n", encoding="utf-8"
    )
    output_path = tmp_path / "peptides.smi"

    result = convert_helm_file_to_smiles(input_path, output_path)

    lines = output_path.read_text(encoding="utf-8").split("\n")
    assert lines == [_direct(TRIPEPTIDE), "", "", _direct(TWO_CHAINS), ""]
    assert result.converted_lines == 2
    assert result.failed_lines == 1


def test_cli_with_rdkit(tmp_path: Path) -> None:
    input_path = tmp_path / "in.helm"
    input_path.write_text(f"{TRIPEPTIDE}\ngarbage\n", encoding="utf-8")
    output_path = tmp_path / "out.smi"

    result = runner.invoke(cli_module.app, [str(input_path), str(output_path)])

    assert result.exit_code == 0, result.output
    assert output_path.read_text(encoding="utf-8") == f"{_direct(TRIPEPTIDE)}\n\n"
    assert "Error processing line 2 (Input: 'garbage')" in result.output
