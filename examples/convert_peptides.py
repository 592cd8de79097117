#!/usr/bin/env python3
"""Convert a few HELM peptides through the public API."""

from __future__ import annotations

import logging
import tempfile
from pathlib import Path

from helm_converter import helm_to_smiles
from helm_converter.api import convert_helm_file_to_smiles

PEPTIDES = [
    "PEPTIDE1{A.G.C}$$$$",
    "",
    "PEPTIDE1{not-a-monomer}$$$$",
    "PEPTIDE1{R.G.D}|PEPTIDE2{K}$$$$",
]


def main() -> None:
    """Convert one string directly, then a whole file."""
    logging.basicConfig(level=logging.INFO, format="%(message)s")
    print(helm_to_smiles(PEPTIDES[0]))

    with tempfile.TemporaryDirectory() as tmp:
        input_path = Path(tmp) / "peptides.helm"
        output_path = Path(tmp) / "peptides.smi"
        input_path.write_text("\n".join(PEPTIDES) + "\n", encoding="utf-8")

        result = convert_helm_file_to_smiles(input_path, output_path)
        print(output_path.read_text(encoding="utf-8"), end="")
        print(
            f"{result.converted_lines} converted, {result.blank_lines} blank, "
            f"{result.failed_lines} failed"
        )


if __name__ == "__main__":
    main()
