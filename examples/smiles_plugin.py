#!/usr/bin/env python3
"""Example plugin re-canonicalizing SMILES input.

Load it with::

    helm-to-smiles --plugin-module examples/smiles_plugin.py --notation smiles in.smi out.smi
"""

from __future__ import annotations

from typing import Any

from helm_converter.adapters.renderers import RdkitSmilesRenderer
from helm_converter.errors import NotationParseError


class SmilesParser:
    """Parse SMILES with RDKit; rdkit is imported on first use."""

    def parse(self, notation: str) -> Any:
        from rdkit import Chem

        mol = Chem.MolFromSmiles(notation)
        if mol is None:
            raise NotationParseError("RDKit could not parse the SMILES string.")
        return mol


class SmilesPlugin:
    """Canonicalize arbitrary SMILES line by line."""

    name = "smiles"
    description = "SMILES re-canonicalization (RDKit MolFromSmiles)"

    def create_parser(self) -> SmilesParser:
        return SmilesParser()

    def create_renderer(self) -> RdkitSmilesRenderer:
        return RdkitSmilesRenderer()


PLUGIN = SmilesPlugin()
