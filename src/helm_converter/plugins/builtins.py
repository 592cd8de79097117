"""Built-in notation plugins."""

from __future__ import annotations

from helm_converter.adapters.parsers import RdkitHelmParser, RdkitSequenceParser
from helm_converter.adapters.renderers import RdkitSmilesRenderer
from helm_converter.types import BuiltinNotation


class _RdkitSmilesPlugin:
    def create_renderer(self) -> RdkitSmilesRenderer:
        return RdkitSmilesRenderer()


class HelmPlugin(_RdkitSmilesPlugin):
    """Convert HELM notation into canonical SMILES."""

    name: BuiltinNotation = "helm"
    description = "HELM macromolecule notation (RDKit MolFromHELM)"

    def create_parser(self) -> RdkitHelmParser:
        return RdkitHelmParser()


class SequencePlugin(_RdkitSmilesPlugin):
    """Convert one-letter peptide sequences into canonical SMILES."""

    name: BuiltinNotation = "sequence"
    description = "One-letter L-amino acid sequence (RDKit MolFromSequence)"

    def create_parser(self) -> RdkitSequenceParser:
        return RdkitSequenceParser()
