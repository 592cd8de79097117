"""Notation parsers backed by RDKit's macromolecule readers."""

from __future__ import annotations

from collections.abc import Callable
from types import ModuleType
from typing import Any

from helm_converter.errors import DependencyError, NotationParseError

# RDKit sequence flavors: 0 = L-amino acid protein, 2..5 = RNA, 6..9 = DNA.
PROTEIN_FLAVOR = 0


def _import_chem() -> ModuleType:
    """Import ``rdkit.Chem`` or raise ``DependencyError``."""
    try:
        from rdkit import Chem
    except Exception as exc:
        raise DependencyError("RDKit is required for notation parsing.") from exc
    return Chem


class _RdkitParser:
    """Shared parse flow: call an RDKit reader, reject ``None`` results."""

    notation_label = "notation"

    def __init__(self) -> None:
        self._chem = _import_chem()

    def _reader(self) -> Callable[[str], Any]:
        raise NotImplementedError

    def parse(self, notation: str) -> Any:
        """Parse notation text into an RDKit molecule.

        Parameters
        ----------
        notation : str
            Trimmed notation string.

        Returns
        -------
        rdkit.Chem.Mol
            Molecule covering every entity in the notation.

        Raises
        ------
        NotationParseError
            If RDKit rejects the text.
        """
        mol = self._reader()(notation)
        if mol is None:
            raise NotationParseError(
                f"RDKit could not parse the {self.notation_label} string."
            )
        return mol


class RdkitHelmParser(_RdkitParser):
    """Parse HELM notation with ``Chem.MolFromHELM``."""

    notation_label = "HELM"

    def _reader(self) -> Callable[[str], Any]:
        return self._chem.MolFromHELM


class RdkitSequenceParser(_RdkitParser):
    """Parse one-letter residue sequences with ``Chem.MolFromSequence``."""

    notation_label = "sequence"

    def __init__(self, flavor: int = PROTEIN_FLAVOR) -> None:
        super().__init__()
        self.flavor = flavor

    def _reader(self) -> Callable[[str], Any]:
        return lambda text: self._chem.MolFromSequence(text, flavor=self.flavor)

