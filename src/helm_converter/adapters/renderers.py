"""Structure renderers for parsed notation documents."""

from __future__ import annotations

from typing import Any

from helm_converter.adapters.parsers import _import_chem
from helm_converter.errors import StructureRenderError


class RdkitSmilesRenderer:
    """Render RDKit molecules as canonical SMILES.

    Disconnected entities (e.g. several HELM polymers without connections)
    come out as one dot-separated SMILES string.
    """

    def __init__(self, isomeric: bool = True) -> None:
        self._chem = _import_chem()
        self.isomeric = isomeric

    def render(self, document: Any) -> str:
        """Render a molecule as canonical SMILES.

        Parameters
        ----------
        document : rdkit.Chem.Mol
            Molecule produced by one of the RDKit notation parsers.

        Returns
        -------
        str
            Canonical SMILES covering every fragment of the molecule.

        Raises
        ------
        StructureRenderError
            If the molecule has no atoms.
        """
        if document.GetNumAtoms() == 0:
            raise StructureRenderError("parsed structure contains no atoms.")
        return self._chem.MolToSmiles(
            document, isomericSmiles=self.isomeric, canonical=True
        )
