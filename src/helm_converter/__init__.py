"""Top-level API for notation-to-SMILES conversion."""

from __future__ import annotations

from collections.abc import Iterable

__version__ = "0.1.0"


def convert_notation(
    text: str,
    notation: str = "helm",
    *,
    plugin_modules: Iterable[str] | None = None,
) -> str:
    """Convert one notation string to canonical SMILES.

    Parameters
    ----------
    text : str
        Notation string; surrounding whitespace is ignored.
    notation : str, default="helm"
        Name of the notation plugin to parse with.
    plugin_modules : Iterable[str] | None, optional
        Extra plugin modules (import paths or file paths) to load.

    Returns
    -------
    str
        Canonical SMILES covering every entity in the notation.

    Raises
    ------
    NotationParseError
        If ``text`` is blank or cannot be parsed.
    ConversionError
        If rendering fails.
    PluginError
        If ``notation`` is not registered.
    """
    from helm_converter.application.results import LineSuccess
    from helm_converter.application.use_cases import convert_line
    from helm_converter.errors import ConversionError, NotationParseError
    from helm_converter.plugins.registry import create_default_registry

    stripped = text.strip()
    if not stripped:
        raise NotationParseError("notation string is blank.")

    plugin = create_default_registry(extra_modules=plugin_modules).get(notation)
    result = convert_line(
        stripped,
        parser=plugin.create_parser(),
        renderer=plugin.create_renderer(),
    )
    if isinstance(result, LineSuccess):
        return result.output
    if result.exception is not None:
        raise result.exception
    raise ConversionError(f"{result.category}: {result.reason}")


def helm_to_smiles(helm: str) -> str:
    """Convert one HELM string to canonical SMILES.

    Parameters
    ----------
    helm : str
        HELM notation, e.g. ``"PEPTIDE1{A.G.C}$$$$"``.

    Returns
    -------
    str
        Canonical SMILES.
    """
    return convert_notation(helm, notation="helm")


__all__ = [
    "convert_notation",
    "helm_to_smiles",
]
