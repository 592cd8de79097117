"""Public file-based conversion API (delegates to application use-cases)."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable
from typing import Optional

from helm_converter.application.results import ConversionResult
from helm_converter.application.use_cases import build_conversion_options
from helm_converter.application.use_cases import convert_file
from helm_converter.schemas import DEFAULT_MAX_LINE_LENGTH


def convert_notation_file(
    input_path: Path,
    output_path: Path,
    notation: str = "helm",
    encoding: str = "utf-8",
    max_line_length: int = DEFAULT_MAX_LINE_LENGTH,
    plugin_modules: Optional[Iterable[str]] = None,
) -> ConversionResult:
    """Convert a file of notation strings into a file of canonical SMILES."""
    options = build_conversion_options(
        notation=notation,
        encoding=encoding,
        max_line_length=max_line_length,
        plugin_modules=plugin_modules,
    )
    return convert_file(
        input_path=Path(input_path),
        output_path=Path(output_path),
        options=options,
    )


def convert_helm_file_to_smiles(
    input_path: Path,
    output_path: Path,
    encoding: str = "utf-8",
    max_line_length: int = DEFAULT_MAX_LINE_LENGTH,
) -> ConversionResult:
    """Convert a file of HELM strings into a file of canonical SMILES."""
    return convert_notation_file(
        input_path=input_path,
        output_path=output_path,
        notation="helm",
        encoding=encoding,
        max_line_length=max_line_length,
    )
