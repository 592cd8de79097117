"""Application-layer use-cases and option objects."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path
from typing import TextIO

from helm_converter.application.options import ConversionOptions
from helm_converter.application.ports import NotationParser, StructureRenderer
from helm_converter.application.results import (
    ConversionResult,
    LineFailure,
    LineResult,
    LineSuccess,
    LineTally,
)
from helm_converter.schemas import DEFAULT_MAX_LINE_LENGTH
from helm_converter.types import PluginModules


def build_conversion_options(
    *,
    notation: str = "helm",
    encoding: str = "utf-8",
    max_line_length: int = DEFAULT_MAX_LINE_LENGTH,
    plugin_modules: PluginModules | None = None,
) -> ConversionOptions:
    """Build typed conversion options via lazy use-case import."""
    from helm_converter.application.use_cases import build_conversion_options as _impl

    return _impl(
        notation=notation,
        encoding=encoding,
        max_line_length=max_line_length,
        plugin_modules=plugin_modules,
    )


def convert_line(
    text: str,
    *,
    parser: NotationParser,
    renderer: StructureRenderer,
    max_line_length: int = DEFAULT_MAX_LINE_LENGTH,
) -> LineResult:
    """Convert one notation string via lazy use-case import."""
    from helm_converter.application.use_cases import convert_line as _impl

    return _impl(
        text,
        parser=parser,
        renderer=renderer,
        max_line_length=max_line_length,
    )


def convert_stream(
    source: Iterable[str],
    sink: TextIO,
    *,
    parser: NotationParser,
    renderer: StructureRenderer,
    max_line_length: int = DEFAULT_MAX_LINE_LENGTH,
) -> LineTally:
    """Convert a line stream via lazy use-case import."""
    from helm_converter.application.use_cases import convert_stream as _impl

    return _impl(
        source,
        sink,
        parser=parser,
        renderer=renderer,
        max_line_length=max_line_length,
    )


def convert_file(
    *,
    input_path: Path,
    output_path: Path,
    options: ConversionOptions,
    parser: NotationParser | None = None,
    renderer: StructureRenderer | None = None,
) -> ConversionResult:
    """Convert a notation file via lazy use-case import."""
    from helm_converter.application.use_cases import convert_file as _impl

    return _impl(
        input_path=input_path,
        output_path=output_path,
        options=options,
        parser=parser,
        renderer=renderer,
    )


__all__ = [
    "ConversionOptions",
    "ConversionResult",
    "LineFailure",
    "LineResult",
    "LineSuccess",
    "LineTally",
    "NotationParser",
    "StructureRenderer",
    "build_conversion_options",
    "convert_line",
    "convert_stream",
    "convert_file",
]
