"""Application use-cases orchestrating line-by-line notation conversion."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path
from typing import TextIO

from pydantic import ValidationError

from helm_converter.application.options import ConversionOptions
from helm_converter.application.ports import NotationParser, StructureRenderer
from helm_converter.application.results import (
    ConversionResult,
    LineFailure,
    LineResult,
    LineSuccess,
    LineTally,
)
from helm_converter.errors import (
    ConfigurationError,
    FileAccessError,
    LineTooLongError,
    StructureRenderError,
)
from helm_converter.plugins.registry import create_default_registry
from helm_converter.schemas import DEFAULT_MAX_LINE_LENGTH, FileConversionConfig
from helm_converter.types import PluginModules

logger = logging.getLogger(__name__)

_LINE_BREAKS = ("\n", "\r")


def _same_file(first: Path, second: Path) -> bool:
    if first.resolve() == second.resolve():
        return True
    try:
        return first.samefile(second)
    except OSError:
        return False


def _input_encoding(encoding: str) -> str:
    # Drop a leading byte order mark so it cannot end up in line 1.
    return "utf-8-sig" if encoding == "utf-8" else encoding


def convert_line(
    text: str,
    *,
    parser: NotationParser,
    renderer: StructureRenderer,
    max_line_length: int = DEFAULT_MAX_LINE_LENGTH,
) -> LineResult:
    """Use-case: convert one trimmed, non-empty notation string.

    Parameters
    ----------
    text : str
        Notation text with surrounding whitespace already removed.
    parser : NotationParser
        Parses ``text`` into a document.
    renderer : StructureRenderer
        Renders the document as a canonical structure string.
    max_line_length : int
        Longer inputs fail without reaching the parser.

    Returns
    -------
    LineSuccess | LineFailure
        Any exception from either stage is captured as a ``LineFailure``;
        nothing propagates to the caller.
    """
    try:
        if len(text) > max_line_length:
            raise LineTooLongError(
                f"line has {len(text)} characters; the limit is {max_line_length}."
            )
        document = parser.parse(text)
        output = renderer.render(document)
        if not output:
            raise StructureRenderError("renderer produced an empty structure string.")
        if any(mark in output for mark in _LINE_BREAKS):
            raise StructureRenderError("renderer produced a multi-line structure string.")
    except Exception as exc:
        return LineFailure.from_exception(exc)
    return LineSuccess(output=output)


def _log_line_failure(line_number: int, text: str, failure: LineFailure) -> None:
    logger.warning(
        "Error processing line %d (Input: '%s'): %s - %s",
        line_number,
        text,
        failure.category,
        failure.reason,
    )
    if failure.exception is not None:
        logger.debug(
            "Traceback for line %d:", line_number, exc_info=failure.exception
        )


def convert_stream(
    source: Iterable[str],
    sink: TextIO,
    *,
    parser: NotationParser,
    renderer: StructureRenderer,
    max_line_length: int = DEFAULT_MAX_LINE_LENGTH,
) -> LineTally:
    """Use-case: write exactly one output line per source line.

    Blank lines are echoed as blank output without a conversion attempt.
    Failed lines are logged and written as blank output.
    """
    tally = LineTally()
    for line_number, raw_line in enumerate(source, start=1):
        text = raw_line.strip()
        if not text:
            sink.write("\n")
            tally.blank += 1
            continue

        result = convert_line(
            text,
            parser=parser,
            renderer=renderer,
            max_line_length=max_line_length,
        )
        if isinstance(result, LineSuccess):
            sink.write(f"{result.output}\n")
            tally.converted += 1
        else:
            _log_line_failure(line_number, text, result)
            sink.write("\n")
            tally.failed += 1
    return tally


def convert_file(
    *,
    input_path: Path,
    output_path: Path,
    options: ConversionOptions,
    parser: NotationParser | None = None,
    renderer: StructureRenderer | None = None,
) -> ConversionResult:
    """Use-case: convert a notation file into a structure file.

    Raises
    ------
    ConfigurationError
        If options fail validation, or the input and output
        are the same file. No file is touched.
    PluginError
        If the notation plugin cannot be resolved. No file is touched.
    FileAccessError
        If the input cannot be read or the output cannot be written.
    """
    try:
        config = FileConversionConfig(
            input_path=input_path,
            output_path=output_path,
            notation=options.notation,
            encoding=options.encoding,
            max_line_length=options.max_line_length,
        )
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid conversion parameters: {exc}") from exc
    if _same_file(config.input_path, config.output_path):
        raise ConfigurationError(
            f"Input and output must be different files: '{config.input_path}'."
        )

    if parser is None or renderer is None:
        registry = create_default_registry(extra_modules=options.plugin_modules)
        plugin = registry.get(config.notation)
        parser = parser or plugin.create_parser()
        renderer = renderer or plugin.create_renderer()

    logger.info("Input %s file: %s", config.notation, config.input_path)
    logger.info("Output file: %s", config.output_path)

    try:
        # Input first: a missing input must never create or truncate the output.
        with config.input_path.open(
            "r", encoding=_input_encoding(config.encoding), errors="replace"
        ) as source:
            with config.output_path.open("w", encoding="utf-8") as sink:
                logger.info("Starting conversion...")
                tally = convert_stream(
                    source,
                    sink,
                    parser=parser,
                    renderer=renderer,
                    max_line_length=config.max_line_length,
                )
    except OSError as exc:
        raise FileAccessError(
            f"Could not read input file '{config.input_path}' "
            f"or write to output file '{config.output_path}': {exc}"
        ) from exc

    logger.info(
        "Processed %d lines: %d converted, %d blank, %d failed.",
        tally.total,
        tally.converted,
        tally.blank,
        tally.failed,
    )
    logger.info("Conversion finished successfully.")
    return ConversionResult(
        output_path=config.output_path,
        source_path=config.input_path,
        notation=config.notation,
        total_lines=tally.total,
        converted_lines=tally.converted,
        blank_lines=tally.blank,
        failed_lines=tally.failed,
    )


def build_conversion_options(
    *,
    notation: str = "helm",
    encoding: str = "utf-8",
    max_line_length: int = DEFAULT_MAX_LINE_LENGTH,
    plugin_modules: PluginModules | None = None,
) -> ConversionOptions:
    """Build typed option object from command/API params."""
    return ConversionOptions(
        notation=notation,
        encoding=encoding,
        max_line_length=max_line_length,
        plugin_modules=tuple(plugin_modules or ()),
    )
