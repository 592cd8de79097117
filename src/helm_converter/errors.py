"""Exception hierarchy for notation conversion.

Every error carries an ``exit_code`` that the CLI reports when the error is
fatal for the run. Per-line errors (``ConversionError`` and subclasses) are
normally recovered inside the line loop and never reach the CLI.
"""

from __future__ import annotations

EXIT_OK = 0
EXIT_USAGE = 1
EXIT_FILE_ACCESS = 2
EXIT_UNEXPECTED = 99


class HelmConverterError(Exception):
    """Base class for all converter errors."""

    exit_code: int = EXIT_UNEXPECTED


class ConversionError(HelmConverterError):
    """A single notation string could not be converted."""


class NotationParseError(ConversionError):
    """The notation parser rejected the input text."""


class StructureRenderError(ConversionError):
    """A parsed document could not be rendered as a structure string."""


class LineTooLongError(ConversionError):
    """An input line exceeds the configured maximum length."""


class FileAccessError(HelmConverterError):
    """The input could not be read or the output could not be written."""

    exit_code = EXIT_FILE_ACCESS


class ConfigurationError(HelmConverterError):
    """Conversion options failed validation."""

    exit_code = EXIT_USAGE


class PluginError(HelmConverterError):
    """A notation plugin could not be registered, loaded or found."""

    exit_code = EXIT_USAGE


class DependencyError(HelmConverterError):
    """A required chemistry toolkit is not installed."""
