"""Typed option objects shared across conversion use-cases."""

from __future__ import annotations

from dataclasses import dataclass

from helm_converter.schemas import DEFAULT_MAX_LINE_LENGTH


@dataclass(frozen=True)
class ConversionOptions:
    """Shared conversion options passed through use-cases."""

    notation: str = "helm"
    encoding: str = "utf-8"
    max_line_length: int = DEFAULT_MAX_LINE_LENGTH
    plugin_modules: tuple[str, ...] = ()
