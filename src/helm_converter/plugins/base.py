"""Plugin protocol for notation backends."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from helm_converter.application.ports import NotationParser, StructureRenderer


@runtime_checkable
class NotationPlugin(Protocol):
    """Protocol implemented by notation plugins.

    A plugin pairs a parser for one notation with the renderer that turns
    its documents into canonical structure strings.
    """

    name: str
    description: str

    def create_parser(self) -> NotationParser:
        """Build the parser for this notation.

        Returns
        -------
        NotationParser
            Parser instance; construction may raise ``DependencyError``.
        """

    def create_renderer(self) -> StructureRenderer:
        """Build the renderer for documents produced by this plugin's parser.

        Returns
        -------
        StructureRenderer
            Renderer instance; construction may raise ``DependencyError``.
        """
