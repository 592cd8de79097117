"""Application ports for clean architecture boundaries."""

from __future__ import annotations

from typing import Protocol

from helm_converter.types import NotationDocument


class NotationParser(Protocol):
    """Parse one notation string into an in-memory document."""

    def parse(self, notation: str) -> NotationDocument:
        """Parse text, raising on malformed or unsupported notation."""


class StructureRenderer(Protocol):
    """Render a parsed document as a canonical structure string."""

    def render(self, document: NotationDocument) -> str:
        """Render every entity of the document into one string."""
