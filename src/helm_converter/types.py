"""Shared type aliases and protocols for converter modules."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Literal, Protocol

type BuiltinNotation = Literal["helm", "sequence"]


class NotationDocument(Protocol):
    """Marker protocol for parsed notation documents (e.g. an RDKit ``Mol``)."""


type PluginModules = Iterable[str]
