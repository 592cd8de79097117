"""Application-layer result objects."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True)
class LineSuccess:
    """A line converted to its canonical structure string."""

    output: str


@dataclass(frozen=True)
class LineFailure:
    """A line whose parse or render stage raised.

    ``category`` is the exception class name; the exception itself is kept
    for traceback logging only and takes no part in equality.
    """

    category: str
    reason: str
    exception: BaseException | None = field(default=None, compare=False, repr=False)

    @classmethod
    def from_exception(cls, exc: BaseException) -> LineFailure:
        return cls(category=type(exc).__name__, reason=str(exc), exception=exc)


type LineResult = LineSuccess | LineFailure


@dataclass
class LineTally:
    """Running per-category line counts for one pass over a stream."""

    converted: int = 0
    blank: int = 0
    failed: int = 0

    @property
    def total(self) -> int:
        return self.converted + self.blank + self.failed


@dataclass(frozen=True)
class ConversionResult:
    """Structured outcome of a completed file conversion."""

    output_path: Path
    source_path: Path
    notation: str
    total_lines: int
    converted_lines: int
    blank_lines: int
    failed_lines: int
