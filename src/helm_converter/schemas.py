"""Pydantic schemas for runtime validation of conversion inputs."""

from __future__ import annotations

import codecs
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_MAX_LINE_LENGTH = 100_000


class FileConversionConfig(BaseModel):
    """Validated input for file-based notation conversion."""

    model_config = ConfigDict(extra="forbid")

    input_path: Path
    output_path: Path
    notation: str = "helm"
    encoding: str = "utf-8"
    max_line_length: int = Field(default=DEFAULT_MAX_LINE_LENGTH, ge=1)

    @field_validator("notation")
    @classmethod
    def _validate_notation(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("notation name cannot be empty.")
        return value

    @field_validator("encoding")
    @classmethod
    def _validate_encoding(cls, value: str) -> str:
        try:
            name = codecs.lookup(value).name
        except LookupError as exc:
            raise ValueError(f"unknown text encoding '{value}'.") from exc
        try:
            "".encode(name)
        except LookupError as exc:
            # rot13 and base64 are codecs but not text encodings.
            raise ValueError(f"'{value}' is not a text encoding.") from exc
        return name
