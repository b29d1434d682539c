"""Serialization configuration and the enums it is built from."""

from __future__ import annotations

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, field_validator


class FileFormat(str, Enum):
    """Output file format."""

    CSV = "csv"
    JSON = "json"


class HeaderFormat(str, Enum):
    """Naming convention for CSV headers and JSON keys."""

    ENGLISH = "english"
    CAMEL_CASE = "camelCase"
    SNAKE_CASE = "snake_case"


class JsonFormat(str, Enum):
    """Declared JSON layout. Ignored when pretty-printing is requested."""

    ARRAY = "array"
    LINES = "lines"


def validate_delimiter(v: str) -> str:
    """CSV delimiters are exactly one character and can't clash with quoting."""

    if len(v) != 1:
        raise ValueError("Delimiter must be a single character")
    if v in ('"', "\r", "\n"):
        raise ValueError(f"Delimiter cannot be {v!r}")
    return v


class SerializationConfig(BaseModel):
    """Immutable snapshot of everything the writer needs to know.

    ``destination`` of ``None`` means standard output.
    """

    model_config = ConfigDict(frozen=True)

    file_format: FileFormat = FileFormat.CSV
    header_format: HeaderFormat = HeaderFormat.SNAKE_CASE
    delimiter: str = ","
    header: bool = True
    ssns: bool = False
    salaries: bool = False
    json_format: JsonFormat = JsonFormat.LINES
    pretty: bool = False
    destination: Path | None = None

    @field_validator("delimiter")
    @classmethod
    def single_character(cls, v: str) -> str:
        return validate_delimiter(v)


class EncodingMode(str, Enum):
    """The closed set of encoding strategies, derived once per write."""

    CSV = "csv"
    JSON_ARRAY = "json-array"
    JSON_PRETTY = "json-pretty"
    JSON_LINES = "json-lines"

    @property
    def buffered(self) -> bool:
        """Whether the mode materializes every record before writing."""

        return self in (EncodingMode.JSON_ARRAY, EncodingMode.JSON_PRETTY)

    @classmethod
    def for_config(cls, config: SerializationConfig) -> "EncodingMode":
        if config.file_format is FileFormat.CSV:
            return cls.CSV
        if config.pretty:
            return cls.JSON_PRETTY
        if config.json_format is JsonFormat.ARRAY:
            return cls.JSON_ARRAY
        return cls.JSON_LINES


__all__ = [
    "EncodingMode",
    "FileFormat",
    "HeaderFormat",
    "JsonFormat",
    "SerializationConfig",
    "validate_delimiter",
]
