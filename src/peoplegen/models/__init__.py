"""Pydantic models for people records, configuration and results."""

from .config import (
    EncodingMode,
    FileFormat,
    HeaderFormat,
    JsonFormat,
    SerializationConfig,
)
from .errors import Completed, Failed, FailureKind, WriteResult
from .params import Params
from .person import Gender, Person

__all__ = [
    "Completed",
    "EncodingMode",
    "Failed",
    "FailureKind",
    "FileFormat",
    "Gender",
    "HeaderFormat",
    "JsonFormat",
    "Params",
    "Person",
    "SerializationConfig",
    "WriteResult",
]
