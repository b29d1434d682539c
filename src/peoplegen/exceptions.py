"""peoplegen exceptions."""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional


class PeopleGenError(Exception):
    """Base class for errors raised while writing people records."""


@dataclass
class SinkError(PeopleGenError):
    """The output destination could not be opened."""

    destination: Path
    reason: str

    def __str__(self) -> str:
        return f"Cannot open {self.destination}: {self.reason}"


@dataclass
class EncodingError(PeopleGenError):
    """A record could not be rendered in the output format."""

    message: str
    index: Optional[int] = None

    def __str__(self) -> str:
        if self.index is None:
            return self.message
        return f"Record {self.index + 1}: {self.message}"


@dataclass
class OutputWriteError(PeopleGenError):
    """Writing to (or closing) the output destination failed."""

    message: str

    def __str__(self) -> str:
        return self.message


__all__ = ["EncodingError", "OutputWriteError", "PeopleGenError", "SinkError"]
