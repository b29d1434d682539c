"""Result and error models returned by the writer."""

from __future__ import annotations

from typing import Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from .config import EncodingMode

FailureKind = Literal["sink", "encoding", "write"]


class Completed(BaseModel):
    """All records were written and the sink was released."""

    mode: EncodingMode
    records: int = 0
    chars_written: int = 0

    @property
    def ok(self) -> bool:
        return True


class Failed(BaseModel):
    """The write stopped at the first failure.

    ``output_written`` tells callers whether anything reached the destination.
    Buffered (array) modes fail before writing; streaming modes may leave the
    records written so far in place.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    kind: FailureKind
    mode: EncodingMode
    message: str
    records: int = 0
    chars_written: int = 0
    cause: BaseException = Field(exclude=True)

    @property
    def ok(self) -> bool:
        return False

    @property
    def output_written(self) -> bool:
        return self.chars_written > 0

    def __str__(self) -> str:
        return self.message


WriteResult = Union[Completed, Failed]


__all__ = ["Completed", "Failed", "FailureKind", "WriteResult"]
