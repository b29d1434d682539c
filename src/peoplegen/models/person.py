"""Person record model."""

from __future__ import annotations

from datetime import date
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Gender(str, Enum):
    """Gender of a generated person. Rendered by its value."""

    MALE = "Male"
    FEMALE = "Female"

    def __str__(self) -> str:
        return self.value


class Person(BaseModel):
    """One synthesized person. Immutable once produced."""

    model_config = ConfigDict(frozen=True)

    first_name: str
    middle_name: str = ""
    last_name: str
    gender: Gender
    birth_date: date
    ssn: str
    salary: int = Field(ge=0)


__all__ = ["Gender", "Person"]
