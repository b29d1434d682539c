"""Validated command line parameters."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .config import (
    FileFormat,
    HeaderFormat,
    JsonFormat,
    SerializationConfig,
    validate_delimiter,
)


class Params(BaseModel):
    """Everything the command line can set, after validation.

    Only one of ``male_percent`` / ``female_percent`` needs to be given; the
    other is filled in as its complement. With neither, the split is 50/50.
    """

    model_config = ConfigDict(frozen=True)

    total_people: int = Field(ge=0)
    file_format: FileFormat = FileFormat.CSV
    header_format: HeaderFormat = HeaderFormat.SNAKE_CASE
    delimiter: str = ","
    header: bool = True
    ssns: bool = False
    salaries: bool = False
    json_format: JsonFormat = JsonFormat.LINES
    pretty: bool = False
    output_file: Path | None = None
    male_percent: int = Field(default=50, ge=0, le=100)
    female_percent: int = Field(default=50, ge=0, le=100)
    year_min: int = Field(default=1940, ge=1, le=9999)
    year_max: int = Field(default=2000, ge=1, le=9999)
    salary_min: int = Field(default=20_000, ge=0)
    salary_max: int = Field(default=500_000, ge=0)
    middle_name_percent: int = Field(default=50, ge=0, le=100)
    seed: int | None = None
    verbose: bool = False

    @model_validator(mode="before")
    @classmethod
    def complete_gender_split(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        male = data.get("male_percent")
        female = data.get("female_percent")
        if male is None and female is None:
            male, female = 50, 50
        elif male is None:
            male = 100 - female
        elif female is None:
            female = 100 - male
        return {**data, "male_percent": male, "female_percent": female}

    @field_validator("delimiter")
    @classmethod
    def single_character(cls, v: str) -> str:
        return validate_delimiter(v)

    @model_validator(mode="after")
    def check_ranges(self) -> "Params":
        if self.male_percent + self.female_percent != 100:
            raise ValueError(
                f"Male ({self.male_percent}%) and female "
                f"({self.female_percent}%) percentages must add up to 100"
            )
        if self.year_min > self.year_max:
            raise ValueError(
                f"Minimum year ({self.year_min}) exceeds maximum year "
                f"({self.year_max})"
            )
        if self.salary_min > self.salary_max:
            raise ValueError(
                f"Minimum salary ({self.salary_min}) exceeds maximum salary "
                f"({self.salary_max})"
            )
        return self

    def to_serialization_config(self) -> SerializationConfig:
        """Build the writer configuration from these parameters."""

        return SerializationConfig(
            file_format=self.file_format,
            header_format=self.header_format,
            delimiter=self.delimiter,
            header=self.header,
            ssns=self.ssns,
            salaries=self.salaries,
            json_format=self.json_format,
            pretty=self.pretty,
            destination=self.output_file,
        )


__all__ = ["Params"]
