"""Field catalog: which person fields can be written, in what order, under what names."""

from __future__ import annotations

from enum import Enum
from typing import Dict, List, Sequence, Tuple, Union

from .models import HeaderFormat, Person, SerializationConfig


class PersonField(str, Enum):
    FIRST_NAME = "FirstName"
    MIDDLE_NAME = "MiddleName"
    LAST_NAME = "LastName"
    GENDER = "Gender"
    BIRTH_DATE = "BirthDate"
    SSN = "SSN"
    SALARY = "Salary"


_CANONICAL_ORDER: Tuple[PersonField, ...] = (
    PersonField.FIRST_NAME,
    PersonField.MIDDLE_NAME,
    PersonField.LAST_NAME,
    PersonField.GENDER,
    PersonField.BIRTH_DATE,
    PersonField.SSN,
    PersonField.SALARY,
)

FIELD_NAMES: Dict[HeaderFormat, Dict[PersonField, str]] = {
    HeaderFormat.ENGLISH: {
        PersonField.FIRST_NAME: "first name",
        PersonField.MIDDLE_NAME: "middle name",
        PersonField.LAST_NAME: "last name",
        PersonField.GENDER: "gender",
        PersonField.BIRTH_DATE: "birth date",
        PersonField.SSN: "ssn",
        PersonField.SALARY: "salary",
    },
    HeaderFormat.CAMEL_CASE: {
        PersonField.FIRST_NAME: "firstName",
        PersonField.MIDDLE_NAME: "middleName",
        PersonField.LAST_NAME: "lastName",
        PersonField.GENDER: "gender",
        PersonField.BIRTH_DATE: "birthDate",
        PersonField.SSN: "ssn",
        PersonField.SALARY: "salary",
    },
    HeaderFormat.SNAKE_CASE: {
        PersonField.FIRST_NAME: "first_name",
        PersonField.MIDDLE_NAME: "middle_name",
        PersonField.LAST_NAME: "last_name",
        PersonField.GENDER: "gender",
        PersonField.BIRTH_DATE: "birth_date",
        PersonField.SSN: "ssn",
        PersonField.SALARY: "salary",
    },
}


def canonical_order() -> Tuple[PersonField, ...]:
    """Return every field in the order used for all rows and objects."""
    return _CANONICAL_ORDER


def label_for(field: PersonField, header_format: HeaderFormat) -> str:
    """Return the header/key label for a field under a naming convention."""
    return FIELD_NAMES[header_format][field]


def active_fields(config: SerializationConfig) -> Tuple[PersonField, ...]:
    """Filter the canonical order down to the fields the config asks for.

    Computed once per write and shared by the header and every record, so
    the two can never disagree.
    """
    excluded = set()
    if not config.ssns:
        excluded.add(PersonField.SSN)
    if not config.salaries:
        excluded.add(PersonField.SALARY)
    return tuple(f for f in _CANONICAL_ORDER if f not in excluded)


def field_labels(
    fields: Sequence[PersonField], header_format: HeaderFormat
) -> List[str]:
    return [label_for(f, header_format) for f in fields]


def field_value(person: Person, field: PersonField) -> Union[str, int]:
    """Extract a field's output value: text for everything but salary."""
    if field is PersonField.FIRST_NAME:
        return person.first_name
    if field is PersonField.MIDDLE_NAME:
        return person.middle_name
    if field is PersonField.LAST_NAME:
        return person.last_name
    if field is PersonField.GENDER:
        return str(person.gender)
    if field is PersonField.BIRTH_DATE:
        # yyyy-MM-dd, zero-padded for any year
        return person.birth_date.isoformat()
    if field is PersonField.SSN:
        return person.ssn
    return person.salary


__all__ = [
    "FIELD_NAMES",
    "PersonField",
    "active_fields",
    "canonical_order",
    "field_labels",
    "field_value",
    "label_for",
]
