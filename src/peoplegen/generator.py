"""Random people record generator."""

import random
from datetime import date, timedelta
from typing import Iterator, Optional

from faker import Faker

from .models import Gender, Params, Person


class PeopleGenerator:
    """Lazily produces random people according to the parameters.

    With ``params.seed`` set, two generators produce the same sequence.
    """

    def __init__(self, params: Params, locale: str = "en_US"):
        self.params = params
        self._random = random.Random(params.seed)
        self._fake = Faker(locale)
        if params.seed is not None:
            self._fake.seed_instance(params.seed)

        self._first_birthday = date(params.year_min, 1, 1)
        self._birthday_span = (date(params.year_max, 12, 31) - self._first_birthday).days

    def generate(self, total: Optional[int] = None) -> Iterator[Person]:
        """Yield ``total`` people (default: ``params.total_people``), one at a time."""
        count = self.params.total_people if total is None else total
        for _ in range(count):
            yield self.make_person()

    def make_person(self) -> Person:
        gender = self._gender()
        middle_name = ""
        if self._random.randrange(100) < self.params.middle_name_percent:
            middle_name = self._first_name(gender)

        return Person(
            first_name=self._first_name(gender),
            middle_name=middle_name,
            last_name=self._fake.last_name(),
            gender=gender,
            birth_date=self._birth_date(),
            ssn=self._fake.ssn(),
            salary=self._random.randint(self.params.salary_min, self.params.salary_max),
        )

    def _gender(self) -> Gender:
        if self._random.randrange(100) < self.params.male_percent:
            return Gender.MALE
        return Gender.FEMALE

    def _first_name(self, gender: Gender) -> str:
        if gender is Gender.MALE:
            return self._fake.first_name_male()
        return self._fake.first_name_female()

    def _birth_date(self) -> date:
        offset = self._random.randint(0, self._birthday_span)
        return self._first_birthday + timedelta(days=offset)


__all__ = ["PeopleGenerator"]
