"""Unit tests for the random people generator."""

import re
from collections.abc import Iterator
from datetime import date

from peoplegen.generator import PeopleGenerator
from peoplegen.models import Gender, Params, Person


def test_generate_is_lazy():
    people = PeopleGenerator(Params(total_people=3, seed=1)).generate()
    assert isinstance(people, Iterator)
    assert isinstance(next(people), Person)


def test_generate_count():
    generator = PeopleGenerator(Params(total_people=7, seed=1))
    assert len(list(generator.generate())) == 7
    assert len(list(generator.generate(2))) == 2


def test_seed_reproducible():
    params = Params(total_people=20, seed=42)
    first = list(PeopleGenerator(params).generate())
    second = list(PeopleGenerator(params).generate())
    assert first == second


def test_all_male():
    params = Params(total_people=50, male_percent=100, seed=3)
    assert {p.gender for p in PeopleGenerator(params).generate()} == {Gender.MALE}


def test_all_female():
    params = Params(total_people=50, female_percent=100, seed=3)
    assert {p.gender for p in PeopleGenerator(params).generate()} == {Gender.FEMALE}


def test_birth_dates_in_range():
    params = Params(total_people=200, year_min=1970, year_max=1971, seed=5)
    for person in PeopleGenerator(params).generate():
        assert date(1970, 1, 1) <= person.birth_date <= date(1971, 12, 31)


def test_salaries_in_range():
    params = Params(total_people=200, salary_min=1000, salary_max=1010, seed=5)
    for person in PeopleGenerator(params).generate():
        assert 1000 <= person.salary <= 1010


def test_middle_names():
    without = Params(total_people=50, middle_name_percent=0, seed=9)
    assert all(p.middle_name == "" for p in PeopleGenerator(without).generate())

    always = Params(total_people=50, middle_name_percent=100, seed=9)
    assert all(p.middle_name for p in PeopleGenerator(always).generate())


def test_ssn_format():
    params = Params(total_people=20, seed=11)
    for person in PeopleGenerator(params).generate():
        assert re.fullmatch(r"\d{3}-\d{2}-\d{4}", person.ssn)
