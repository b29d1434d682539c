"""Pytest configuration and shared fixtures."""

import io
from datetime import date

import pytest
from click.testing import CliRunner

from peoplegen.cli.main import ENVVAR_PREFIX, cli
from peoplegen.messages import MessageHandler
from peoplegen.models import Gender, Person
from peoplegen.sink import Sink


class RecordingMessageHandler(MessageHandler):
    """Keeps every message so tests can inspect them."""

    def __init__(self):
        self.messages = []

    def verbose(self, msg: str) -> None:
        self.messages.append(msg)

    @property
    def progress(self):
        return [m for m in self.messages if m.startswith("...")]


@pytest.fixture
def messages():
    return RecordingMessageHandler()


@pytest.fixture
def ann():
    """The single record used by the worked examples."""
    return Person(
        first_name="Ann",
        middle_name="",
        last_name="Lee",
        gender=Gender.FEMALE,
        birth_date=date(1980, 1, 2),
        ssn="111-22-3333",
        salary=50000,
    )


@pytest.fixture
def bob():
    return Person(
        first_name="Bob",
        middle_name="James",
        last_name="Smith",
        gender=Gender.MALE,
        birth_date=date(1975, 12, 31),
        ssn="222-33-4444",
        salary=72000,
    )


@pytest.fixture
def make_people(ann):
    """Build ``n`` distinct people derived from ``ann``."""

    def _make(n):
        return [
            ann.model_copy(update={"first_name": f"Ann{i}", "salary": i})
            for i in range(n)
        ]

    return _make


@pytest.fixture
def buffer():
    return io.StringIO()


@pytest.fixture
def sink(buffer):
    return Sink(buffer, "<buffer>")


@pytest.fixture
def cli_runner():
    """Provide Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def invoke(cli_runner):
    """Helper to invoke the CLI with args and optional environment.

    Usage:
        result = invoke(["10"])                      # CSV to stdout
        result = invoke(["-F", "json", "5"], env={"PEOPLEGEN_SEED": "1"})
    """

    def _invoke(args, env=None):
        return cli_runner.invoke(
            cli, args, env=env, auto_envvar_prefix=ENVVAR_PREFIX
        )

    return _invoke
