"""peoplegen: generate fake people and write them as CSV or JSON."""

from .generator import PeopleGenerator
from .messages import EmptyMessageHandler, MessageHandler, VerboseMessageHandler
from .models import (
    Completed,
    Failed,
    Person,
    SerializationConfig,
    WriteResult,
)
from .writer import PeopleWriter, write_people

__all__ = [
    "__version__",
    "Completed",
    "EmptyMessageHandler",
    "Failed",
    "MessageHandler",
    "PeopleGenerator",
    "PeopleWriter",
    "Person",
    "SerializationConfig",
    "VerboseMessageHandler",
    "WriteResult",
    "write_people",
]

__version__ = "0.1.0"
