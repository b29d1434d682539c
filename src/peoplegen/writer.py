"""Writes a stream of people in the configured format."""

import logging
from collections.abc import Sized
from typing import Callable, Dict, Iterable, Optional

from .encoders import (
    encode_csv,
    encode_json_array,
    encode_json_lines,
    encode_json_pretty,
)
from .exceptions import EncodingError, OutputWriteError, SinkError
from .messages import EmptyMessageHandler, MessageHandler
from .models import (
    Completed,
    EncodingMode,
    Failed,
    FailureKind,
    Person,
    SerializationConfig,
    WriteResult,
)
from .sink import Sink, open_sink

logger = logging.getLogger(__name__)

Encoder = Callable[
    [Iterable[Person], SerializationConfig, Sink, MessageHandler, Optional[int]],
    int,
]

ENCODERS: Dict[EncodingMode, Encoder] = {
    EncodingMode.CSV: encode_csv,
    EncodingMode.JSON_ARRAY: encode_json_array,
    EncodingMode.JSON_PRETTY: encode_json_pretty,
    EncodingMode.JSON_LINES: encode_json_lines,
}


class PeopleWriter:
    """Serializes people records to the destination named by the config.

    Args:
        config: Serialization config, read-only for the writer's lifetime
        msg: Message handler for progress (default: silent)
    """

    def __init__(
        self,
        config: SerializationConfig,
        msg: Optional[MessageHandler] = None,
    ):
        self.config = config
        self.msg = msg or EmptyMessageHandler()

    def write(
        self, people: Iterable[Person], total: Optional[int] = None
    ) -> WriteResult:
        """Write every record and release the destination.

        Args:
            people: Records to write. Consumed once, in order.
            total: Number of records, if known. Defaults to ``len(people)``
                for sized collections. Only used in messages.

        Returns:
            Completed, or Failed describing the first failure. A Failed result
            from a buffered (array) mode never has output written; streaming
            modes may have written the records before the failure.
        """
        if total is None and isinstance(people, Sized):
            total = len(people)

        if total is None:
            self.msg.verbose("Writing people record stream.")
        else:
            self.msg.verbose(f"Writing {total} people records.")

        mode = EncodingMode.for_config(self.config)
        encoder = ENCODERS[mode]
        logger.debug("Encoding mode %s", mode.value)

        sink: Optional[Sink] = None
        try:
            with open_sink(self.config.destination) as sink:
                records = encoder(people, self.config, sink, self.msg, total)
        except SinkError as e:
            return self._failed("sink", mode, e, sink)
        except EncodingError as e:
            return self._failed("encoding", mode, e, sink)
        except OutputWriteError as e:
            return self._failed("write", mode, e, sink)

        return Completed(
            mode=mode, records=records, chars_written=sink.chars_written
        )

    def _failed(
        self,
        kind: FailureKind,
        mode: EncodingMode,
        error: Exception,
        sink: Optional[Sink],
    ) -> Failed:
        failed = Failed(
            kind=kind,
            mode=mode,
            message=str(error),
            records=sink.records_written if sink else 0,
            chars_written=sink.chars_written if sink else 0,
            cause=error,
        )
        logger.info(
            "%s failure writing %s (%d records already written): %s",
            kind,
            mode.value,
            failed.records,
            failed.message,
        )
        return failed


def write_people(
    people: Iterable[Person],
    config: SerializationConfig,
    msg: Optional[MessageHandler] = None,
    total: Optional[int] = None,
) -> WriteResult:
    """Write people per ``config``. See :meth:`PeopleWriter.write`."""
    return PeopleWriter(config, msg).write(people, total)


__all__ = ["ENCODERS", "PeopleWriter", "write_people"]
