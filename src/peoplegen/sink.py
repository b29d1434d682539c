"""Output sink: a file or stdout, held open for exactly one write."""

import logging
import sys
from contextlib import contextmanager
from pathlib import Path
from typing import Callable, Iterator, Optional, TextIO, TypeVar

from .exceptions import OutputWriteError, SinkError

logger = logging.getLogger(__name__)

T = TypeVar("T")

STDOUT_NAME = "<stdout>"


class Sink:
    """Writable text destination handed to the encoders.

    Counts what went through it so a failed write can report whether the
    destination was touched.
    """

    def __init__(self, stream: TextIO, name: str):
        self._stream = stream
        self.name = name
        self.chars_written = 0
        self.records_written = 0

    def write(self, text: str, records: int = 0) -> None:
        """Write text carrying ``records`` complete records.

        Raises:
            OutputWriteError: If the underlying stream rejects the text
        """
        try:
            self._stream.write(text)
        except (OSError, ValueError) as e:
            raise OutputWriteError(f"Failed writing to {self.name}: {e}") from e
        self.chars_written += len(text)
        self.records_written += records

    def flush(self) -> None:
        try:
            self._stream.flush()
        except (OSError, ValueError) as e:
            raise OutputWriteError(f"Failed flushing {self.name}: {e}") from e


@contextmanager
def open_sink(destination: Optional[Path]) -> Iterator[Sink]:
    """Acquire the output destination for the duration of a ``with`` block.

    Args:
        destination: File path to create/truncate, or None for stdout

    Yields:
        Sink wrapping the open stream

    Raises:
        SinkError: If the file can't be created or opened. Nothing has run yet.

    Notes:
        - Files are closed on every exit path.
        - stdout is never closed, and is flushed only when the block succeeds.
          A failed block leaves stdout in whatever state it was in.
    """
    if destination is None:
        sink = Sink(sys.stdout, STDOUT_NAME)
        logger.debug("Writing to stdout")
        yield sink
        sink.flush()
        return

    try:
        stream = open(destination, "w", newline="", encoding="utf-8")
    except OSError as e:
        logger.debug("Cannot open %s: %s", destination, e)
        raise SinkError(destination, e.strerror or str(e)) from e

    logger.debug("Opened %s for writing", destination)
    try:
        yield Sink(stream, str(destination))
    finally:
        try:
            stream.close()
        except OSError as e:
            raise OutputWriteError(f"Failed closing {destination}: {e}") from e
        logger.debug("Closed %s", destination)


def with_sink(destination: Optional[Path], body: Callable[[Sink], T]) -> T:
    """Run ``body`` with an open sink and return what it returns."""
    with open_sink(destination) as sink:
        return body(sink)


__all__ = ["STDOUT_NAME", "Sink", "open_sink", "with_sink"]
