"""CSV encoder for people records."""

import csv
import io
from typing import Iterable, List, Optional, Sequence, Union

from ..exceptions import EncodingError
from ..fields import active_fields, field_labels, field_value
from ..messages import MessageHandler
from ..models import Person, SerializationConfig
from ..sink import Sink
from .base import at_verbose_threshold, progress_message


def _cell(value: Union[str, int]) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    raise TypeError(f"Cannot write {type(value).__name__} value as a CSV cell")


class _RowRenderer:
    """Renders one row at a time into a reusable buffer."""

    def __init__(self, delimiter: str):
        self._buffer = io.StringIO()
        self._writer = csv.writer(
            self._buffer,
            delimiter=delimiter,
            lineterminator="\n",
            quoting=csv.QUOTE_MINIMAL,
        )

    def render(self, cells: Sequence[str]) -> str:
        self._buffer.seek(0)
        self._buffer.truncate()
        self._writer.writerow(cells)
        return self._buffer.getvalue()


def encode_csv(
    people: Iterable[Person],
    config: SerializationConfig,
    sink: Sink,
    msg: MessageHandler,
    total: Optional[int] = None,
) -> int:
    """Write people as CSV rows.

    Args:
        people: Records to write, pulled one at a time
        config: Serialization config (delimiter, header, field selection)
        sink: Open output sink
        msg: Message handler for progress
        total: Unused; accepted so every encoder has the same signature

    Returns:
        Number of records written

    Raises:
        EncodingError: If a record can't be rendered as a row
        OutputWriteError: If the sink fails

    Notes:
        - Streams: memory use doesn't grow with the number of records
        - Each row goes to the sink in one write, so a failure never leaves
          half a row behind; rows already written stay written
    """
    fields = active_fields(config)
    renderer = _RowRenderer(config.delimiter)

    if config.header:
        sink.write(renderer.render(field_labels(fields, config.header_format)))

    count = 0
    for i, person in enumerate(people):
        if at_verbose_threshold(i):
            msg.verbose(progress_message(i))

        try:
            cells: List[str] = [_cell(field_value(person, f)) for f in fields]
            row = renderer.render(cells)
        except (csv.Error, TypeError) as e:
            raise EncodingError(str(e), i) from e

        sink.write(row, records=1)
        count += 1

    return count


__all__ = ["encode_csv"]
