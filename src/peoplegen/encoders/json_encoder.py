"""JSON encoder for people records: compact array, pretty array, or one object per line."""

import json
from typing import Any, Dict, Iterable, List, Optional, Sequence

from ..exceptions import EncodingError
from ..fields import PersonField, active_fields, field_value, label_for
from ..messages import MessageHandler
from ..models import EncodingMode, HeaderFormat, Person, SerializationConfig
from ..sink import Sink
from .base import at_verbose_threshold, progress_message


def person_to_dict(
    person: Person, fields: Sequence[PersonField], header_format: HeaderFormat
) -> Dict[str, Any]:
    """Build the JSON object for one person. Keys follow ``fields`` order."""
    return {label_for(f, header_format): field_value(person, f) for f in fields}


def _dumps(value: Any, pretty: bool = False) -> str:
    if pretty:
        return json.dumps(value, indent=2, ensure_ascii=False, allow_nan=False)
    return json.dumps(
        value, separators=(",", ":"), ensure_ascii=False, allow_nan=False
    )


def _converting_message(total: Optional[int]) -> str:
    if total is None:
        return "Converting people record stream to JSON."
    return f"Converting {total} people records to JSON."


def _encode_array(
    people: Iterable[Person],
    config: SerializationConfig,
    sink: Sink,
    msg: MessageHandler,
    total: Optional[int],
    pretty: bool,
) -> int:
    fields = active_fields(config)

    msg.verbose(_converting_message(total))
    objects: List[Dict[str, Any]] = [
        person_to_dict(p, fields, config.header_format) for p in people
    ]
    try:
        text = _dumps(objects, pretty=pretty)
    except (TypeError, ValueError) as e:
        raise EncodingError(str(e)) from e

    if pretty:
        msg.verbose("Writing pretty-printed JSON array.")
    else:
        msg.verbose("Writing compact JSON array.")
    sink.write(f"{text}\n", records=len(objects))
    return len(objects)


def encode_json_array(
    people: Iterable[Person],
    config: SerializationConfig,
    sink: Sink,
    msg: MessageHandler,
    total: Optional[int] = None,
) -> int:
    """Write all people as one compact JSON array line.

    Buffers every record in memory (the array must be complete before it can
    be written). Encoding failures are detected before anything is written.
    """
    return _encode_array(people, config, sink, msg, total, pretty=False)


def encode_json_pretty(
    people: Iterable[Person],
    config: SerializationConfig,
    sink: Sink,
    msg: MessageHandler,
    total: Optional[int] = None,
) -> int:
    """Write all people as one indented JSON array. Buffers like the compact array."""
    return _encode_array(people, config, sink, msg, total, pretty=True)


def encode_json_lines(
    people: Iterable[Person],
    config: SerializationConfig,
    sink: Sink,
    msg: MessageHandler,
    total: Optional[int] = None,
) -> int:
    """Write one compact JSON object per line (NDJSON).

    Fully streaming. A record that fails to encode stops the write, but the
    lines before it have already reached the sink: callers must truncate the
    destination before retrying.
    """
    fields = active_fields(config)

    count = 0
    for i, person in enumerate(people):
        if at_verbose_threshold(i):
            msg.verbose(progress_message(i))

        try:
            line = _dumps(person_to_dict(person, fields, config.header_format))
        except (TypeError, ValueError) as e:
            raise EncodingError(str(e), i) from e

        sink.write(f"{line}\n", records=1)
        count += 1

    return count


def encode_json(
    people: Iterable[Person],
    config: SerializationConfig,
    sink: Sink,
    msg: MessageHandler,
    total: Optional[int] = None,
) -> int:
    """Write people as JSON in the style the config selects.

    ``pretty`` wins over ``json_format``; otherwise ``array`` gives a compact
    array and ``lines`` gives NDJSON.

    Returns:
        Number of records written

    Raises:
        EncodingError: If a record can't be serialized
        OutputWriteError: If the sink fails
    """
    mode = EncodingMode.for_config(config)
    if mode is EncodingMode.JSON_PRETTY:
        return encode_json_pretty(people, config, sink, msg, total)
    if mode is EncodingMode.JSON_ARRAY:
        return encode_json_array(people, config, sink, msg, total)
    return encode_json_lines(people, config, sink, msg, total)


__all__ = [
    "encode_json",
    "encode_json_array",
    "encode_json_lines",
    "encode_json_pretty",
    "person_to_dict",
]
