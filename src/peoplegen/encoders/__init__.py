"""Encoders for converting people records to output formats."""

from .base import VERBOSE_INTERVAL
from .csv_encoder import encode_csv
from .json_encoder import (
    encode_json,
    encode_json_array,
    encode_json_lines,
    encode_json_pretty,
)

__all__ = [
    "VERBOSE_INTERVAL",
    "encode_csv",
    "encode_json",
    "encode_json_array",
    "encode_json_lines",
    "encode_json_pretty",
]
