"""Line-oriented output of bookmark records."""

import sys
from itertools import permutations
from typing import TextIO

from .errors import ConfigError
from .schema import Record

FIELD_SEPARATOR = " "
RECORD_SEPARATOR = "\n"

FIELDS = {
    "t": "title",
    "u": "url",
    "d": "description",
}


def _recognized_specs() -> tuple[str, ...]:
    specs = []
    for size in range(1, len(FIELDS) + 1):
        specs.extend("".join(p) for p in permutations("tud", size))
    return tuple(specs)


# t u d tu td ut ud dt du tud tdu utd udt dtu dut
FORMAT_SPECS = _recognized_specs()


def parse_format_spec(spec: str) -> tuple[str, ...]:
    """Turn a spec such as ``"ut"`` into record field names.

    Raises:
        ConfigError: If ``spec`` is not one of FORMAT_SPECS.
    """
    if spec not in FORMAT_SPECS:
        raise ConfigError(f"unrecognized format: {spec!r} (expected one of {', '.join(FORMAT_SPECS)})")
    return tuple(FIELDS[letter] for letter in spec)


class Printer:
    """Writes one line per record with the fields in spec order."""

    def __init__(self, spec: str, stream: TextIO | None = None):
        self.spec = spec
        self.fields = parse_format_spec(spec)
        self.stream = stream if stream is not None else sys.stdout

    def format_record(self, record: Record) -> str:
        return FIELD_SEPARATOR.join(getattr(record, field) for field in self.fields)

    def print_record(self, record: Record) -> None:
        self.stream.write(self.format_record(record) + RECORD_SEPARATOR)
