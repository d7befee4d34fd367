"""Render parse results onto the output and diagnostic streams."""
from __future__ import annotations

from typing import TextIO

from .parsers.base import ParseFailure, ParseResult, Record

FIELD_SEPARATOR = "\t"


def format_record(record: Record) -> str:
    return FIELD_SEPARATOR.join(record.tokens)


def format_failure(failure: ParseFailure, line: str) -> str:
    return f'Error "{failure.reason}" on line: {line}'


class RecordEmitter:
    """Write records to *out* and diagnostics to *err*, one line each.

    Nothing is written to *out* for a failed line.
    """

    def __init__(self, out: TextIO, err: TextIO) -> None:
        self._out = out
        self._err = err

    def emit(self, result: ParseResult, line: str) -> None:
        if isinstance(result, Record):
            self.write_record(result)
        else:
            self.write_failure(result, line)

    def write_record(self, record: Record) -> None:
        self._out.write(format_record(record) + "\n")

    def write_failure(self, failure: ParseFailure, line: str) -> None:
        self._err.write(format_failure(failure, line) + "\n")
