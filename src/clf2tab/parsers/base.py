"""Result types and the line-parser Protocol."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, Union, runtime_checkable

from .states import ParseState


@dataclass(frozen=True)
class Record:
    """A fully tokenized and validated log line."""

    tokens: tuple[str, ...]

    def __len__(self) -> int:
        return len(self.tokens)


@dataclass(frozen=True)
class ParseFailure:
    """Why a line was rejected: the field being scanned and a reason."""

    state: ParseState
    reason: str


ParseResult = Union[Record, ParseFailure]


@runtime_checkable
class LineParser(Protocol):
    """Protocol for line parsers driven by the converter."""

    @property
    def name(self) -> str:
        """Human-readable parser name (e.g. 'clf')."""
        ...

    def parse_line(self, line: str) -> ParseResult | None:
        """Parse a single line. Returns None if the line should be skipped."""
        ...
