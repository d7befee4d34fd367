"""Apache Common and Combined log format tokenizer.

Common:   %h %l %u %t "%r" %>s %b
Combined: Common + "%{Referer}i" "%{User-agent}i"

A small FSM walks each line once, character by character, and moves through
the fields in order (see :class:`ParseState`):

    ADDRESS   may hold several comma-separated addresses (proxy chains)
    IDENTITY  RFC 1413 client identity, only "-" is accepted
    USER
    TIME      bracketed, converted to epoch seconds
    METHOD, PATH, PROTOCOL   pieces of the quoted request line
    CODE, CONTENT
    REFERER, AGENT           optional quoted fields

Every completed token is validated before the next field starts; the first
rejection ends the line.
"""
from __future__ import annotations

import logging

from ..config import Settings
from .base import ParseFailure, ParseResult, Record
from .states import OPTIONAL_FROM, QUOTED, UNQUOTED, ParseState
from .timestamp import logtime_to_epoch
from .validators import validate

logger = logging.getLogger(__name__)


class _LineScanner:
    """Scan state for a single line; discarded once the line is done."""

    def __init__(self, line: str, settings: Settings) -> None:
        self.line = line
        self.settings = settings
        self.state = ParseState.ADDRESS
        self.tokens: list[str] = []
        self.buf: list[str] = []
        self.bracket_open = False
        self.done = False

    def run(self) -> ParseResult:
        for i, ch in enumerate(self.line):
            failure = self._step(i, ch)
            if failure is not None:
                return failure
            if self.done:
                if i + 1 < len(self.line):
                    logger.debug("Ignoring content after AGENT: %r", self.line[i + 1:])
                break
        return self._finish()

    def _escaped(self, i: int) -> bool:
        return i > 0 and self.line[i - 1] == "\\"

    def _step(self, i: int, ch: str) -> ParseFailure | None:
        state = self.state

        if state in UNQUOTED:
            if ch == " " or (ch == "," and state is ParseState.ADDRESS):
                if self.buf:
                    # A comma keeps us in ADDRESS for the next hop.
                    return self._flush(advance=ch == " ")
                return None
            self.buf.append(ch)
            return None

        if state is ParseState.TIME:
            if not self.bracket_open:
                self.bracket_open = ch == "["
            elif ch == "]":
                return self._flush()
            else:
                self.buf.append(ch)
            return None

        # quoted: METHOD/PATH/PROTOCOL end on space too, REFERER/AGENT only on the quote
        is_quote = ch == '"' and not self._escaped(i)
        if is_quote or (ch == " " and (state not in QUOTED or not self.buf)):
            if self.buf:
                return self._flush()
            return None
        self.buf.append(ch)
        return None

    def _flush(self, advance: bool = True) -> ParseFailure | None:
        token = "".join(self.buf)
        self.buf.clear()
        if self.state is ParseState.TIME:
            token = logtime_to_epoch(token)
            self.bracket_open = False

        outcome = validate(self.state, token, self.settings)
        if isinstance(outcome, ParseFailure):
            return outcome

        self.tokens.append(token)
        if self.state is ParseState.AGENT:
            self.done = True
        elif advance:
            self.state = outcome
        return None

    def _finish(self) -> ParseResult:
        # Only unquoted fields can end at end-of-line; an open bracket or
        # quote drops its partial token.
        if self.buf and self.state in UNQUOTED:
            failure = self._flush()
            if failure is not None:
                return failure
        elif self.buf:
            logger.debug("Dropping unterminated %s field: %r", self.state.name, "".join(self.buf))

        if self.state < OPTIONAL_FROM:
            return ParseFailure(
                state=self.state,
                reason=f"Record ended before {self.state.name} was complete.",
            )
        return Record(tokens=tuple(self.tokens))


class CLFParser:
    """Tokenize and validate Common/Combined log lines."""

    def __init__(self, settings: Settings) -> None:
        self._settings = settings

    @property
    def name(self) -> str:
        return "clf"

    def parse_line(self, line: str) -> ParseResult | None:
        """Parse one line (without its terminator).

        Returns a :class:`Record`, a :class:`ParseFailure`, or None for a
        blank line.
        """
        if not line.strip():
            if line:
                logger.debug("Skipping whitespace-only line: %r", line)
            return None
        return _LineScanner(line, self._settings).run()
