"""Field states of the Common/Combined log tokenizer, in line order."""
from __future__ import annotations

from enum import IntEnum


class ParseState(IntEnum):
    """Which field of a log line is being scanned.

    Common:   ADDRESS .. CONTENT
    Combined: Common + REFERER + AGENT
    """

    ADDRESS = 0
    IDENTITY = 1
    USER = 2
    TIME = 3
    METHOD = 4
    PATH = 5
    PROTOCOL = 6
    CODE = 7
    CONTENT = 8
    REFERER = 9
    AGENT = 10

    def next(self) -> ParseState:
        """Following state; AGENT is terminal."""
        if self is ParseState.AGENT:
            return self
        return ParseState(self + 1)


# Fields delimited by whitespace only (ADDRESS also splits on commas)
UNQUOTED = frozenset({
    ParseState.ADDRESS,
    ParseState.IDENTITY,
    ParseState.USER,
    ParseState.CODE,
    ParseState.CONTENT,
})

# Optional quoted fields of the Combined format
QUOTED = frozenset({ParseState.REFERER, ParseState.AGENT})

# First state that is not mandatory; reaching it means the Common part is complete
OPTIONAL_FROM = ParseState.REFERER
