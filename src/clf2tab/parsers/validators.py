"""Per-field grammar checks for Common/Combined log tokens.

Each predicate is liberal: it catches lines that were tokenized out of step
(e.g. a path landing in the address column) rather than HTTP semantics.
"""
from __future__ import annotations

import string
from typing import Callable

from ..config import Settings
from .base import ParseFailure
from .states import ParseState

_DIGITS = frozenset(string.digits)
_ADDRESS_CHARS = _DIGITS | {"."}
_NUMERIC_CHARS = _DIGITS | {"-"}
_USER_HEAD = frozenset(string.ascii_letters + "_")
_USER_TAIL = frozenset(string.ascii_letters + string.digits + "_-@.")

# Dotted-quad upper bound: 4 * 3 digits + 3 dots
_MAX_ADDRESS_LEN = 15


def is_address(token: str) -> bool:
    """``-`` or an IPv4-shaped literal; octets are not range-checked."""
    if token == "-":
        return True
    if not token or len(token) > _MAX_ADDRESS_LEN:
        return False
    return set(token) <= _ADDRESS_CHARS and token.count(".") == 3


def is_identity(token: str) -> bool:
    # RFC 1413 identities are almost never sent; only the absent marker is supported.
    return token == "-"


def is_user(token: str) -> bool:
    """Very liberal username check; ``-`` means anonymous."""
    if token == "-":
        return True
    if not token or token[0] not in _USER_HEAD:
        return False
    return all(ch in _USER_TAIL for ch in token[1:])


def is_numeric(token: str) -> bool:
    """Digits and hyphens only, in any position (``-`` is the absent marker)."""
    return all(ch in _NUMERIC_CHARS for ch in token)


def is_path(token: str) -> bool:
    return token.startswith("/")


def _always(token: str) -> bool:
    return True


# state -> (predicate, rejection reason)
_RULES: dict[ParseState, tuple[Callable[[str], bool], str]] = {
    ParseState.ADDRESS: (is_address, "ADDRESS is invalid."),
    ParseState.IDENTITY: (is_identity, "IDENTITY is unsupported (RFC 1413 client identity)."),
    ParseState.USER: (is_user, "USER is invalid."),
    ParseState.TIME: (is_numeric, "TIME is not numeric."),
    # Methods and protocols vary by deployment, so they are not checked.
    ParseState.METHOD: (_always, ""),
    ParseState.PATH: (is_path, "PATH does not begin with forward slash."),
    ParseState.PROTOCOL: (_always, ""),
    ParseState.CODE: (is_numeric, "CODE is not numeric."),
    ParseState.CONTENT: (is_numeric, "CONTENT is not numeric."),
    ParseState.REFERER: (_always, ""),
    ParseState.AGENT: (_always, ""),
}


def validate(
    state: ParseState, token: str, settings: Settings
) -> ParseState | ParseFailure:
    """Check *token* against the grammar for *state*.

    Returns the state to move to on acceptance, or a :class:`ParseFailure`
    naming the field. With ``settings.skip_validation`` every token is
    accepted but the transition still happens.
    """
    predicate, reason = _RULES[state]
    if settings.skip_validation or predicate(token):
        return state.next()
    return ParseFailure(state=state, reason=reason)
