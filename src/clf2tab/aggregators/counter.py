"""Tally of rejected lines, keyed by the field that failed and the reason."""
from __future__ import annotations

from collections import Counter as _Counter

from ..parsers.base import ParseFailure
from ..parsers.states import ParseState


class RejectionCounter:
    """Accumulates :class:`ParseFailure` values over one conversion run.

    Failures are grouped by ``(state, reason)``.
    """

    def __init__(self) -> None:
        self._failures: _Counter[tuple[ParseState, str]] = _Counter()

    def add(self, failure: ParseFailure) -> None:
        self._failures[(failure.state, failure.reason)] += 1

    def most_common(self, n: int = 10) -> list[tuple[ParseState, str, int]]:
        """``(state, reason, count)`` triples, most frequent first."""
        return [(state, reason, count) for (state, reason), count in self._failures.most_common(n)]

    def by_field(self) -> dict[ParseState, int]:
        """Rejections per field, in line order."""
        per_field: dict[ParseState, int] = {}
        for (state, _), count in sorted(self._failures.items()):
            per_field[state] = per_field.get(state, 0) + count
        return per_field

    def __len__(self) -> int:
        return sum(self._failures.values())
