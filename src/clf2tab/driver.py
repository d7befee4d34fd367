"""Line driver: feed a text stream through the parser one line at a time.

Every line is handled inside its own failure boundary: a rejected line is
reported through the emitter and the loop moves on. Only errors raised by the
input stream itself end the run early.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable

from .aggregators.counter import RejectionCounter
from .emitter import RecordEmitter
from .parsers.base import LineParser, Record

logger = logging.getLogger(__name__)


@dataclass
class ConversionStats:
    """Per-run counters."""

    lines: int = 0
    records: int = 0
    skipped: int = 0
    rejections: RejectionCounter = field(default_factory=RejectionCounter)

    @property
    def rejected(self) -> int:
        return len(self.rejections)


def strip_terminator(raw: str) -> str:
    """Drop a trailing ``\\n`` or ``\\r\\n``, nothing else."""
    if raw.endswith("\n"):
        raw = raw[:-1]
        if raw.endswith("\r"):
            raw = raw[:-1]
    return raw


def convert_stream(
    lines: Iterable[str],
    parser: LineParser,
    emitter: RecordEmitter,
    stats: ConversionStats | None = None,
) -> ConversionStats:
    """Parse and emit every line of *lines* until the iterable is exhausted.

    Pass an existing *stats* to accumulate across several inputs.
    """
    if stats is None:
        stats = ConversionStats()

    for raw in lines:
        line = strip_terminator(raw)
        stats.lines += 1
        result = parser.parse_line(line)
        if result is None:
            stats.skipped += 1
            continue

        emitter.emit(result, line)
        if isinstance(result, Record):
            stats.records += 1
        else:
            stats.rejections.add(result)
            logger.debug("Line %d rejected in %s: %s", stats.lines, result.state.name, result.reason)

    logger.info(
        "Processed %d lines: %d records, %d rejected, %d blank",
        stats.lines, stats.records, stats.rejected, stats.skipped,
    )
    return stats
