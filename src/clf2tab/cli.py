"""clf2tab CLI — entry point.

    clf2tab [OPTIONS] [FILES]...

Reads Apache Common/Combined log lines from FILES (or stdin), writes one
tab-separated record per valid line to stdout and one diagnostic per rejected
line to stderr. Always exits 0 once the input is exhausted.
"""
from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Any, TextIO

import click
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler

from .config import Settings
from .driver import ConversionStats, convert_stream
from .emitter import RecordEmitter
from .parsers.clf import CLFParser

err_console = Console(stderr=True)

_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


# ── Helpers ─────────────────────────────────────────────────────────────────


def _load_settings(**overrides: Any) -> Settings:
    """Environment / .env first, then whatever the command line set explicitly."""
    explicit = {k: v for k, v in overrides.items() if v is not None}
    try:
        return Settings(**explicit)
    except ValidationError as exc:
        raise click.UsageError(f"Invalid configuration:\n{exc}") from exc


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


def _open_input(path: Path, settings: Settings) -> TextIO:
    if str(path) == "-":
        return click.get_text_stream("stdin", encoding=settings.encoding, errors="replace")
    return path.open(encoding=settings.encoding, errors="replace")


# ── CLI root ─────────────────────────────────────────────────────────────────


@click.command()
@click.version_option(version="1.0.0", prog_name="clf2tab")
@click.argument(
    "files", nargs=-1,
    type=click.Path(exists=True, dir_okay=False, allow_dash=True, path_type=Path),
)
@click.option(
    "--skip-validation/--validate", "skip_validation", default=None,
    help="Accept every field as-is (default: validate; env CLF2TAB_SKIP_VALIDATION).",
)
@click.option("--summary", "-s", is_flag=True, help="Print line counts and top rejection reasons to stderr.")
@click.option(
    "--log-level", "-l", default=None,
    type=click.Choice(_LOG_LEVELS, case_sensitive=False),
    help="Logging level (default: WARNING; env CLF2TAB_LOG_LEVEL).",
)
def main(
    files: tuple[Path, ...],
    skip_validation: bool | None,
    summary: bool,
    log_level: str | None,
) -> None:
    """Convert Apache Common/Combined access logs to tab-separated records.

    Output fields: address(es), identity, user, epoch seconds, method, path,
    protocol, status, size[, referer[, user agent]].

    \b
    Examples:
      clf2tab access.log > access.tsv
      zcat access.log.gz | clf2tab 2> rejected.txt
      clf2tab --skip-validation --summary access.log
    """
    settings = _load_settings(skip_validation=skip_validation, log_level=log_level)
    _configure_logging(settings.log_level)

    parser = CLFParser(settings)
    emitter = RecordEmitter(out=sys.stdout, err=sys.stderr)
    stats = ConversionStats()

    for path in files or (Path("-"),):
        stream = _open_input(path, settings)
        try:
            convert_stream(stream, parser, emitter, stats=stats)
        finally:
            if str(path) != "-":
                stream.close()

    if summary:
        from .visualization.tables import print_summary
        print_summary(stats, err_console)


if __name__ == "__main__":
    main()
