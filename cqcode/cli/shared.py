"""Shared utilities for cqcode CLI commands."""

import json
import logging
import sys

import click
from rich.console import Console

from cqcode.codec.segment import Segment

console = Console()

_log_format = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def _setup_logging(level: str) -> None:
    """Log to stderr so command output on stdout stays parseable."""
    logging.basicConfig(
        level=level.upper(),
        format=_log_format,
        handlers=[logging.StreamHandler(sys.stderr)],
    )


def _read_arg(value: str) -> str:
    """Return the argument, or stdin when it is '-'."""
    if value == "-":
        return sys.stdin.read()
    return value


def _print_json(obj) -> None:
    # Plain echo: rich would re-wrap long values
    click.echo(json.dumps(obj, ensure_ascii=False, indent=2))


def _load_segments(text: str) -> list[Segment]:
    """Parse a JSON segment array (array-format message)."""
    data = json.loads(text)
    if not isinstance(data, list):
        raise ValueError("Expected a JSON array of segments")
    return [Segment.from_dict(item) for item in data]
