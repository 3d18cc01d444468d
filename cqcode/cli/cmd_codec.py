"""Codec commands: decode, encode, escape, unescape, inspect, forward."""

import json

import click
from rich.markup import escape as markup_escape
from rich.table import Table

from . import cli
from .shared import console, _load_segments, _print_json, _read_arg


def _decode_or_exit(raw: str):
    from cqcode.codec import decode
    from cqcode.errors import DecodeError

    try:
        return decode(raw)
    except DecodeError as e:
        console.print(f"[red]Decode failed: {markup_escape(str(e))}[/red]")
        raise SystemExit(1)


@cli.command(name="decode")
@click.argument("raw")
def decode_cmd(raw):
    """Decode a CQ-code message ('-' reads stdin) into JSON segments."""
    segments = _decode_or_exit(_read_arg(raw))
    _print_json([seg.to_dict() for seg in segments])


@cli.command(name="encode")
@click.argument("source", type=click.File("r"), default="-")
def encode_cmd(source):
    """Encode a JSON segment array (file or stdin) into a CQ-code message."""
    from cqcode.codec import encode

    try:
        segments = _load_segments(source.read())
    except (json.JSONDecodeError, ValueError, AttributeError) as e:
        console.print(f"[red]Invalid segment array: {markup_escape(str(e))}[/red]")
        raise SystemExit(1)

    click.echo(encode(segments))


@cli.command(name="escape")
@click.argument("text")
@click.option("--brackets-only", is_flag=True, help="Only escape [ and ]")
def escape_cmd(text, brackets_only):
    """Escape reserved characters in TEXT ('-' reads stdin)."""
    from cqcode.codec import escape, escape_brackets

    text = _read_arg(text)
    click.echo(escape_brackets(text) if brackets_only else escape(text))


@cli.command(name="unescape")
@click.argument("text")
def unescape_cmd(text):
    """Restore escaped characters in TEXT ('-' reads stdin)."""
    from cqcode.codec import unescape

    click.echo(unescape(_read_arg(text)))


@cli.command()
@click.argument("raw")
def inspect(raw):
    """Show the segments, mentions and media of a CQ-code message."""
    from cqcode.codec import image_urls, is_mention_all, mentioned_ids, video_urls

    raw = _read_arg(raw)
    segments = _decode_or_exit(raw)

    table = Table(title="Segments", show_header=True)
    table.add_column("#", style="dim")
    table.add_column("Type", style="bold")
    table.add_column("Data")
    for i, seg in enumerate(segments):
        data = ", ".join(f"{k}={v}" for k, v in seg.data.items())
        table.add_row(str(i), markup_escape(seg.type), markup_escape(data))
    console.print(table)

    console.print(f"Mentions everyone: {is_mention_all(segments)}")
    try:
        ids = mentioned_ids(segments)
        console.print(f"Mentioned ids: {markup_escape(str(ids))}")
    except ValueError as e:
        console.print(f"[yellow]Mentioned ids: invalid qq value ({markup_escape(str(e))})[/yellow]")
    for url in image_urls(segments):
        console.print(f"Image: {markup_escape(url)}")
    for url in video_urls(segments):
        console.print(f"Video: {markup_escape(url)}")


@cli.command()
@click.option("--uin", type=int, required=True, help="Sender QQ number")
@click.option("--name", required=True, help="Sender display name")
@click.argument("contents", nargs=-1, required=True)
def forward(uin, name, contents):
    """Build custom forward-message nodes, one per CONTENT."""
    from cqcode.forward import build_forward_nodes

    _print_json(build_forward_nodes(uin, name, list(contents)))
