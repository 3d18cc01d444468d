"""Profile commands: avatar and nickname."""

import asyncio
import click

from . import cli
from .shared import console


@cli.command()
@click.argument("target_id", type=int)
@click.option("--group", is_flag=True, help="TARGET_ID is a group number")
@click.option("--size", type=click.Choice(["0", "40", "100", "640"]), default=None,
              help="Avatar size (0 = original); defaults to CQCODE_AVATAR_SIZE")
@click.pass_obj
def avatar(settings, target_id, group, size):
    """Print the avatar url of a user or group."""
    from cqcode.profile import group_avatar_url, user_avatar_url

    size = int(size) if size is not None else settings.avatar_size
    build = group_avatar_url if group else user_avatar_url
    try:
        click.echo(build(target_id, size))
    except ValueError as e:
        console.print(f"[red]{e}[/red]")
        raise SystemExit(1)


@cli.command()
@click.argument("user_id", type=int)
@click.pass_obj
def nickname(settings, user_id):
    """Look up the nickname of a QQ user."""
    from cqcode.profile import fetch_nickname

    name = asyncio.run(fetch_nickname(user_id, settings))
    if not name:
        console.print(f"[yellow]No nickname found for {user_id}.[/yellow]")
        raise SystemExit(1)
    click.echo(name)
