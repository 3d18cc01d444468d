"""cqcode CLI — command line interface."""

import click
from cqcode import __version__
from .shared import console, _setup_logging


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="cqcode")
@click.pass_context
def cli(ctx):
    """cqcode — CQ-code message codec for OneBot chat bots"""
    from cqcode.config import load_settings

    settings = load_settings()
    _setup_logging(settings.log_level)
    ctx.obj = settings

    if ctx.invoked_subcommand is None:
        _show_help()


def _show_help():
    """Show all available commands grouped by category."""
    console.print(f"[bold]cqcode v{__version__}[/bold] — CQ-code message codec\n")

    groups = {
        "Codec": [
            ("decode", "Decode a CQ-code message into JSON segments"),
            ("encode", "Encode JSON segments into a CQ-code message"),
            ("escape", "Escape reserved characters (--brackets-only for [ and ])"),
            ("unescape", "Restore escaped characters"),
            ("inspect", "Show segments, mentions and media of a message"),
        ],
        "Profile": [
            ("avatar", "Print a user or group avatar url"),
            ("nickname", "Look up a user's nickname"),
        ],
        "Forward": [
            ("forward", "Build custom forward-message nodes"),
        ],
    }

    for category, commands in groups.items():
        console.print(f"  [bold cyan]{category}[/bold cyan]")
        for name, desc in commands:
            console.print(f"    [bold]cqcode {name:10s}[/bold] {desc}")
        console.print()

    console.print("[dim]Run 'cqcode <command> --help' for details on a specific command.[/dim]")


# Import all command modules (registers commands onto cli group)
from . import cmd_codec  # noqa: E402, F401
from . import cmd_profile  # noqa: E402, F401


@cli.command(name="help", hidden=True)
def help_cmd():
    """Show all available commands."""
    _show_help()


def main():
    """Console-script entry point; maps click failures to exit codes."""
    import sys
    try:
        cli(standalone_mode=False)
    except click.exceptions.Exit as e:
        sys.exit(e.code)
    except click.Abort:
        console.print("[yellow]Aborted.[/yellow]")
        sys.exit(1)
    except click.ClickException as e:
        # UsageError is a ClickException; point usage mistakes at the grouped help
        e.show()
        if isinstance(e, click.UsageError):
            click.echo("Run 'cqcode help' to list commands.", err=True)
        sys.exit(e.exit_code)
