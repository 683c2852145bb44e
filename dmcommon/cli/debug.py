"""The --debug/--no-debug flag shared by every dmc command."""

import click

from .utils.logging import configure_logging

DEBUG_KEY = "DEBUG"


def _debug_callback(ctx: click.Context, param: click.Parameter, value: bool) -> bool:
    # --debug counts on any level, --no-debug only on the root command, so
    # "dmc --debug version parse 1.0" stays in debug mode.
    root = ctx.find_root()
    root.ensure_object(dict)

    enabled = root.obj.get(DEBUG_KEY, False)
    if value or ctx.parent is None:
        enabled = value
    root.obj[DEBUG_KEY] = enabled

    configure_logging(enabled)
    return enabled


def add_debug_option(command: click.Command) -> click.Command:
    """Add --debug/--no-debug to a command and, for a group, to all its subcommands."""
    if not any(param.name == "debug" for param in command.params):
        command.params.insert(
            0,
            click.Option(
                ["--debug/--no-debug"],
                default=False,
                is_eager=True,
                expose_value=False,
                callback=_debug_callback,
                help="Show debug output.",
            ),
        )

    if isinstance(command, click.Group):
        for subcommand in command.commands.values():
            add_debug_option(subcommand)
    return command
