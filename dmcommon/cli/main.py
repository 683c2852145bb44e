"""dmcommon CLI"""

import click

from dmcommon import __version__
from dmcommon.cli.devpack import devpack
from dmcommon.cli.version import version

from .debug import add_debug_option


@click.group()
@click.version_option(__version__, prog_name="dmcommon CLI")
@click.pass_context
def cli(ctx):
    """
    DataMiner version and DevPack command line interface.
    """
    ctx.ensure_object(dict)


cli.add_command(version)
cli.add_command(devpack)
add_debug_option(cli)

if __name__ == "__main__":
    cli(obj={})
