"""cli commands for DevPack lookups"""

import sys

import click

from dmcommon.cli.utils.logging import logger
from dmcommon.nuget import DevPackLookupError, get_latest_revision_of_devpack
from dmcommon.versioning import DataMinerVersion, VersionFormatError


@click.group(name="devpack")
@click.pass_context
def devpack(ctx):
    """Look up DevPack packages on the NuGet feed."""
    ctx.ensure_object(dict)


@devpack.command("latest")
@click.argument("text")
def latest(text: str):
    """Show the latest DevPack revision for a DataMiner version.

    Example:

      dmc devpack latest 10.3.4
    """
    try:
        v = DataMinerVersion.parse(text)
    except VersionFormatError as e:
        logger.error(f"Error: {e}")
        sys.exit(1)

    try:
        revision = get_latest_revision_of_devpack(v)
    except DevPackLookupError as e:
        logger.error(f"Error: {e}")
        sys.exit(1)

    logger.debug(f"Latest DevPack for {v}: {revision}")
    click.echo(revision)
