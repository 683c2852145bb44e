"""cli commands to inspect and compare DataMiner versions"""

import sys

import click

from dmcommon.cli.utils.logging import logger
from dmcommon.versioning import (
    DataMinerVersion,
    VersionFormatError,
    supports_app_packages,
    supports_nuget,
)

FEATURES = {
    "nuget": (
        "NuGet packages",
        supports_nuget,
        DataMinerVersion.MIN_SUPPORTED_FOR_PACKAGE_REGISTRY,
    ),
    "dmapp": (
        "app packages",
        supports_app_packages,
        DataMinerVersion.MIN_SUPPORTED_FOR_APP_PACKAGE,
    ),
}


def _parse_or_exit(text: str) -> DataMinerVersion:
    try:
        return DataMinerVersion.parse(text)
    except VersionFormatError as e:
        logger.error(f"Error: {e}")
        sys.exit(1)


@click.group(name="version")
@click.pass_context
def version(ctx):
    """Parse, compare and check DataMiner versions."""
    ctx.ensure_object(dict)


@version.command("parse")
@click.argument("text")
def parse(text: str):
    """Show the components and both string forms of a DataMiner version.

    Example:

      dmc version parse "10.0.9.0-9312"
    """
    v = _parse_or_exit(text)
    click.echo(f"major:     {v.major}")
    click.echo(f"minor:     {v.minor}")
    click.echo(f"build:     {v.build}")
    click.echo(f"revision:  {v.revision}")
    click.echo(f"iteration: {v.iteration}")
    click.echo(f"display:   {v}")
    click.echo(f"strict:    {v.to_strict_string()}")


@version.command("compare")
@click.argument("first")
@click.argument("second")
def compare(first: str, second: str):
    """Compare two DataMiner versions."""
    v1 = _parse_or_exit(first)
    v2 = _parse_or_exit(second)

    symbol = {-1: "<", 0: "==", 1: ">"}[v1.compare_to(v2)]
    click.echo(f"{v1.to_strict_string()} {symbol} {v2.to_strict_string()}")


@version.command("check")
@click.argument("text")
@click.option(
    "--feature",
    "-f",
    type=click.Choice(sorted(FEATURES)),
    default="dmapp",
    show_default=True,
    help="Feature to check support for.",
)
def check(text: str, feature: str):
    """Check whether a DataMiner version supports a feature.

    Exits with status 1 when the feature is not supported.
    """
    v = _parse_or_exit(text)
    label, is_supported, minimum = FEATURES[feature]

    if is_supported(v):
        click.echo(f"DataMiner {v} supports {label}.")
        return

    click.echo(
        f"DataMiner {v} does not support {label} "
        f"(requires {minimum.to_strict_string()} or later)."
    )
    sys.exit(1)
