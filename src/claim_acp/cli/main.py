"""Main CLI entry point for claim-acp.

Commands:
    access   - Run the remote access check for a principal
    config   - Configuration management (path, show, validate)
    release  - Compute the claims released to a service
"""

from __future__ import annotations

__all__ = ["cli", "main"]

import sys

import click

from claim_acp import __version__

from .commands.access import access
from .commands.config import config
from .commands.release import release


@click.group(
    invoke_without_command=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)
@click.option("--version", "-v", is_flag=True, help="Show version")
@click.pass_context
def cli(ctx: click.Context, version: bool) -> None:
    """claim-acp: OIDC claim release and remote access decisions."""
    if version:
        click.echo(f"claim-acp {__version__}")
        sys.exit(0)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


cli.add_command(access)
cli.add_command(config)
cli.add_command(release)


def main() -> None:
    """CLI entry point."""
    cli()
