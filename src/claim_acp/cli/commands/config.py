"""Config command group for claim-acp CLI."""

from __future__ import annotations

__all__ = ["config"]

from pathlib import Path

import click

from ..helpers import config_option, get_default_config_path, load_config_or_exit
from ..styling import style_dim, style_header, style_success


@click.group()
def config() -> None:
    """Configuration management commands."""


@config.command("path")
def config_path_cmd() -> None:
    """Show the default config file path."""
    click.echo(str(get_default_config_path()))


@config.command("validate")
@config_option
def config_validate(config_path: Path | None) -> None:
    """Validate the config file (exit 2 if invalid)."""
    loaded = load_config_or_exit(config_path)
    click.echo(style_success(f"Configuration valid ({len(loaded.services)} registered services)"))


@config.command("show")
@config_option
def config_show(config_path: Path | None) -> None:
    """Display providers, services and their policies."""
    loaded = load_config_or_exit(config_path)

    click.echo(style_header("Provider"))
    click.echo(f"  issuer: {loaded.provider.issuer or '(not set)'}")
    click.echo(f"  supported_claims: {', '.join(loaded.provider.supported_claims)}")
    if loaded.provider.claim_mappings:
        click.echo("  claim_mappings:")
        for claim, attribute in loaded.provider.claim_mappings.items():
            click.echo(f"    {claim} -> {attribute}")
    click.echo()

    click.echo(style_header("Logging"))
    click.echo(f"  log_dir: {loaded.logging.log_dir or '(stderr only)'}")
    click.echo(f"  log_level: {loaded.logging.log_level}")
    click.echo()

    click.echo(style_header("Services"))
    if not loaded.services:
        click.echo(style_dim("  No registered services."))
        return
    for service in loaded.services:
        click.echo(f"  {service.id}" + (f" ({service.name})" if service.name else ""))
        for policy in service.scope_policies:
            allowed = ", ".join(policy.allowed_attributes or []) or "(none)"
            click.echo(f"    scope {policy.scope_type}: {allowed}")
        if service.access_policy is not None:
            click.echo(
                f"    access: {service.access_policy.endpoint_url} "
                f"[{service.access_policy.acceptable_response_codes}]"
            )
