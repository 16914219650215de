"""Release command: show which claims a service would receive."""

from __future__ import annotations

__all__ = ["release"]

import json
import sys
from pathlib import Path
from typing import Any

import click

from claim_acp.exceptions import ServiceNotFoundError

from ..helpers import EXIT_ERROR, config_option, configure_logging, load_config_or_exit
from ..styling import style_dim, style_error, style_header


def _load_attributes(path: Path) -> dict[str, Any]:
    """Read resolved attributes from a JSON object file."""
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise click.BadParameter(f"Cannot read attributes file {path}: {e}", param_hint="--attributes") from e
    if not isinstance(data, dict):
        raise click.BadParameter("Attributes file must contain a JSON object", param_hint="--attributes")
    return data


@click.command("release")
@config_option
@click.option("--service", "-s", "service_id", required=True, help="Registered service id")
@click.option(
    "--attributes",
    "-a",
    "attributes_path",
    required=True,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="JSON file with the principal's resolved attributes",
)
@click.option("--scope", "scope_type", default=None, help="Only evaluate this scope policy")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def release(
    config_path: Path | None,
    service_id: str,
    attributes_path: Path,
    scope_type: str | None,
    as_json: bool,
) -> None:
    """Compute the claims released to a service.

    \b
    Example:
      claim-acp release -s my-app -a attrs.json
      claim-acp release -s my-app -a attrs.json --scope email --json
    """
    config = load_config_or_exit(config_path)
    decision_logger = configure_logging(config)
    attributes = _load_attributes(attributes_path)

    try:
        service = config.build_registry().get(service_id)
    except ServiceNotFoundError as e:
        click.echo(style_error(str(e)), err=True)
        sys.exit(EXIT_ERROR)

    engine = config.build_release_engine(decision_logger)
    if scope_type is None:
        released = engine.release(service, attributes)
    else:
        policy = next((p for p in service.scope_policies if p.scope_type == scope_type), None)
        if policy is None:
            click.echo(style_error(f"Service '{service_id}' has no '{scope_type}' scope policy"), err=True)
            sys.exit(EXIT_ERROR)
        released = engine.resolve(policy, None, attributes, service=service)

    if as_json:
        click.echo(json.dumps(released, indent=2, default=str))
        return

    click.echo(style_header(f"Claims released to {service_id}"))
    if not released:
        click.echo(style_dim("  No claims released."))
        return
    for claim, values in released.items():
        click.echo(f"  {claim}: {', '.join(str(v) for v in values)}")
