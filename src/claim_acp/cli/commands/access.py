"""Access command: run the remote access check for a principal."""

from __future__ import annotations

__all__ = ["access"]

import json
import sys
from pathlib import Path

import click

from claim_acp.access import Decision, HttpxTransport, RemoteAccessEvaluator
from claim_acp.context import AccessRequest
from claim_acp.exceptions import ServiceNotFoundError

from ..helpers import EXIT_ERROR, config_option, configure_logging, load_config_or_exit
from ..styling import style_error, style_success, style_warning

EXIT_ALLOW = 0
EXIT_DENY = 1


def _parse_context(pairs: tuple[str, ...]) -> dict[str, str]:
    context: dict[str, str] = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key:
            raise click.BadParameter(f"Expected KEY=VALUE, got '{pair}'", param_hint="--context")
        context[key] = value
    return context


@click.command("access")
@config_option
@click.option("--service", "-s", "service_id", required=True, help="Registered service id")
@click.option("--principal", "-p", "principal_id", required=True, help="Principal (username) to check")
@click.option("--context", "context_pairs", multiple=True, help="Request context as KEY=VALUE (repeatable)")
@click.option(
    "--fail-open",
    is_flag=True,
    help="Allow access when the endpoint cannot be reached (default: deny)",
)
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def access(
    config_path: Path | None,
    service_id: str,
    principal_id: str,
    context_pairs: tuple[str, ...],
    fail_open: bool,
    as_json: bool,
) -> None:
    """Ask the service's remote endpoint whether a principal may access it.

    \b
    Exit codes:
      0  access allowed
      1  access denied
      2  evaluation error (unless --fail-open) or configuration error
    """
    config = load_config_or_exit(config_path)
    decision_logger = configure_logging(config)
    context = _parse_context(context_pairs)

    try:
        policy = config.build_registry().get_access_policy(service_id)
    except ServiceNotFoundError as e:
        click.echo(style_error(str(e)), err=True)
        sys.exit(EXIT_ERROR)
    if policy is None:
        click.echo(style_error(f"Service '{service_id}' has no remote access policy"), err=True)
        sys.exit(EXIT_ERROR)

    request = AccessRequest(principal_id=principal_id, service_id=service_id, context=context)
    with HttpxTransport(timeout=config.http.timeout_seconds) as transport:
        evaluator = RemoteAccessEvaluator(transport, decision_logger=decision_logger)
        result = evaluator.check(policy, request)

    allowed = result.is_allowed(fail_closed=not fail_open)

    if as_json:
        click.echo(
            json.dumps(
                {
                    "service_id": service_id,
                    "principal_id": principal_id,
                    "decision": result.decision.value,
                    "reason": result.reason.value,
                    "status_code": result.status_code,
                    "error": str(result.error) if result.error else None,
                    "allowed": allowed,
                },
                indent=2,
            )
        )
    elif result.decision is Decision.ERROR:
        click.echo(style_warning(f"Evaluation failed: {result.error}"), err=True)
        click.echo(style_success("Access allowed (fail-open)") if allowed else style_error("Access denied"))
    elif allowed:
        click.echo(style_success(f"Access allowed (HTTP {result.status_code})"))
    else:
        status = f"HTTP {result.status_code}" if result.status_code is not None else "no response"
        click.echo(style_error(f"Access denied ({status})"))

    if result.decision is Decision.ERROR and not fail_open:
        sys.exit(EXIT_ERROR)
    sys.exit(EXIT_ALLOW if allowed else EXIT_DENY)
