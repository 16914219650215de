"""Command-line interface for claim-acp."""

from claim_acp.cli.main import cli, main

__all__ = ["cli", "main"]
