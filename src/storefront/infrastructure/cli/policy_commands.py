"""CLI commands for the refund policy."""

from __future__ import annotations

import click

from storefront.domain.exceptions import DomainException
from storefront.infrastructure.cli.context import CliContext


@click.command("show")
@click.pass_obj
def policy_show(obj: CliContext) -> None:
    """Show the refund window in blocks."""
    window = obj.service().get_refund_policy_number()
    click.echo(f"Refund window: {window} blocks")


@click.command("set")
@click.option("--window", required=True, type=int, help="Refund window in blocks.")
@click.pass_obj
def policy_set(obj: CliContext, window: int) -> None:
    """Change the refund window (owner only)."""
    service = obj.service()

    try:
        service.set_refund_policy_number(obj.caller(service), window)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Refund window set to {window} blocks")
