"""CLI commands for store ownership."""

from __future__ import annotations

import click

from storefront.domain.exceptions import DomainException
from storefront.infrastructure.cli.context import CliContext


@click.command("show")
@click.pass_obj
def owner_show(obj: CliContext) -> None:
    """Show the current owner."""
    click.echo(obj.service().get_owner())


@click.command("transfer")
@click.option("--to", "new_owner", required=True, help="Identity of the new owner.")
@click.pass_obj
def owner_transfer(obj: CliContext, new_owner: str) -> None:
    """Hand ownership to another identity (owner only)."""
    service = obj.service()

    try:
        service.transfer_ownership(obj.caller(service), new_owner)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Ownership transferred to '{new_owner}'")
