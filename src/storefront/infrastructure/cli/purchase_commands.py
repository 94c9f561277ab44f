"""CLI commands for buying and refunding."""

from __future__ import annotations

import click

from storefront.domain.exceptions import DomainException
from storefront.infrastructure.cli.context import CliContext


@click.command("buy")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.pass_obj
def purchase_buy(obj: CliContext, product_id: int) -> None:
    """Buy one unit of a product."""
    service = obj.service()
    caller = obj.caller(service)

    try:
        service.buy_product(caller, product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"'{caller}' bought product #{product_id}")


@click.command("refund")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.pass_obj
def purchase_refund(obj: CliContext, product_id: int) -> None:
    """Refund a previously bought product, within the refund window."""
    service = obj.service()
    caller = obj.caller(service)

    try:
        service.refund_product(caller, product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"'{caller}' refunded product #{product_id}")
