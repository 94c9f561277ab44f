"""CLI commands for the product catalog."""

from __future__ import annotations

import click

from storefront.domain.exceptions import DomainException
from storefront.infrastructure.cli.context import CliContext


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--quantity", required=True, type=int, help="Units in stock.")
@click.pass_obj
def product_add(obj: CliContext, name: str, quantity: int) -> None:
    """Add a product, or restock it if the name already exists."""
    service = obj.service()

    try:
        product = service.add_product(obj.caller(service), name, quantity)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product.id} '{product.name}' stocked with {product.quantity}")


@click.command("update")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.option("--quantity", required=True, type=int, help="New quantity (0 allowed).")
@click.pass_obj
def product_update(obj: CliContext, product_id: int, quantity: int) -> None:
    """Force-set a product's quantity."""
    service = obj.service()

    try:
        service.update_product_quantity(obj.caller(service), product_id, quantity)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product_id} quantity set to {quantity}")


@click.command("show")
@click.option("--id", "product_id", type=int, default=None, help="Product ID.")
@click.option("--name", default=None, help="Exact product name.")
@click.pass_obj
def product_show(obj: CliContext, product_id: int | None, name: str | None) -> None:
    """Show a single product by ID or by name."""
    if (product_id is None) == (name is None):
        raise click.UsageError("Pass exactly one of --id or --name")

    service = obj.service()

    try:
        if product_id is not None:
            product = service.get_product_by_id(product_id)
        else:
            product = service.get_product_by_name(name)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product.id}")
    click.echo(f"Name:     {product.name}")
    click.echo(f"Quantity: {product.quantity}")


@click.command("list")
@click.pass_obj
def product_list(obj: CliContext) -> None:
    """List all products in the catalog."""
    products = obj.service().get_all_products()

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'Name':<20} {'Quantity':>10}")
    click.echo("-" * 38)
    for p in products:
        click.echo(f"{p.id:<6} {p.name:<20} {p.quantity:>10}")


@click.command("buyers")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.pass_obj
def product_buyers(obj: CliContext, product_id: int) -> None:
    """List everyone who ever bought a product."""
    try:
        buyers = obj.service().get_product_buyers_by_id(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not buyers:
        click.echo(f"Product #{product_id} has no buyers yet.")
        return

    for buyer in buyers:
        click.echo(buyer)
