import click
from pydantic import ValidationError

from storefront.infrastructure.cli.chain_commands import chain_mine, chain_tick
from storefront.infrastructure.cli.context import CliContext
from storefront.infrastructure.cli.owner_commands import owner_show, owner_transfer
from storefront.infrastructure.cli.policy_commands import policy_set, policy_show
from storefront.infrastructure.cli.product_commands import (
    product_add,
    product_buyers,
    product_list,
    product_show,
    product_update,
)
from storefront.infrastructure.cli.purchase_commands import purchase_buy, purchase_refund
from storefront.infrastructure.config import ConfigurationError, get_settings
from storefront.infrastructure.logging import setup_logging


@click.group()
@click.option(
    "--as",
    "caller",
    envvar="STOREFRONT_CALLER",
    default=None,
    help="Identity to act as (defaults to the store owner).",
)
@click.pass_context
def cli(ctx: click.Context, caller: str | None) -> None:
    """Storefront: single-owner inventory with refundable purchases"""
    try:
        settings = get_settings()
    except (ConfigurationError, ValidationError) as exc:
        raise click.ClickException(str(exc))
    setup_logging(settings)
    ctx.obj = CliContext(settings=settings, caller_override=caller)


@cli.group()
def product() -> None:
    """Manage the product catalog."""


@cli.group()
def purchase() -> None:
    """Buy and refund products."""


@cli.group()
def policy() -> None:
    """Manage the refund policy."""


@cli.group()
def owner() -> None:
    """Manage store ownership."""


@cli.group()
def chain() -> None:
    """Inspect and advance the block clock."""


# Register subcommands
product.add_command(product_add)
product.add_command(product_buyers)
product.add_command(product_list)
product.add_command(product_show)
product.add_command(product_update)
purchase.add_command(purchase_buy)
purchase.add_command(purchase_refund)
policy.add_command(policy_set)
policy.add_command(policy_show)
owner.add_command(owner_show)
owner.add_command(owner_transfer)
chain.add_command(chain_mine)
chain.add_command(chain_tick)
