"""CLI commands for the block clock."""

from __future__ import annotations

import click

from storefront.infrastructure.cli.context import CliContext


@click.command("tick")
@click.pass_obj
def chain_tick(obj: CliContext) -> None:
    """Show the current block number."""
    click.echo(obj.clock().current_tick())


@click.command("mine")
@click.option(
    "--blocks",
    default=1,
    show_default=True,
    type=click.IntRange(min=1),
    help="Number of blocks to mine.",
)
@click.pass_obj
def chain_mine(obj: CliContext, blocks: int) -> None:
    """Advance the clock by mining empty blocks."""
    tick = obj.clock().mine(blocks)
    click.echo(f"Mined {blocks} block(s), now at block {tick}")
