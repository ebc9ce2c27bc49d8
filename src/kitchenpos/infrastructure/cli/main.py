import click

from kitchenpos.infrastructure.cli.menu_commands import menu_create, menu_show
from kitchenpos.infrastructure.cli.menu_group_commands import menu_group_add
from kitchenpos.infrastructure.cli.product_commands import (
    product_add,
    product_change_price,
    product_list,
)
from kitchenpos.infrastructure.logging_config import setup_logging


@click.group()
@click.option("--log-level", default=None, help="Override LOG_LEVEL (e.g. DEBUG).")
def cli(log_level: str | None) -> None:
    """kitchenpos — menu and product pricing"""
    setup_logging(log_level)


@cli.group()
def product() -> None:
    """Manage products."""


@cli.group("menu-group")
def menu_group() -> None:
    """Manage menu groups."""


@cli.group()
def menu() -> None:
    """Manage menus."""


# Register subcommands
product.add_command(product_add)
product.add_command(product_list)
product.add_command(product_change_price)
menu_group.add_command(menu_group_add)
menu.add_command(menu_create)
menu.add_command(menu_show)
