"""CLI commands for the Menu aggregate."""

from __future__ import annotations

import click

from kitchenpos.application.create_menu import CreateMenuHandler
from kitchenpos.application.dto import MenuProductSpec, MenuSpec
from kitchenpos.application.show_menu import ShowMenuHandler
from kitchenpos.domain.exceptions import DomainException
from kitchenpos.infrastructure.bootstrap import (
    menu_group_repository,
    menu_repository,
    product_repository,
    profanity_checker,
)


def _parse_items(raw: str) -> list[MenuProductSpec]:
    """Parse '<product-id>:2,<product-id>:1' into MenuProductSpec list."""
    specs: list[MenuProductSpec] = []
    for pair in raw.split(","):
        pair = pair.strip()
        if ":" not in pair:
            raise click.BadParameter(
                f"Invalid item format '{pair}'. Expected 'ProductId:Quantity'."
            )
        product_id, qty_str = pair.rsplit(":", 1)
        try:
            qty = int(qty_str)
        except ValueError:
            raise click.BadParameter(
                f"Invalid quantity '{qty_str}' for product '{product_id}'."
            )
        specs.append(MenuProductSpec(product_id=product_id.strip(), quantity=qty))
    return specs


@click.command("create")
@click.option("--name", required=True, help="Menu name.")
@click.option("--price", required=True, help="Menu price (e.g. 19000).")
@click.option("--group", "menu_group_id", required=True, help="Menu group ID.")
@click.option("--items", required=True, help="Items as 'ProductId:Qty,ProductId:Qty'.")
@click.option("--displayed/--hidden", default=True, help="Initial visibility.")
def menu_create(
    name: str,
    price: str,
    menu_group_id: str,
    items: str,
    displayed: bool,
) -> None:
    """Register a new menu.

    Example:

        kitchenpos menu create --name "Fried set" --price 19000 \\
            --group <group-id> --items <product-id>:2
    """
    spec = MenuSpec(
        name=name,
        price=price,
        menu_group_id=menu_group_id,
        menu_products=_parse_items(items),
        displayed=displayed,
    )
    handler = CreateMenuHandler(
        menu_repo=menu_repository(),
        menu_group_repo=menu_group_repository(),
        product_repo=product_repository(),
        profanity_checker=profanity_checker(),
    )

    try:
        menu = handler.handle(spec)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    state = "displayed" if menu.displayed else "hidden"
    click.echo(f"Menu {menu.id} '{menu.name}' created at {menu.price} ({state})")


@click.command("show")
@click.option("--id", "menu_id", required=True, help="Menu ID.")
def menu_show(menu_id: str) -> None:
    """Show a menu priced at current product prices."""
    handler = ShowMenuHandler(
        menu_repo=menu_repository(),
        menu_group_repo=menu_group_repository(),
        product_repo=product_repository(),
    )

    try:
        dto = handler.handle(menu_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Menu {dto.id}  [{'DISPLAYED' if dto.displayed else 'HIDDEN'}]")
    click.echo(f"Name:  {dto.name}")
    click.echo(f"Group: {dto.menu_group}")
    click.echo()
    click.echo(f"  {'Product':<24} {'Qty':>5} {'Unit Price':>12} {'Total':>12}")
    click.echo(f"  {'-' * 56}")
    for item in dto.items:
        click.echo(
            f"  {item.product_name:<24} {item.quantity:>5} "
            f"{item.unit_price:>12} {item.line_total:>12}"
        )
    click.echo(f"  {'-' * 56}")
    click.echo(f"  {'Sum of products':<43} {dto.line_total:>12}")
    click.echo(f"  {'Menu price':<43} {dto.price:>12}")
