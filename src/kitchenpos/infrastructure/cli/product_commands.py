"""CLI commands for the Product aggregate."""

from __future__ import annotations

import click

from kitchenpos.application.add_product import AddProductHandler
from kitchenpos.application.change_product_price import ChangeProductPriceHandler
from kitchenpos.application.list_products import ListProductsHandler
from kitchenpos.domain.exceptions import DomainException
from kitchenpos.infrastructure.bootstrap import (
    menu_repository,
    product_repository,
    profanity_checker,
)


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--price", required=True, help="Price (e.g. 16000).")
def product_add(name: str, price: str) -> None:
    """Add a new product to the catalog."""
    handler = AddProductHandler(
        product_repo=product_repository(),
        profanity_checker=profanity_checker(),
    )

    try:
        product = handler.handle(name=name, price=price)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product {product.id} '{product.name}' added at {product.price}")


@click.command("list")
def product_list() -> None:
    """List all products in the catalog."""
    products = ListProductsHandler(product_repo=product_repository()).handle()

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<36} {'Name':<24} {'Price':>12}")
    click.echo("-" * 74)
    for p in products:
        click.echo(f"{p.id:<36} {p.name:<24} {str(p.price):>12}")


@click.command("change-price")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--price", required=True, help="New price (e.g. 17000).")
def product_change_price(product_id: str, price: str) -> None:
    """Change a product's price and hide menus it makes overpriced."""
    handler = ChangeProductPriceHandler(
        product_repo=product_repository(),
        menu_repo=menu_repository(),
    )

    try:
        product = handler.handle(product_id=product_id, new_price=price)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product {product.id} price changed to {product.price}")
