"""Menu aggregate.

A Menu is a bundle of products sold at a fixed price. It owns its line
items, but each line item refers to its product by id only; current
product prices are always looked up through the product repository.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from kitchenpos.domain.model.value_objects import Money, Quantity


@dataclass(frozen=True)
class MenuProduct:
    """One (product, quantity) line of a menu."""

    product_id: str
    quantity: Quantity


@dataclass
class Menu:
    """Aggregate root for sellable menus.

    ``displayed`` is not reconciled on read. It is only forced off by
    ``hide()`` when a product price change breaks the price invariant
    (menu price must not exceed the sum of its line items).
    """

    id: str
    name: str
    price: Money
    menu_group_id: str
    menu_products: list[MenuProduct] = field(default_factory=list)
    displayed: bool = False

    def references(self, product_id: str) -> bool:
        return any(mp.product_id == product_id for mp in self.menu_products)

    def hide(self) -> None:
        self.displayed = False
