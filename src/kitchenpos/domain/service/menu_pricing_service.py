"""Domain service: Menu Pricing.

Computes the sum of a menu's line items at *current* product prices and
checks it against the menu price. Used when a menu is created and again
whenever one of its products changes price.

Prices are fetched from the product repository on every call rather than
carried on the line items, so the result always reflects the latest
saved price.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from kitchenpos.domain.exceptions import EntityNotFoundError
from kitchenpos.domain.model.menu import Menu, MenuProduct
from kitchenpos.domain.model.product import Product
from kitchenpos.domain.model.value_objects import Money
from kitchenpos.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class MenuPricingService:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def priced_lines(
        self, menu_products: Iterable[MenuProduct]
    ) -> list[tuple[MenuProduct, Product, Money]]:
        """Pair each line with its product and ``price * quantity``.

        Each product is looked up individually; a line item whose product
        no longer exists raises EntityNotFoundError.
        """
        priced: list[tuple[MenuProduct, Product, Money]] = []
        for line in menu_products:
            product = self._product_repo.get_by_id(line.product_id)
            if product is None:
                raise EntityNotFoundError(
                    f"Product with ID '{line.product_id}' not found"
                )
            priced.append((line, product, product.price * line.quantity.value))
        return priced

    def line_total(self, menu_products: Iterable[MenuProduct]) -> Money:
        """Sum of ``price * quantity`` over *menu_products*."""
        total = Money.zero()
        for _, _, amount in self.priced_lines(menu_products):
            total = total + amount
        return total

    def is_price_exceeding(self, menu: Menu) -> bool:
        """True if the menu costs more than its line items add up to."""
        total = self.line_total(menu.menu_products)
        logger.debug("Menu %s priced %s against line total %s", menu.id, menu.price, total)
        return menu.price > total
