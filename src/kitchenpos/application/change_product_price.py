"""Application service: Change Product Price use case.

A price change is pushed to every menu containing the product. A menu
whose price now exceeds the sum of its line items is hidden. A menu is
never shown again by this use case, even when the price goes back down.
"""

from __future__ import annotations

import logging
from decimal import Decimal

from kitchenpos.domain.exceptions import EntityNotFoundError
from kitchenpos.domain.model.product import Product
from kitchenpos.domain.model.value_objects import Money
from kitchenpos.domain.repository.menu_repository import MenuRepository
from kitchenpos.domain.repository.product_repository import ProductRepository
from kitchenpos.domain.service.menu_pricing_service import MenuPricingService

logger = logging.getLogger(__name__)


class ChangeProductPriceHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        menu_repo: MenuRepository,
    ) -> None:
        self._product_repo = product_repo
        self._menu_repo = menu_repo
        self._pricing = MenuPricingService(product_repo)

    def handle(self, product_id: str, new_price: Decimal | str | None) -> Product:
        """Change a product's price and re-check the menus that use it.

        The price is validated before the product is looked up, so a bad
        price never touches the repositories.
        """
        price = Money.of(new_price)

        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")

        old_price = product.price
        product.change_price(price)
        self._product_repo.save(product)
        logger.info("Product %s price changed from %s to %s", product.id, old_price, price)

        # Menus are priced from the repository, which already holds the new price.
        for menu in self._menu_repo.find_all_by_product_id(product.id):
            if menu.displayed and self._pricing.is_price_exceeding(menu):
                menu.hide()
                self._menu_repo.save(menu)
                logger.info("Menu %s '%s' hidden: price %s exceeds its products", menu.id, menu.name, menu.price)

        return product
