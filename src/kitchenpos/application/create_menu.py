"""Application service: Create Menu use case.

Rules are checked one at a time in a fixed order and the first failure
aborts the request. The repository save is the last step, so a rejected
menu never leaves anything behind.
"""

from __future__ import annotations

import logging
import uuid

from kitchenpos.application.dto import MenuSpec
from kitchenpos.domain.exceptions import EntityNotFoundError, ValidationError
from kitchenpos.domain.model.menu import Menu, MenuProduct
from kitchenpos.domain.model.value_objects import Money, Quantity
from kitchenpos.domain.repository.menu_group_repository import MenuGroupRepository
from kitchenpos.domain.repository.menu_repository import MenuRepository
from kitchenpos.domain.repository.product_repository import ProductRepository
from kitchenpos.domain.service.menu_pricing_service import MenuPricingService
from kitchenpos.domain.service.profanity_checker import ProfanityChecker

logger = logging.getLogger(__name__)


class CreateMenuHandler:

    def __init__(
        self,
        menu_repo: MenuRepository,
        menu_group_repo: MenuGroupRepository,
        product_repo: ProductRepository,
        profanity_checker: ProfanityChecker,
    ) -> None:
        self._menu_repo = menu_repo
        self._menu_group_repo = menu_group_repo
        self._product_repo = product_repo
        self._profanity_checker = profanity_checker
        self._pricing = MenuPricingService(product_repo)

    def handle(self, spec: MenuSpec) -> Menu:
        """Register a new menu.

        Steps:
        1. Price is present and not negative.
        2. The menu group exists.
        3. At least one line item is given.
        4. Every requested product exists (one bulk lookup).
        5. No line item has a negative quantity.
        6. Sum the line items at current product prices.
        7. The menu price does not exceed that sum.
        8. A name is given.
        9. The name is free of profanity.
        10. Persist with the caller's ``displayed`` flag unchanged.
        """
        price = Money.of(spec.price)

        if self._menu_group_repo.get_by_id(spec.menu_group_id) is None:
            raise EntityNotFoundError(
                f"Menu group with ID '{spec.menu_group_id}' not found"
            )

        if not spec.menu_products:
            raise ValidationError("Menu must contain at least one product")

        # Distinct ids are looked up, but the count is compared against the
        # number of line items, so two lines for one product are rejected.
        requested_ids = list(dict.fromkeys(item.product_id for item in spec.menu_products))
        found = self._product_repo.find_all_by_ids(requested_ids)
        if len(found) != len(spec.menu_products):
            raise ValidationError("Menu contains unknown or duplicated products")

        menu_products = [
            MenuProduct(product_id=item.product_id, quantity=Quantity(item.quantity))
            for item in spec.menu_products
        ]

        line_total = self._pricing.line_total(menu_products)
        if price > line_total:
            raise ValidationError(
                f"Menu price {price} exceeds the sum of its products {line_total}"
            )

        if spec.name is None:
            raise ValidationError("Menu name is required")

        if self._profanity_checker.contains_profanity(spec.name):
            raise ValidationError(f"Menu name '{spec.name}' contains profanity")

        menu = Menu(
            id=str(uuid.uuid4()),
            name=spec.name,
            price=price,
            menu_group_id=spec.menu_group_id,
            menu_products=menu_products,
            displayed=spec.displayed,
        )
        self._menu_repo.save(menu)
        logger.info("Created menu %s '%s' at %s", menu.id, menu.name, menu.price)
        return menu
