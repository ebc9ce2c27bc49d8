"""Application service: Show Menu use case.

Read-only: renders a menu with each line item priced at the product's
current price, so a hidden menu shows why it was hidden.
"""

from __future__ import annotations

from kitchenpos.application.dto import MenuDTO, MenuLineDTO
from kitchenpos.domain.exceptions import EntityNotFoundError
from kitchenpos.domain.model.value_objects import Money
from kitchenpos.domain.repository.menu_group_repository import MenuGroupRepository
from kitchenpos.domain.repository.menu_repository import MenuRepository
from kitchenpos.domain.repository.product_repository import ProductRepository
from kitchenpos.domain.service.menu_pricing_service import MenuPricingService


class ShowMenuHandler:

    def __init__(
        self,
        menu_repo: MenuRepository,
        menu_group_repo: MenuGroupRepository,
        product_repo: ProductRepository,
    ) -> None:
        self._menu_repo = menu_repo
        self._menu_group_repo = menu_group_repo
        self._pricing = MenuPricingService(product_repo)

    def handle(self, menu_id: str) -> MenuDTO:
        menu = self._menu_repo.get_by_id(menu_id)
        if menu is None:
            raise EntityNotFoundError(f"Menu with ID '{menu_id}' not found")

        group = self._menu_group_repo.get_by_id(menu.menu_group_id)

        lines: list[MenuLineDTO] = []
        total = Money.zero()
        for line, product, line_total in self._pricing.priced_lines(menu.menu_products):
            total = total + line_total
            lines.append(
                MenuLineDTO(
                    product_id=product.id,
                    product_name=product.name,
                    quantity=line.quantity.value,
                    unit_price=str(product.price),
                    line_total=str(line_total),
                )
            )

        return MenuDTO(
            id=menu.id,
            name=menu.name,
            price=str(menu.price),
            menu_group=group.name if group is not None else menu.menu_group_id,
            displayed=menu.displayed,
            items=lines,
            line_total=str(total),
        )
