"""Integration tests for the ChangeProductPrice use case.

Covers the cascade that hides menus whose price ends up above the sum
of their products.
"""

from decimal import Decimal

import pytest

from kitchenpos.application.change_product_price import ChangeProductPriceHandler
from kitchenpos.domain.exceptions import EntityNotFoundError, ValidationError
from kitchenpos.domain.model.menu import Menu, MenuProduct
from kitchenpos.domain.model.product import Product
from kitchenpos.domain.model.value_objects import Money, Quantity
from tests.fakes import FakeMenuRepository, FakeProductRepository


def _menu(menu_id: str, price: str, *lines: tuple[str, int], displayed: bool = True) -> Menu:
    return Menu(
        id=menu_id,
        name=f"Menu {menu_id}",
        price=Money.of(price),
        menu_group_id="g-1",
        menu_products=[MenuProduct(pid, Quantity(qty)) for pid, qty in lines],
        displayed=displayed,
    )


def _setup(
    menus: list[Menu] | None = None,
    product_price: str = "3000",
) -> tuple[ChangeProductPriceHandler, FakeProductRepository, FakeMenuRepository]:
    product_repo = FakeProductRepository([
        Product(id="p-1", name="Meat pie", price=Money.of(product_price)),
        Product(id="p-2", name="Salad", price=Money.of("1000")),
    ])
    menu_repo = FakeMenuRepository(menus or [])
    handler = ChangeProductPriceHandler(product_repo, menu_repo)
    return handler, product_repo, menu_repo


class TestChangePrice:

    def test_returns_product_with_new_price(self):
        handler, _, _ = _setup()
        product = handler.handle("p-1", Decimal("2700"))
        assert product.price.amount == Decimal("2700")

    def test_exact_decimal_kept(self):
        handler, _, _ = _setup()
        product = handler.handle("p-1", "2700.125")
        assert product.price.amount == Decimal("2700.125")

    def test_price_persisted(self):
        handler, product_repo, _ = _setup()
        handler.handle("p-1", "2700")
        assert product_repo.get_by_id("p-1").price == Money.of("2700")

    def test_same_product_instance_mutated(self):
        handler, product_repo, _ = _setup()
        stored = product_repo.get_by_id("p-1")
        returned = handler.handle("p-1", "2700")
        assert returned is stored

    def test_zero_price_accepted(self):
        handler, _, _ = _setup()
        assert handler.handle("p-1", "0").price == Money.zero()

    @pytest.mark.parametrize("price", [None, Decimal("-1000")])
    def test_missing_or_negative_price_rejected(self, price):
        handler, product_repo, _ = _setup()
        with pytest.raises(ValidationError):
            handler.handle("p-1", price)
        assert product_repo.calls == []

    @pytest.mark.parametrize("price", [None, Decimal("-1000")])
    def test_rejected_price_leaves_product_untouched(self, price):
        handler, product_repo, _ = _setup()
        with pytest.raises(ValidationError):
            handler.handle("p-1", price)
        assert product_repo.get_by_id("p-1").price == Money.of("3000")

    def test_unknown_product_rejected(self):
        handler, _, _ = _setup()
        with pytest.raises(EntityNotFoundError, match="not found"):
            handler.handle("p-404", "1000")


class TestMenuCascade:

    def test_menu_still_affordable_stays_displayed(self):
        stays = _menu("m-1", "2500", ("p-1", 1))
        handler, _, menu_repo = _setup([stays])

        handler.handle("p-1", "2700")

        assert stays.displayed is True
        assert menu_repo.saved == []

    def test_overpriced_menu_hidden(self):
        stays = _menu("m-1", "2500", ("p-1", 1))
        hidden = _menu("m-2", "2800", ("p-1", 1))
        handler, _, menu_repo = _setup([stays, hidden])

        handler.handle("p-1", "2700")

        assert stays.displayed is True
        assert hidden.displayed is False
        assert menu_repo.saved == [hidden]

    def test_boundary_equal_price_stays_displayed(self):
        menu = _menu("m-1", "2700", ("p-1", 1))
        handler, _, _ = _setup([menu])

        handler.handle("p-1", "2700")

        assert menu.displayed is True

    def test_progressive_price_drop(self):
        cheap = _menu("m-1", "2500", ("p-1", 1))
        pricey = _menu("m-2", "2800", ("p-1", 1))
        handler, _, _ = _setup([cheap, pricey])

        handler.handle("p-1", "2900")
        assert cheap.displayed is True
        assert pricey.displayed is True

        handler.handle("p-1", "2799")
        assert cheap.displayed is True
        assert pricey.displayed is False

        handler.handle("p-1", "2400")
        assert cheap.displayed is False

    def test_other_line_items_count_toward_total(self):
        menu = _menu("m-1", "3500", ("p-1", 1), ("p-2", 1))
        handler, _, _ = _setup([menu])

        handler.handle("p-1", "2500")
        assert menu.displayed is True

        handler.handle("p-1", "2499")
        assert menu.displayed is False

    def test_quantity_counts_toward_total(self):
        menu = _menu("m-1", "5000", ("p-1", 2))
        handler, _, _ = _setup([menu])

        handler.handle("p-1", "2500")
        assert menu.displayed is True

        handler.handle("p-1", "2499")
        assert menu.displayed is False

    def test_price_increase_never_reshows_hidden_menu(self):
        menu = _menu("m-1", "2500", ("p-1", 1), displayed=False)
        handler, _, menu_repo = _setup([menu])

        handler.handle("p-1", "9000")

        assert menu.displayed is False
        assert menu_repo.saved == []

    def test_menus_without_product_untouched(self):
        other = _menu("m-1", "5000", ("p-2", 1))
        handler, _, menu_repo = _setup([other])

        handler.handle("p-1", "0")

        assert other.displayed is True
        assert menu_repo.saved == []

    def test_hidden_menus_are_not_repriced(self):
        menu = _menu("m-1", "2500", ("p-1", 1), ("p-2", 1), displayed=False)
        handler, product_repo, _ = _setup([menu])

        handler.handle("p-1", "100")

        assert product_repo.calls == ["get_by_id", "save"]

    def test_displayed_menus_are_repriced(self):
        menu = _menu("m-1", "2500", ("p-1", 1), ("p-2", 1))
        handler, product_repo, _ = _setup([menu])

        handler.handle("p-1", "100")

        assert product_repo.calls == ["get_by_id", "save", "get_by_id", "get_by_id"]
