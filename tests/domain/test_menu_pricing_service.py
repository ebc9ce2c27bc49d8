"""Unit tests for the MenuPricingService domain service."""

import pytest

from kitchenpos.domain.exceptions import EntityNotFoundError
from kitchenpos.domain.model.menu import Menu, MenuProduct
from kitchenpos.domain.model.product import Product
from kitchenpos.domain.model.value_objects import Money, Quantity
from kitchenpos.domain.service.menu_pricing_service import MenuPricingService
from tests.fakes import FakeProductRepository


def _repo() -> FakeProductRepository:
    return FakeProductRepository([
        Product(id="1", name="Fried chicken", price=Money.of("16000")),
        Product(id="2", name="Cola", price=Money.of("1500")),
    ])


def _menu(price: str, *lines: tuple[str, int]) -> Menu:
    return Menu(
        id="m1",
        name="Chicken set",
        price=Money.of(price),
        menu_group_id="g1",
        menu_products=[MenuProduct(pid, Quantity(qty)) for pid, qty in lines],
        displayed=True,
    )


class TestLineTotal:

    def test_sums_price_times_quantity(self):
        svc = MenuPricingService(_repo())
        total = svc.line_total([MenuProduct("1", Quantity(2)), MenuProduct("2", Quantity(3))])
        assert total == Money.of("36500")

    def test_zero_quantity_contributes_nothing(self):
        svc = MenuPricingService(_repo())
        total = svc.line_total([MenuProduct("1", Quantity(1)), MenuProduct("2", Quantity(0))])
        assert total == Money.of("16000")

    def test_empty_is_zero(self):
        assert MenuPricingService(_repo()).line_total([]) == Money.zero()

    def test_looks_up_each_line(self):
        repo = _repo()
        MenuPricingService(repo).line_total(
            [MenuProduct("1", Quantity(1)), MenuProduct("2", Quantity(1))]
        )
        assert repo.calls == ["get_by_id", "get_by_id"]

    def test_uses_current_price(self):
        repo = _repo()
        svc = MenuPricingService(repo)
        lines = [MenuProduct("1", Quantity(1))]
        assert svc.line_total(lines) == Money.of("16000")

        repo.get_by_id("1").change_price(Money.of("18000"))
        assert svc.line_total(lines) == Money.of("18000")

    def test_missing_product_rejected(self):
        svc = MenuPricingService(_repo())
        with pytest.raises(EntityNotFoundError, match="not found"):
            svc.line_total([MenuProduct("999", Quantity(1))])


class TestPricedLines:

    def test_pairs_each_line_with_product_and_amount(self):
        lines = [MenuProduct("1", Quantity(2)), MenuProduct("2", Quantity(3))]
        priced = MenuPricingService(_repo()).priced_lines(lines)
        assert [(line, product.name, amount) for line, product, amount in priced] == [
            (lines[0], "Fried chicken", Money.of("32000")),
            (lines[1], "Cola", Money.of("4500")),
        ]

    def test_missing_product_rejected(self):
        with pytest.raises(EntityNotFoundError, match="not found"):
            MenuPricingService(_repo()).priced_lines([MenuProduct("999", Quantity(1))])


class TestIsPriceExceeding:

    def test_below_total(self):
        assert not MenuPricingService(_repo()).is_price_exceeding(_menu("17000", ("1", 1), ("2", 1)))

    def test_equal_to_total(self):
        assert not MenuPricingService(_repo()).is_price_exceeding(_menu("17500", ("1", 1), ("2", 1)))

    def test_above_total(self):
        assert MenuPricingService(_repo()).is_price_exceeding(_menu("17500.01", ("1", 1), ("2", 1)))
