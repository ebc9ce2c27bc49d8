"""Unit tests for the Menu aggregate and Product price mutation."""

from kitchenpos.domain.model.menu import Menu, MenuProduct
from kitchenpos.domain.model.product import Product
from kitchenpos.domain.model.value_objects import Money, Quantity


def _menu(*lines: tuple[str, int], displayed: bool = True) -> Menu:
    return Menu(
        id="m1",
        name="Fried chicken set",
        price=Money.of("19000"),
        menu_group_id="g1",
        menu_products=[MenuProduct(pid, Quantity(qty)) for pid, qty in lines],
        displayed=displayed,
    )


class TestMenu:

    def test_references(self):
        menu = _menu(("p1", 1), ("p2", 1))
        assert menu.references("p2")
        assert not menu.references("p3")

    def test_hide(self):
        menu = _menu(("p1", 1))
        menu.hide()
        assert menu.displayed is False

    def test_hide_is_idempotent(self):
        menu = _menu(("p1", 1), displayed=False)
        menu.hide()
        assert menu.displayed is False


class TestProduct:

    def test_change_price_keeps_identity(self):
        product = Product(id="p1", name="Fried chicken", price=Money.of("16000"))
        same = product
        product.change_price(Money.of("17000"))
        assert same.price == Money.of("17000")
        assert same is product
