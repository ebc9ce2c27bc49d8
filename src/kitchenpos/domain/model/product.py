"""Product aggregate.

Products live independently of menus. A menu only holds a product's id,
so a price change is seen by every menu the next time it is priced.
"""

from __future__ import annotations

from dataclasses import dataclass

from kitchenpos.domain.model.value_objects import Money


@dataclass
class Product:
    """A product in the catalog.

    Kept as a mutable dataclass because a price change is a legitimate
    in-place mutation on the aggregate.
    """

    id: str
    name: str
    price: Money

    def change_price(self, new_price: Money) -> None:
        self.price = new_price
