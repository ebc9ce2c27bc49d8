"""JSON-file-backed implementation of MenuRepository.

Line items are stored inline with their menu as (product_id, quantity)
pairs. Product prices are never copied into this file.
"""

from __future__ import annotations

import json
from decimal import Decimal
from pathlib import Path

from kitchenpos.domain.model.menu import Menu, MenuProduct
from kitchenpos.domain.model.value_objects import Money, Quantity
from kitchenpos.domain.repository.menu_repository import MenuRepository


class JsonMenuRepository(MenuRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- MenuRepository interface ---------------------------------------------

    def get_by_id(self, menu_id: str) -> Menu | None:
        return self._load().get(menu_id)

    def find_all_by_product_id(self, product_id: str) -> list[Menu]:
        return [m for m in self._load().values() if m.references(product_id)]

    def save(self, menu: Menu) -> None:
        menus = self._load()
        menus[menu.id] = menu
        self._persist(menus)

    # --- Serialization helpers ------------------------------------------------

    def _load(self) -> dict[str, Menu]:
        raw = json.loads(self._file_path.read_text(encoding="utf-8"))
        return {item["id"]: self._deserialize(item) for item in raw}

    def _persist(self, menus: dict[str, Menu]) -> None:
        raw = [self._serialize(m) for m in menus.values()]
        self._file_path.write_text(
            json.dumps(raw, indent=2, ensure_ascii=False) + "\n", encoding="utf-8"
        )

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")

    @staticmethod
    def _serialize(menu: Menu) -> dict:
        return {
            "id": menu.id,
            "name": menu.name,
            "price": str(menu.price.amount),
            "menu_group_id": menu.menu_group_id,
            "displayed": menu.displayed,
            "menu_products": [
                {"product_id": mp.product_id, "quantity": mp.quantity.value}
                for mp in menu.menu_products
            ],
        }

    @staticmethod
    def _deserialize(data: dict) -> Menu:
        return Menu(
            id=data["id"],
            name=data["name"],
            price=Money(Decimal(data["price"])),
            menu_group_id=data["menu_group_id"],
            displayed=data["displayed"],
            menu_products=[
                MenuProduct(
                    product_id=mp["product_id"],
                    quantity=Quantity(mp["quantity"]),
                )
                for mp in data["menu_products"]
            ],
        )
