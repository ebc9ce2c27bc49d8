"""Abstract repository for Menu aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from kitchenpos.domain.model.menu import Menu


class MenuRepository(ABC):

    @abstractmethod
    def get_by_id(self, menu_id: str) -> Menu | None:
        """Return a menu by its ID, or None if not found."""

    @abstractmethod
    def find_all_by_product_id(self, product_id: str) -> list[Menu]:
        """Return every menu with at least one line item for *product_id*."""

    @abstractmethod
    def save(self, menu: Menu) -> None:
        """Persist a new or updated menu."""
