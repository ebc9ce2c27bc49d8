"""Abstract repository for MenuGroup."""

from __future__ import annotations

from abc import ABC, abstractmethod

from kitchenpos.domain.model.menu_group import MenuGroup


class MenuGroupRepository(ABC):

    @abstractmethod
    def get_by_id(self, menu_group_id: str) -> MenuGroup | None:
        """Return a menu group by its ID, or None if not found."""

    @abstractmethod
    def save(self, menu_group: MenuGroup) -> None:
        """Persist a new menu group."""
