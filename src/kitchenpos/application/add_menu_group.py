"""Application service: Add Menu Group use case."""

from __future__ import annotations

import logging
import uuid

from kitchenpos.domain.exceptions import ValidationError
from kitchenpos.domain.model.menu_group import MenuGroup
from kitchenpos.domain.repository.menu_group_repository import MenuGroupRepository

logger = logging.getLogger(__name__)


class AddMenuGroupHandler:

    def __init__(self, menu_group_repo: MenuGroupRepository) -> None:
        self._menu_group_repo = menu_group_repo

    def handle(self, name: str | None) -> MenuGroup:
        if not name or not name.strip():
            raise ValidationError("Menu group name is required")

        menu_group = MenuGroup(id=str(uuid.uuid4()), name=name.strip())
        self._menu_group_repo.save(menu_group)
        logger.info("Added menu group %s '%s'", menu_group.id, menu_group.name)
        return menu_group
