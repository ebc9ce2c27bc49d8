"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from kitchenpos.infrastructure.config import settings
from kitchenpos.infrastructure.persistence.json_menu_group_repository import (
    JsonMenuGroupRepository,
)
from kitchenpos.infrastructure.persistence.json_menu_repository import (
    JsonMenuRepository,
)
from kitchenpos.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)
from kitchenpos.infrastructure.profanity.purgomalum_client import (
    PurgomalumProfanityChecker,
)


def product_repository() -> JsonProductRepository:
    return JsonProductRepository(settings.DATA_DIR / "products.json")


def menu_group_repository() -> JsonMenuGroupRepository:
    return JsonMenuGroupRepository(settings.DATA_DIR / "menu_groups.json")


def menu_repository() -> JsonMenuRepository:
    return JsonMenuRepository(settings.DATA_DIR / "menus.json")


def profanity_checker() -> PurgomalumProfanityChecker:
    return PurgomalumProfanityChecker(
        base_url=settings.PURGOMALUM_BASE_URL,
        timeout=settings.PURGOMALUM_TIMEOUT,
    )
