"""Data Transfer Objects — plain containers that cross layer boundaries.

Input specs carry raw, unvalidated values (a price may be missing or
negative) so that the handlers decide the order in which rules are
checked. Output DTOs are preformatted for display.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class MenuProductSpec:
    """Input: one requested line item (product id + quantity)."""

    product_id: str
    quantity: int


@dataclass(frozen=True)
class MenuSpec:
    """Input: a menu the caller wants to register."""

    name: str | None
    price: Decimal | str | None
    menu_group_id: str
    menu_products: list[MenuProductSpec] | None
    displayed: bool


@dataclass(frozen=True)
class MenuLineDTO:
    """Output: a single line item priced at the current product price."""

    product_id: str
    product_name: str
    quantity: int
    unit_price: str
    line_total: str


@dataclass(frozen=True)
class MenuDTO:
    """Output: a menu as displayed to the user."""

    id: str
    name: str
    price: str
    menu_group: str
    displayed: bool
    items: list[MenuLineDTO]
    line_total: str
