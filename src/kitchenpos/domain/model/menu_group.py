"""MenuGroup: the category a menu is filed under."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class MenuGroup:

    id: str
    name: str
