"""JSON-file-backed implementation of MenuGroupRepository."""

from __future__ import annotations

import json
from pathlib import Path

from kitchenpos.domain.model.menu_group import MenuGroup
from kitchenpos.domain.repository.menu_group_repository import MenuGroupRepository


class JsonMenuGroupRepository(MenuGroupRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    def get_by_id(self, menu_group_id: str) -> MenuGroup | None:
        return self._load().get(menu_group_id)

    def save(self, menu_group: MenuGroup) -> None:
        groups = self._load()
        groups[menu_group.id] = menu_group
        raw = [{"id": g.id, "name": g.name} for g in groups.values()]
        self._file_path.write_text(
            json.dumps(raw, indent=2, ensure_ascii=False) + "\n", encoding="utf-8"
        )

    def _load(self) -> dict[str, MenuGroup]:
        raw = json.loads(self._file_path.read_text(encoding="utf-8"))
        return {item["id"]: MenuGroup(id=item["id"], name=item["name"]) for item in raw}

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
