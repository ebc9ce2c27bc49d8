"""CLI commands for menu groups."""

from __future__ import annotations

import click

from kitchenpos.application.add_menu_group import AddMenuGroupHandler
from kitchenpos.domain.exceptions import DomainException
from kitchenpos.infrastructure.bootstrap import menu_group_repository


@click.command("add")
@click.option("--name", required=True, help="Menu group name.")
def menu_group_add(name: str) -> None:
    """Add a menu group."""
    handler = AddMenuGroupHandler(menu_group_repo=menu_group_repository())

    try:
        group = handler.handle(name=name)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Menu group {group.id} '{group.name}' added")
