"""Guards for the shopkeeper/customer presentation split."""

from __future__ import annotations

import click

from khata.application.view_mode import ViewMode


def current_view() -> ViewMode:
    ctx = click.get_current_context()
    view = ctx.find_object(ViewMode)
    return view if view is not None else ViewMode.SHOPKEEPER


def require_section(section: str) -> None:
    view = current_view()
    if section not in view.sections:
        raise click.ClickException(
            f"'{section}' is not available in {view.value} view."
        )


def require_shopkeeper() -> None:
    if not current_view().can_modify:
        raise click.ClickException(
            "Switch to shopkeeper view (--view shopkeeper) to make changes."
        )
