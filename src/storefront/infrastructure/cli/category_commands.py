"""CLI commands for categories."""

from __future__ import annotations

import click

from storefront.domain.exceptions import DomainException
from storefront.infrastructure.cli.auth import cashier_only


@click.command("list")
@click.pass_obj
def category_list(store) -> None:
    """List categories."""
    try:
        categories = store.list_categories().handle()
    except DomainException as exc:
        raise click.ClickException(str(exc))
    if not categories:
        click.echo("No categories found.")
        return
    for category in categories:
        click.echo(f"{category.id:<18} {category.name}")


@click.command("add")
@click.option("--name", required=True, help="Category name.")
@cashier_only
@click.pass_obj
def category_add(store, name: str) -> None:
    """Add a category."""
    try:
        category = store.add_category().handle(name)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Category {category.id} '{category.name}' added")


@click.command("delete")
@click.option("--id", "category_id", required=True, help="Category ID.")
@cashier_only
@click.confirmation_option(prompt="Delete this category?")
@click.pass_obj
def category_delete(store, category_id: str) -> None:
    """Delete a category (products keep their category text)."""
    try:
        store.delete_category().handle(category_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Category {category_id} deleted.")
