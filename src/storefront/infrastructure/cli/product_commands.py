"""CLI commands for the Product aggregate."""

from __future__ import annotations

from pathlib import Path

import click

from storefront.application.browse_catalog import ALL_CATEGORIES
from storefront.application.dto import ProductSpec
from storefront.domain.exceptions import DomainException
from storefront.infrastructure.cli.auth import cashier_only


@click.command("list")
@click.option("--category", default=ALL_CATEGORIES, show_default=True,
              help="Only show this category.")
@click.option("--search", default="", help="Match on name or category.")
@click.pass_obj
def product_list(store, category: str, search: str) -> None:
    """List products in the catalog."""
    try:
        catalog = store.browse_catalog().handle(category=category, query=search)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo("Categories: " + " | ".join(catalog.categories))
    click.echo()
    if not catalog.products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<18} {'Name':<20} {'Price':>8} {'Unit':<8} {'Category':<16} Spec")
    click.echo("-" * 84)
    for p in catalog.products:
        click.echo(
            f"{p.id:<18} {p.name:<20} {p.price:>8} {p.unit:<8} {p.category:<16} {p.spec}"
        )


@click.command("save")
@click.option("--id", "product_id", default=None, help="Existing product ID to edit.")
@click.option("--name", required=True, help="Product name.")
@click.option("--price", required=True, help="Unit price (e.g. 8.5).")
@click.option("--unit", default="", help="Unit label (e.g. box).")
@click.option("--category", default="", help="Category name.")
@click.option("--spec", "spec_text", default="", help="Specification, e.g. '10 per box'.")
@click.option("--image", default=None, help="Image URL or /uploads/ path.")
@cashier_only
@click.pass_obj
def product_save(store, product_id: str | None, name: str, price: str, unit: str,
                 category: str, spec_text: str, image: str | None) -> None:
    """Add a product, or edit one with --id."""
    spec = ProductSpec(
        id=product_id,
        name=name,
        price=price,
        unit=unit,
        category=category,
        spec=spec_text,
        image=image,
    )
    try:
        dto = store.save_product().handle(spec)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product {dto.id} '{dto.name}' saved at {dto.price}")


@click.command("delete")
@click.option("--id", "product_id", required=True, help="Product ID.")
@cashier_only
@click.confirmation_option(prompt="Delete this product?")
@click.pass_obj
def product_delete(store, product_id: str) -> None:
    """Delete a product from the catalog."""
    try:
        store.delete_product().handle(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product {product_id} deleted.")


@click.command("upload")
@click.option("--file", "source", required=True,
              type=click.Path(dir_okay=False, path_type=Path), help="Image file.")
@cashier_only
@click.pass_obj
def product_upload(store, source: Path) -> None:
    """Upload a product image and print its path for --image."""
    try:
        path = store.upload_image().handle(source)
    except DomainException as exc:
        raise click.ClickException(f"Image upload failed, please retry: {exc}")

    click.echo(path)
