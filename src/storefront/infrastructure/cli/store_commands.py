"""CLI commands for the store as a whole."""

from __future__ import annotations

import click

from storefront.domain.exceptions import DomainException
from storefront.domain.model.identity import new_client_id


@click.command("init")
@click.pass_obj
def store_init(store) -> None:
    """Check the store is reachable and seed an empty one."""
    try:
        snapshot = store.initialize_store().handle()
    except DomainException as exc:
        raise click.ClickException(
            f"Store initialization failed: {exc}. Check the data directory and retry."
        )
    store.view.load(snapshot.products, snapshot.orders)

    click.echo(
        f"Store ready: {len(snapshot.products)} products, {len(snapshot.orders)} orders."
    )


@click.command("client-id")
def store_client_id() -> None:
    """Issue a fresh client identifier for a shopping session."""
    click.echo(new_client_id())
