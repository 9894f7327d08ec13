from __future__ import annotations

from pathlib import Path

import click

from storefront.domain.exceptions import StoreUnavailableError
from storefront.infrastructure.bootstrap import StoreContext
from storefront.infrastructure.cli.category_commands import (
    category_add,
    category_delete,
    category_list,
)
from storefront.infrastructure.cli.order_commands import (
    order_advance,
    order_delete,
    order_list,
    order_submit,
)
from storefront.infrastructure.cli.product_commands import (
    product_delete,
    product_list,
    product_save,
    product_upload,
)
from storefront.infrastructure.cli.store_commands import store_client_id, store_init
from storefront.infrastructure.config import Settings
from storefront.infrastructure.logging_setup import setup_logging
from storefront.infrastructure.sync.local_broadcast import LocalBroadcastHub

LOG_LEVELS = click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False)


def announce(message: str) -> None:
    click.secho(message, fg="yellow", bold=True, err=True)


@click.group()
@click.option("--data-dir", type=click.Path(file_okay=False, path_type=Path),
              envvar="STOREFRONT_DATA_DIR", default=None,
              help="Directory holding the JSON store and uploads.")
@click.option("--log-level", type=LOG_LEVELS, default=None, help="Logging level.")
@click.pass_context
def cli(ctx: click.Context, data_dir: Path | None, log_level: str | None) -> None:
    """Storefront: customers order, pickers pick, cashiers get paid."""
    settings = Settings.from_env(data_dir)
    setup_logging((log_level or settings.log_level).upper(), settings.log_dir)

    try:
        store = StoreContext(settings, LocalBroadcastHub(), speaker=announce).open()
    except StoreUnavailableError as exc:
        raise click.ClickException(f"{exc}. Check the data directory and retry.")

    ctx.obj = store
    ctx.call_on_close(store.close)


@cli.group()
def store() -> None:
    """Store setup."""


@cli.group()
def order() -> None:
    """Manage orders."""


@cli.group()
def product() -> None:
    """Manage products."""


@cli.group()
def category() -> None:
    """Manage categories."""


# Register subcommands
store.add_command(store_init)
store.add_command(store_client_id)
order.add_command(order_submit)
order.add_command(order_list)
order.add_command(order_advance)
order.add_command(order_delete)
product.add_command(product_list)
product.add_command(product_save)
product.add_command(product_delete)
product.add_command(product_upload)
category.add_command(category_list)
category.add_command(category_add)
category.add_command(category_delete)
