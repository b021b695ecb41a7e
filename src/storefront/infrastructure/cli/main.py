import logging

import click

from storefront.infrastructure.bootstrap import DEFAULT_SUBSCRIBERS, build_session
from storefront.infrastructure.cli.product_commands import product_add, product_list
from storefront.infrastructure.cli.shop_commands import shop

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


@click.group()
@click.option(
    "--subscriber",
    "subscribers",
    multiple=True,
    envvar="STOREFRONT_SUBSCRIBERS",
    help="Name of a user to notify about new products (repeatable).",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default="WARNING",
    show_default=True,
    envvar="STOREFRONT_LOG_LEVEL",
    help="Logging verbosity.",
)
@click.pass_context
def cli(ctx: click.Context, subscribers: tuple[str, ...], log_level: str) -> None:
    """Storefront: catalog, cart and new-product notifications"""
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format=LOG_FORMAT,
        datefmt="%H:%M:%S",
    )
    ctx.obj = build_session(subscriber_names=subscribers or DEFAULT_SUBSCRIBERS)


@cli.group()
def product() -> None:
    """Manage the catalog."""


# Register subcommands
cli.add_command(shop)
product.add_command(product_add)
product.add_command(product_list)
