"""CLI commands for the catalog."""

from __future__ import annotations

import click

from storefront.application.add_product import AddProductHandler
from storefront.application.list_products import ListProductsHandler
from storefront.application.session import ShopSession
from storefront.domain.exceptions import DomainException
from storefront.domain.model.pricing import PriceStrategy
from storefront.infrastructure.cli.rendering import display_products


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--price", required=True, help="Base price (e.g. 15.00).")
@click.option("--description", default="", help="Free-text description.")
@click.option(
    "--strategy",
    type=click.Choice([s.value for s in PriceStrategy], case_sensitive=False),
    default=PriceStrategy.SIMPLE.value,
    show_default=True,
    help="Pricing strategy.",
)
@click.pass_obj
def product_add(
    session: ShopSession, name: str, price: str, description: str, strategy: str
) -> None:
    """Add a product to the catalog and notify subscribers."""
    handler = AddProductHandler(catalog=session.catalog)

    try:
        product = handler.handle(
            name=name, price=price, description=description, strategy=strategy
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product '{product.name}' added at {product.base_price} ({product.strategy})")


@click.command("list")
@click.pass_obj
def product_list(session: ShopSession) -> None:
    """List all products in the catalog."""
    display_products(ListProductsHandler(catalog=session.catalog).handle())
