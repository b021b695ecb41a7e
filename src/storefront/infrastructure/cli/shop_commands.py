"""Interactive shopping menu, the driver for a single cart session.

Every menu option parses its own input, calls one application handler and
renders the result. Domain errors are shown and the loop keeps running.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

import click

from storefront.application.add_to_cart import AddToCartHandler
from storefront.application.clear_cart import ClearCartHandler
from storefront.application.finalize_order import FinalizeOrderHandler
from storefront.application.list_products import ListProductsHandler
from storefront.application.remove_from_cart import RemoveFromCartHandler
from storefront.application.session import ShopSession
from storefront.application.view_cart import ViewCartHandler
from storefront.domain.exceptions import DomainException
from storefront.infrastructure.cli.rendering import (
    display_cart,
    display_order,
    display_products,
)

logger = logging.getLogger(__name__)

EXIT_OPTION = "7"


def _add_to_cart(session: ShopSession) -> None:
    product_name = click.prompt("Product name")
    raw_quantity = click.prompt("Quantity")
    try:
        quantity = int(raw_quantity)
    except ValueError:
        click.echo(f"Invalid quantity '{raw_quantity}'.")
        return

    handler = AddToCartHandler(catalog=session.catalog, cart=session.cart)
    line = handler.handle(product_name=product_name, quantity=quantity)
    click.echo(f"{line.quantity} x {line.product_name} in cart ({line.line_total}).")


def _view_cart(session: ShopSession) -> None:
    display_cart(ViewCartHandler(cart=session.cart).handle())


def _remove_from_cart(session: ShopSession) -> None:
    product_name = click.prompt("Product name")
    handler = RemoveFromCartHandler(catalog=session.catalog, cart=session.cart)
    if handler.handle(product_name=product_name):
        click.echo(f"{product_name} removed from cart.")
    else:
        click.echo(f"{product_name} was not in the cart.")


def _clear_cart(session: ShopSession) -> None:
    ClearCartHandler(cart=session.cart).handle()
    click.echo("Cart emptied.")


def _list_products(session: ShopSession) -> None:
    click.echo("Available products:")
    display_products(ListProductsHandler(catalog=session.catalog).handle())


def _finalize_order(session: ShopSession) -> None:
    click.echo("Finalize order:")
    address = click.prompt("Shipping address")
    phone = click.prompt("Phone number")
    payment_method = click.prompt("Payment method")

    handler = FinalizeOrderHandler(
        cart=session.cart,
        order_submitter=session.order_submitter,
    )
    outcome = handler.handle(address, phone, payment_method)
    if not outcome.ok:
        click.echo(outcome.error)
        return

    display_order(outcome.order)  # type: ignore[arg-type]
    click.echo("Your order has been finalized!")


MENU: tuple[tuple[str, str, Callable[[ShopSession], None] | None], ...] = (
    ("1", "Add product to cart", _add_to_cart),
    ("2", "View cart", _view_cart),
    ("3", "Remove product from cart", _remove_from_cart),
    ("4", "Clear cart", _clear_cart),
    ("5", "List available products", _list_products),
    ("6", "Finalize order", _finalize_order),
    (EXIT_OPTION, "Exit", None),
)

_ACTIONS = {key: action for key, _, action in MENU}


def run_menu(session: ShopSession) -> None:
    while True:
        click.echo()
        for key, label, _ in MENU:
            click.echo(f"{key}. {label}")
        choice = click.prompt("Select an option").strip()

        if choice == EXIT_OPTION:
            click.echo("Goodbye!")
            return

        action = _ACTIONS.get(choice)
        if action is None:
            click.echo("Invalid option. Please select a valid option.")
            continue

        try:
            action(session)
        except DomainException as exc:
            logger.info(f"Menu option {choice} rejected: {exc}")
            click.echo(f"Error: {exc}")


@click.command("shop")
@click.pass_obj
def shop(session: ShopSession) -> None:
    """Start an interactive shopping session."""
    run_menu(session)
