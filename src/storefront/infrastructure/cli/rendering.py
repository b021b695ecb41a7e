"""Shared table formatting for catalog, cart and order output."""

from __future__ import annotations

import click

from storefront.application.dto import CartDTO, CartLineDTO, OrderSummaryDTO, ProductDTO


def display_products(products: list[ProductDTO]) -> None:
    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'Name':<20} {'Price':>10} {'Pricing':<12} Description")
    click.echo("-" * 60)
    for p in products:
        click.echo(f"{p.name:<20} {p.base_price:>10} {p.strategy:<12} {p.description}")


def _display_lines(items: list[CartLineDTO], total: str, total_label: str) -> None:
    click.echo(f"  {'Product':<20} {'Qty':>5} {'Price':>10} {'Total':>10}")
    click.echo(f"  {'-'*47}")
    for item in items:
        click.echo(
            f"  {item.product_name:<20} {item.quantity:>5} {item.unit_price:>10} {item.line_total:>10}"
        )
    click.echo(f"  {'-'*47}")
    click.echo(f"  {total_label:<27} {total:>20}")


def display_cart(cart: CartDTO) -> None:
    if cart.is_empty:
        click.echo("Your cart is empty.")
        return

    click.echo("Cart contents:")
    _display_lines(cart.items, cart.total, "Cart Total")


def display_order(order: OrderSummaryDTO) -> None:
    click.echo(f"Shipping address: {order.shipping_address}")
    click.echo(f"Phone number:     {order.phone}")
    click.echo(f"Payment method:   {order.payment_method}")
    click.echo(f"Placed:           {order.placed_at}")
    click.echo()
    _display_lines(order.items, order.total, "Order Total")
