"""Unit tests for the Cart aggregate and its state transitions."""

import pytest

from storefront.domain.exceptions import EmptyCartError, InvalidQuantityError
from storefront.domain.model.cart import Cart, OrderSummary
from storefront.domain.model.pricing import PriceStrategy
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money

WIDGET = Product("Widget", "A widget", Money.of("10.00"), PriceStrategy.SIMPLE)
GADGET = Product("Gadget", "A gadget", Money.of("20.00"), PriceStrategy.DISCOUNTED)


def _finalize(cart: Cart):
    return cart.finalize("1 Main St", "555-0100", "card")


class TestAddLine:

    def test_adds_line_with_charged_price(self):
        cart = Cart()
        line = cart.add_line(WIDGET, 3)
        assert line.quantity.value == 3
        assert line.charged_price == Money.of("30")
        assert len(cart) == 1

    def test_zero_quantity_rejected(self):
        cart = Cart()
        with pytest.raises(InvalidQuantityError):
            cart.add_line(WIDGET, 0)
        assert cart.is_empty

    def test_negative_quantity_rejected(self):
        with pytest.raises(InvalidQuantityError):
            Cart().add_line(WIDGET, -2)

    def test_re_adding_overwrites_quantity(self):
        cart = Cart()
        cart.add_line(WIDGET, 2)
        cart.add_line(WIDGET, 5)
        assert len(cart) == 1
        assert cart.lines[0].quantity.value == 5

    def test_overwrite_keeps_line_position(self):
        cart = Cart()
        cart.add_line(WIDGET, 1)
        cart.add_line(GADGET, 1)
        cart.add_line(WIDGET, 4)
        assert [line.product.name for line in cart.lines] == ["Widget", "Gadget"]

    def test_invalid_overwrite_keeps_previous_line(self):
        cart = Cart()
        cart.add_line(WIDGET, 2)
        with pytest.raises(InvalidQuantityError):
            cart.add_line(WIDGET, 0)
        assert cart.lines[0].quantity.value == 2


class TestRemoveAndClear:

    def test_remove_present_line(self):
        cart = Cart()
        cart.add_line(WIDGET, 1)
        cart.add_line(GADGET, 1)
        assert cart.remove_line(WIDGET) is True
        assert [line.product.name for line in cart.lines] == ["Gadget"]

    def test_remove_absent_product_is_noop(self):
        cart = Cart()
        cart.add_line(WIDGET, 2)
        before = cart.lines
        assert cart.remove_line(GADGET) is False
        assert cart.lines == before

    def test_remove_twice_is_idempotent(self):
        cart = Cart()
        cart.add_line(WIDGET, 2)
        cart.remove_line(WIDGET)
        cart.remove_line(WIDGET)
        assert cart.is_empty

    def test_clear_empties_cart(self):
        cart = Cart()
        cart.add_line(WIDGET, 1)
        cart.add_line(GADGET, 1)
        cart.clear()
        assert cart.is_empty
        assert cart.view_total().total == Money.zero()

    def test_cart_usable_after_clear(self):
        cart = Cart()
        cart.add_line(WIDGET, 1)
        cart.clear()
        cart.add_line(GADGET, 2)
        assert cart.view_total().total == Money.of("36")


class TestViewTotal:

    def test_empty_cart_total_is_zero(self):
        view = Cart().view_total()
        assert view.lines == ()
        assert view.total == Money.zero()

    def test_total_is_sum_of_charged_prices(self):
        cart = Cart()
        cart.add_line(WIDGET, 3)
        cart.add_line(GADGET, 2)
        assert cart.view_total().total == Money.of("66")

    def test_snapshot_unaffected_by_later_changes(self):
        cart = Cart()
        cart.add_line(WIDGET, 3)
        view = cart.view_total()
        cart.add_line(WIDGET, 9)
        cart.add_line(GADGET, 1)
        assert len(view.lines) == 1
        assert view.lines[0].quantity.value == 3


class TestFinalize:

    def test_success_returns_summary_and_resets(self):
        cart = Cart()
        cart.add_line(WIDGET, 3)
        cart.add_line(GADGET, 2)

        result = _finalize(cart)

        assert result.ok
        assert result.error is None
        order = result.order
        assert isinstance(order, OrderSummary)
        assert order.shipping_address == "1 Main St"
        assert order.phone == "555-0100"
        assert order.payment_method == "card"
        assert order.total == Money.of("66")
        assert [line.product.name for line in order.lines] == ["Widget", "Gadget"]
        assert cart.is_empty

    def test_empty_cart_returns_error_result(self):
        result = _finalize(Cart())
        assert not result.ok
        assert result.order is None
        assert isinstance(result.error, EmptyCartError)

    def test_second_finalize_reports_empty_cart(self):
        cart = Cart()
        cart.add_line(WIDGET, 1)
        assert _finalize(cart).ok
        second = _finalize(cart)
        assert isinstance(second.error, EmptyCartError)

    def test_summary_is_frozen_after_reset(self):
        cart = Cart()
        cart.add_line(WIDGET, 1)
        order = _finalize(cart).order
        cart.add_line(GADGET, 5)
        assert len(order.lines) == 1
        assert order.total == Money.of("10")
