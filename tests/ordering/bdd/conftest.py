"""Shared BDD fixtures and step definitions for checkout scenarios."""

import io
from decimal import Decimal

import pytest
from identity.customer.customer import Customer
from notifications.channel.stdout_adapter import StdoutAdapter
from notifications.dispatch import NoticeDispatcher
from ordering.cart.events import CartItemAdded
from ordering.checkout.checkout import CheckoutService
from ordering.checkout.events import CheckoutCompleted
from pytest_bdd import given, parsers, then
from shared.errors import InsufficientBalanceError

_CART_EVENT_CLASSES = {
    "CartItemAdded": CartItemAdded,
    "CheckoutCompleted": CheckoutCompleted,
}


@pytest.fixture
def error():
    """Container for errors raised in When steps."""
    return {"exc": None}


@pytest.fixture
def stream():
    return io.StringIO()


@pytest.fixture
def checkout_service(stream):
    return CheckoutService(dispatcher=NoticeDispatcher(channel=StdoutAdapter(stream=stream)))


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given("the catalogue holds Cheese, a TV and a ScratchCard", target_fixture="products")
def catalogue_products(cheese, tv, scratch_card):
    return {product.name: product for product in (cheese, tv, scratch_card)}


@given(parsers.cfparse("a customer with a balance of {balance:d}"), target_fixture="customer")
def customer_with_balance(balance):
    return Customer.create("John", balance)


@given(parsers.cfparse("the cart holds {quantity:d} {name}"), target_fixture="cart")
def cart_holds(cart, products, quantity, name):
    cart.add(products[name], quantity)
    cart._events.clear()
    return cart


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then("the output is:")
def output_is(stream, docstring):
    # Every notice ends with a blank line
    assert stream.getvalue() == docstring + "\n\n"


@then("nothing is written")
def nothing_written(stream):
    assert stream.getvalue() == ""


@then(parsers.cfparse("the shipping fee is {fee:d}"))
def shipping_fee_is(receipt, fee):
    assert receipt.shipping_fee == Decimal(fee)


@then(parsers.cfparse("the customer balance is {balance:d}"))
def customer_balance_is(customer, balance):
    assert customer.balance == Decimal(balance)


@then(parsers.cfparse("the stock of {name} is {quantity:d}"))
def stock_is(products, name, quantity):
    assert products[name].quantity == quantity


@then("the checkout fails with an insufficient balance error")
def checkout_fails(error):
    assert error["exc"] is not None, "Expected an error but none was raised"
    assert isinstance(error["exc"], InsufficientBalanceError)


@then(parsers.cfparse("a {event_type} cart event is raised"))
def cart_event_raised(cart, event_type):
    event_cls = _CART_EVENT_CLASSES[event_type]
    assert any(
        isinstance(e, event_cls) for e in cart._events
    ), f"No {event_type} event found. Events: {[type(e).__name__ for e in cart._events]}"


@then(parsers.cfparse("no {event_type} cart event is raised"))
def cart_event_not_raised(cart, event_type):
    event_cls = _CART_EVENT_CLASSES[event_type]
    assert not any(isinstance(e, event_cls) for e in cart._events)
