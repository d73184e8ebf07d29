"""Checkout simulation CLI.

Runs the reference checkout scenario and prints the shipment notice and
receipt to stdout.

Usage:
    python src/manage.py demo                     # Reference scenario
    python src/manage.py demo --balance 100       # Fails with insufficient balance
    python src/manage.py demo --rate-per-kg 10    # Different shipping rate
"""

import argparse
import sys
from datetime import timedelta


def _amount(value):
    from shared.amounts import to_decimal
    from shared.errors import InvalidInputError

    try:
        return to_decimal(value)
    except InvalidInputError:
        raise argparse.ArgumentTypeError(f"invalid amount: {value!r}") from None


def init_domains():
    """Initialize the catalogue, identity and ordering domains. Returns the ordering domain."""
    from catalogue.domain import catalogue
    from identity.domain import identity
    from ordering.domain import ordering

    for domain in (catalogue, identity, ordering):
        domain.init()
    return ordering


def build_demo(balance="10000", clock=None):
    """Build the reference customer and cart: 2 cheese, 1 TV, 1 scratch card."""
    from catalogue.product.product import Product
    from identity.customer.customer import Customer
    from ordering.cart.cart import Cart
    from shared.clock import SystemClock

    clock = clock or SystemClock()

    cheese = Product.create("Cheese", 100, 10, clock.today() + timedelta(days=7), True, 0.4)
    tv = Product.create("TV", 5000, 3, None, True, 15.0)
    scratch_card = Product.create("ScratchCard", 50, 20, None, False, 0.0)

    customer = Customer.create("John", balance)
    cart = Cart.create(clock=clock)

    cart.add(cheese, 2)
    cart.add(tv, 1)
    cart.add(scratch_card, 1)

    return customer, cart


def run_demo(balance="10000", rate_per_kg=None, channel=None, clock=None):
    """Run the reference checkout. Returns the receipt.

    Expects an active domain context (see ``init_domains``).
    """
    from fulfillment.shipping.calculator import ShippingCalculator
    from notifications.dispatch import NoticeDispatcher
    from ordering.checkout.checkout import checkout

    customer, cart = build_demo(balance=balance, clock=clock)
    return checkout(
        customer,
        cart,
        shipping=ShippingCalculator(rate_per_kg=rate_per_kg),
        dispatcher=NoticeDispatcher(channel=channel),
    )


def main(argv=None):
    from shared.errors import CheckoutError
    from shared.logging import add_context, clear_context, configure_logging

    parser = argparse.ArgumentParser(description="Point-of-sale checkout simulation")
    subparsers = parser.add_subparsers(dest="command", required=True)

    demo_parser = subparsers.add_parser("demo", help="Run the reference checkout scenario")
    demo_parser.add_argument("--balance", type=_amount, default="10000", help="Customer balance")
    demo_parser.add_argument(
        "--rate-per-kg",
        type=_amount,
        default=None,
        help="Shipping rate per kilogram (default: SHIPPING_RATE_PER_KG or 30)",
    )

    args = parser.parse_args(argv)

    try:
        configure_logging()
        domain = init_domains()
    except CheckoutError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    add_context(command=args.command)
    try:
        if args.command == "demo":
            with domain.domain_context():
                run_demo(balance=args.balance, rate_per_kg=args.rate_per_kg)
    except CheckoutError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    finally:
        clear_context()
    return 0


if __name__ == "__main__":
    sys.exit(main())
