"""Domain events for the checkout workflow."""

from protean.fields import Decimal, Identifier, Integer

from ordering.domain import ordering


@ordering.event(part_of="Cart")
class CheckoutCompleted:
    """A cart was paid for and its stock withdrawn."""

    __version__ = 1

    cart_id = Identifier(required=True)
    customer_id = Identifier(required=True)
    subtotal = Decimal(required=True)
    shipping_fee = Decimal(required=True)
    total = Decimal(required=True)
    shipped_units = Integer(required=True)
