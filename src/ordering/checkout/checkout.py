"""Checkout — turns a cart into a paid, shipped order.

Sequence:
    1. Reject an empty cart
    2. Price the cart lines (subtotal)
    3. Quote shipping for the units that need it
    4. total = subtotal + shipping fee
    5. Reject if the customer cannot afford the total
    6. Debit the customer and withdraw stock for every line
    7. Emit the shipment notice, when anything ships
    8. Emit the receipt

Steps 1-5 only read their inputs, and the output channel is resolved before
step 6, so a failure leaves the customer and the products untouched. Step 6
cannot fail once step 5 has passed.

The customer, the products and the cart record what happened as domain
events on their pending ``_events`` list, the same as any other aggregate
change; the cart also records ``CheckoutCompleted``.
"""

from decimal import Decimal

from fulfillment.shipping.calculator import ShippingCalculator
from identity.customer.customer import Customer
from notifications.dispatch import NoticeDispatcher
from ordering.cart.cart import Cart
from ordering.checkout.events import CheckoutCompleted
from ordering.checkout.receipt import Receipt, ReceiptLine
from shared.errors import EmptyCartError, InsufficientBalanceError
from shared.logging import get_logger

logger = get_logger(__name__)


class CheckoutService:
    def __init__(self, shipping: ShippingCalculator | None = None, dispatcher: NoticeDispatcher | None = None):
        self.shipping = shipping or ShippingCalculator()
        self.dispatcher = dispatcher or NoticeDispatcher()

    def checkout(self, customer: Customer, cart: Cart) -> Receipt:
        log = logger.bind(customer_id=str(customer.id), cart_id=str(cart.id))

        if cart.is_empty():
            log.warning("Checkout rejected: cart is empty")
            raise EmptyCartError({"cart": ["Cart is empty"]})

        receipt = self.price(customer, cart)

        if not customer.can_afford(receipt.total):
            log.warning(
                "Checkout rejected: insufficient balance",
                balance=str(customer.balance),
                total=str(receipt.total),
            )
            raise InsufficientBalanceError(
                {"balance": [f"Insufficient balance: {customer.balance} available, {receipt.total} required"]}
            )

        # Configuration errors surface here, before anything is mutated
        channel = self.dispatcher.channel
        log.debug("Output channel resolved", channel=type(channel).__name__)

        customer.debit(receipt.total)
        for item in cart:
            item.product.withdraw(item.quantity)
            if item.product.quantity < 0:
                log.warning(
                    "Stock overdrawn by checkout",
                    product_id=str(item.product.id),
                    product=item.product.name,
                    quantity=item.product.quantity,
                )

        if not receipt.shipping.is_empty:
            self.dispatcher.send_shipment_notice(receipt.shipping)
        self.dispatcher.send_receipt(receipt)

        cart.raise_(
            CheckoutCompleted(
                cart_id=str(cart.id),
                customer_id=str(customer.id),
                subtotal=receipt.subtotal,
                shipping_fee=receipt.shipping_fee,
                total=receipt.total,
                shipped_units=len(receipt.shipping.units),
            )
        )
        log.info(
            "Checkout completed",
            subtotal=str(receipt.subtotal),
            shipping_fee=str(receipt.shipping_fee),
            total=str(receipt.total),
            balance=str(customer.balance),
        )
        return receipt

    def price(self, customer: Customer, cart: Cart) -> Receipt:
        """Compute the receipt for ``cart`` without touching any state."""
        lines = tuple(
            ReceiptLine(
                name=item.product.name,
                quantity=item.quantity,
                unit_price=item.product.price,
                line_total=item.line_total,
            )
            for item in cart
        )
        subtotal = sum((line.line_total for line in lines), Decimal("0"))
        quote = self.shipping.quote(cart)

        return Receipt(
            customer_id=str(customer.id),
            lines=lines,
            subtotal=subtotal,
            shipping=quote,
            total=subtotal + quote.fee,
        )


def checkout(customer: Customer, cart: Cart, *, shipping=None, dispatcher=None) -> Receipt:
    """Check out ``cart`` for ``customer`` with the default calculator and output channel."""
    return CheckoutService(shipping=shipping, dispatcher=dispatcher).checkout(customer, cart)
