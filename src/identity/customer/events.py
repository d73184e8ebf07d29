"""Domain events for the Customer aggregate."""

from protean.fields import Decimal, Identifier

from identity.domain import identity


@identity.event(part_of="Customer")
class BalanceDebited:
    """A checkout total was charged against the customer's balance."""

    __version__ = 1

    customer_id = Identifier(required=True)
    amount = Decimal(required=True)
    previous_balance = Decimal(required=True)
    new_balance = Decimal(required=True)
