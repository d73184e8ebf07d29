"""Ordering bounded context: shopping carts and the checkout that settles them.

Checkout debits the customer and withdraws stock from the catalogue, so it
runs against aggregates from the catalogue and identity contexts as well.
"""

from protean.domain import Domain

ordering = Domain(name="ordering")
