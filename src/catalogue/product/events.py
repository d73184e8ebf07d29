"""Domain events for the Product aggregate."""

from protean.fields import Identifier, Integer, String

from catalogue.domain import catalogue


@catalogue.event(part_of="Product")
class StockWithdrawn:
    """Units of a product left the inventory through a completed checkout."""

    __version__ = 1

    product_id = Identifier(required=True)
    name = String(required=True, sanitize=False)
    quantity = Integer(required=True)
    previous_quantity = Integer(required=True)
    new_quantity = Integer(required=True)


@catalogue.event(part_of="Product")
class StockOverdrawn:
    """A withdrawal drove the available quantity below zero."""

    __version__ = 1

    product_id = Identifier(required=True)
    name = String(required=True, sanitize=False)
    new_quantity = Integer(required=True)
