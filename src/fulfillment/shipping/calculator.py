"""Shipping calculator — expands cart lines into shippable units and prices them.

Every line whose product needs shipping contributes one ``ShippableUnit`` per
unit of quantity. The fee is a flat rate per kilogram over the combined
weight of those units, and zero when nothing needs shipping.
"""

from collections.abc import Iterable
from decimal import Decimal

from pydantic import BaseModel, ConfigDict

from shared.amounts import to_decimal
from shared.config import get_settings
from shared.errors import InvalidInputError


class ShippableUnit(BaseModel):
    """One physical unit to be packed: the product's name and weight in kg."""

    model_config = ConfigDict(frozen=True)

    name: str
    weight: Decimal


class ShippingQuote(BaseModel):
    """The expanded units and the fee charged for shipping them."""

    model_config = ConfigDict(frozen=True)

    units: tuple[ShippableUnit, ...] = ()
    fee: Decimal = Decimal("0")

    @property
    def total_weight(self) -> Decimal:
        return sum((unit.weight for unit in self.units), Decimal("0"))

    @property
    def is_empty(self) -> bool:
        return not self.units


class ShippingCalculator:
    def __init__(self, rate_per_kg=None):
        if rate_per_kg is None:
            rate_per_kg = get_settings().shipping_rate_per_kg
        rate = to_decimal(rate_per_kg, "rate_per_kg")
        if rate < 0:
            raise InvalidInputError({"rate_per_kg": [f"Shipping rate must not be negative, got {rate}"]})
        self.rate_per_kg = rate

    def expand(self, items: Iterable) -> list[ShippableUnit]:
        """Expand cart items into one unit per shipped quantity, in cart order."""
        units = []
        for item in items:
            product = item.product
            if not product.needs_shipping:
                continue
            units.extend(ShippableUnit(name=product.name, weight=product.weight) for _ in range(item.quantity))
        return units

    def fee_for(self, units: list[ShippableUnit]) -> Decimal:
        if not units:
            return Decimal("0")
        return sum((unit.weight for unit in units), Decimal("0")) * self.rate_per_kg

    def quote(self, items: Iterable) -> ShippingQuote:
        units = self.expand(items)
        return ShippingQuote(units=tuple(units), fee=self.fee_for(units))
