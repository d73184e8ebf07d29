"""Receipt value objects for a completed checkout."""

from decimal import Decimal

from pydantic import BaseModel, ConfigDict

from fulfillment.shipping.calculator import ShippingQuote


class ReceiptLine(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    quantity: int
    unit_price: Decimal
    line_total: Decimal


class Receipt(BaseModel):
    """Everything a checkout charged, in cart order."""

    model_config = ConfigDict(frozen=True)

    customer_id: str
    lines: tuple[ReceiptLine, ...]
    subtotal: Decimal
    shipping: ShippingQuote
    total: Decimal

    @property
    def shipping_fee(self) -> Decimal:
        return self.shipping.fee
