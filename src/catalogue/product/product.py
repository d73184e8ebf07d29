"""Product aggregate — a purchasable catalogue item.

Products are constructed by the caller (catalogue setup is external to
checkout) and shared by reference between carts. Checkout only ever mutates
the available quantity.
"""

import decimal
from datetime import date

from protean.exceptions import ValidationError
from protean.fields import Boolean, Date, Decimal, Integer, String

from catalogue.domain import catalogue
from catalogue.product.events import StockOverdrawn, StockWithdrawn
from shared.amounts import to_decimal
from shared.errors import InvalidInputError


@catalogue.aggregate
class Product:
    """A catalogue item with a price, stock level and optional expiry."""

    name = String(required=True, max_length=200, sanitize=False)
    price = Decimal(required=True, min_value=0)
    # No floor: over-committed stock is allowed to go negative on withdrawal
    quantity = Integer(required=True)
    expiry_date = Date()
    needs_shipping = Boolean(default=False)
    weight = Decimal(min_value=0, default=decimal.Decimal("0"))

    # -------------------------------------------------------------------
    # Factory
    # -------------------------------------------------------------------
    @classmethod
    def create(
        cls,
        name,
        price,
        quantity,
        expiry_date=None,
        needs_shipping=False,
        weight=0,
    ):
        """Build a product, reporting invalid fields as ``InvalidInputError``."""
        if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity < 0:
            raise InvalidInputError({"quantity": [f"Quantity must be a non-negative integer, got {quantity!r}"]})

        try:
            return cls(
                name=name,
                price=to_decimal(price, "price"),
                quantity=quantity,
                expiry_date=expiry_date,
                needs_shipping=needs_shipping,
                weight=to_decimal(weight, "weight"),
            )
        except InvalidInputError:
            raise
        except ValidationError as exc:
            raise InvalidInputError.from_validation_error(exc) from None

    # -------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------
    def is_expired(self, today: date) -> bool:
        return self.expiry_date is not None and self.expiry_date < today

    def has_stock_for(self, quantity: int) -> bool:
        return quantity <= self.quantity

    # -------------------------------------------------------------------
    # Stock
    # -------------------------------------------------------------------
    def withdraw(self, quantity: int) -> None:
        """Remove ``quantity`` units from the available stock.

        Stock is only validated when an item is added to a cart, so several
        carts holding the same product can together overdraw it. The quantity
        is allowed to go negative in that case and a ``StockOverdrawn`` event
        is raised.
        """
        previous = self.quantity
        self.quantity = previous - quantity

        self.raise_(
            StockWithdrawn(
                product_id=str(self.id),
                name=self.name,
                quantity=quantity,
                previous_quantity=previous,
                new_quantity=self.quantity,
            )
        )
        if self.quantity < 0:
            self.raise_(
                StockOverdrawn(
                    product_id=str(self.id),
                    name=self.name,
                    new_quantity=self.quantity,
                )
            )
