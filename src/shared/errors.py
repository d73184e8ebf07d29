"""Error taxonomy for the checkout simulation.

Every error is a ``protean.exceptions.ValidationError`` carrying a
``messages`` mapping of field name to a list of human-readable messages, so
callers can report failures per field the same way regardless of which step
raised them. All of them abort the current checkout attempt; none are retried.
"""

from protean.exceptions import ValidationError


class CheckoutError(ValidationError):
    """Base class for all checkout failures."""

    def __init__(self, messages: dict[str, list[str]], **kwargs):
        super().__init__(messages, **kwargs)

    def __str__(self) -> str:
        return "; ".join(msg for field_messages in self.messages.values() for msg in field_messages)

    def __reduce__(self):
        return (self.__class__, (self.messages,))


class OutOfStockError(CheckoutError):
    """Requested quantity exceeds the product's available stock at add-time."""


class ExpiredProductError(CheckoutError):
    """The product's expiry date has passed."""


class EmptyCartError(CheckoutError):
    """Checkout was attempted with no items in the cart."""


class InsufficientBalanceError(CheckoutError):
    """The customer's balance is below the computed total."""


class InvalidInputError(CheckoutError):
    """A value is outside the accepted domain (negative price, zero quantity, ...)."""

    @classmethod
    def from_validation_error(cls, exc: ValidationError) -> "InvalidInputError":
        """Re-raise a protean ``ValidationError`` from a domain element as ``InvalidInputError``."""
        messages = exc.messages if isinstance(exc.messages, dict) else {"_entity": [str(exc.messages)]}
        return cls(
            {
                field: [field_messages] if isinstance(field_messages, str) else list(field_messages)
                for field, field_messages in messages.items()
            }
        )
