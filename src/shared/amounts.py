"""Conversion of caller-supplied money and weight values to ``Decimal``.

Floats go through their ``repr`` so ``0.4`` becomes ``Decimal("0.4")`` rather
than the nearest binary fraction.
"""

from decimal import Decimal, InvalidOperation

from shared.errors import InvalidInputError


def to_decimal(value, field: str = "amount") -> Decimal:
    """Return ``value`` as a finite ``Decimal`` or raise ``InvalidInputError``."""
    if isinstance(value, bool):
        raise InvalidInputError({field: [f"Expected a number, got {value!r}"]})

    try:
        if isinstance(value, Decimal):
            amount = value
        elif isinstance(value, float):
            amount = Decimal(repr(value))
        else:
            amount = Decimal(value)
    except (InvalidOperation, TypeError, ValueError):
        raise InvalidInputError({field: [f"Expected a number, got {value!r}"]}) from None

    if not amount.is_finite():
        raise InvalidInputError({field: [f"Expected a finite number, got {value!r}"]})
    return amount
