"""Customer aggregate: the shopper paying for a cart."""

from protean.exceptions import ValidationError
from protean.fields import Decimal, String

from identity.customer.events import BalanceDebited
from identity.domain import identity
from shared.amounts import to_decimal
from shared.errors import InsufficientBalanceError, InvalidInputError


@identity.aggregate
class Customer:
    name = String(required=True, max_length=100, sanitize=False)
    balance = Decimal(required=True, min_value=0)

    @classmethod
    def create(cls, name, balance):
        try:
            return cls(name=name, balance=to_decimal(balance, "balance"))
        except InvalidInputError:
            raise
        except ValidationError as exc:
            raise InvalidInputError.from_validation_error(exc) from None

    def can_afford(self, amount) -> bool:
        return self.balance >= amount

    def debit(self, amount) -> None:
        """Charge ``amount`` against the balance."""
        amount = to_decimal(amount, "amount")
        if amount < 0:
            raise InvalidInputError({"amount": ["Debit amount must not be negative"]})
        if not self.can_afford(amount):
            raise InsufficientBalanceError(
                {"balance": [f"Insufficient balance: {self.balance} available, {amount} required"]}
            )

        previous = self.balance
        self.balance = previous - amount

        self.raise_(
            BalanceDebited(
                customer_id=str(self.id),
                amount=amount,
                previous_balance=previous,
                new_balance=self.balance,
            )
        )
