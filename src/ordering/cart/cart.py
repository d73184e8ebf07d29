"""Cart aggregate — the ordered list of items a customer intends to buy.

Stock and expiry are validated when an item is added, not at checkout.
Adding an item does not reserve stock: the product's available quantity is
only decremented when a checkout completes.
"""

from pydantic import PrivateAttr
from protean.exceptions import IncorrectUsageError
from protean.fields import Identifier, Integer

from catalogue.product.product import Product
from ordering.cart.events import CartItemAdded
from ordering.domain import ordering
from shared.clock import Clock, SystemClock
from shared.errors import ExpiredProductError, InvalidInputError, OutOfStockError


@ordering.entity(part_of="Cart")
class CartItem:
    """A product and the quantity requested. Fields cannot change once set.

    The product is held by reference, so checkout sees (and decrements) the
    same object the caller created.
    """

    product_id = Identifier(required=True)
    quantity = Integer(required=True, min_value=1)

    _product = PrivateAttr(default=None)

    def __setattr__(self, name, value):
        if name in ("product_id", "quantity") and getattr(self, "_initialized", False):
            raise IncorrectUsageError("Cart items cannot be modified once added")
        super().__setattr__(name, value)

    @property
    def product(self) -> Product:
        return self._product

    @property
    def line_total(self):
        return self._product.price * self.quantity


@ordering.aggregate
class Cart:
    _items = PrivateAttr(default_factory=list)
    _clock = PrivateAttr(default_factory=SystemClock)

    # -------------------------------------------------------------------
    # Factory
    # -------------------------------------------------------------------
    @classmethod
    def create(cls, clock: Clock | None = None) -> "Cart":
        """Start an empty cart that reads the current date from ``clock``."""
        cart = cls()
        if clock is not None:
            cart._clock = clock
        return cart

    # -------------------------------------------------------------------
    # Contents
    # -------------------------------------------------------------------
    @property
    def items(self) -> tuple[CartItem, ...]:
        return tuple(self._items)

    def __iter__(self):
        return iter(tuple(self._items))

    def __len__(self) -> int:
        return len(self._items)

    def is_empty(self) -> bool:
        return not self._items

    # -------------------------------------------------------------------
    # Item management
    # -------------------------------------------------------------------
    def add(self, product: Product, quantity: int) -> CartItem:
        """Append ``quantity`` units of ``product`` to the cart."""
        if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity <= 0:
            raise InvalidInputError({"quantity": [f"Quantity must be a positive integer, got {quantity!r}"]})

        if not product.has_stock_for(quantity):
            raise OutOfStockError(
                {"quantity": [f"Not enough stock for {product.name}: {product.quantity} available, {quantity} requested"]}
            )

        if product.is_expired(self._clock.today()):
            raise ExpiredProductError({"product": [f"{product.name} is expired"]})

        item = CartItem(product_id=str(product.id), quantity=quantity)
        item._product = product
        self._items.append(item)

        self.raise_(
            CartItemAdded(
                cart_id=str(self.id),
                item_id=str(item.id),
                product_id=str(product.id),
                name=product.name,
                quantity=quantity,
            )
        )
        return item
