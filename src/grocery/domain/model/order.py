"""Order entity, the core of the grocery domain.

An Order owns a mapping of product name -> unit price. Names are unique
keys; adding a name that is already present is refused rather than
overwriting the existing price.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Union

from grocery.domain.exceptions import ValidationError
from grocery.domain.model.value_objects import Money

PriceLike = Union[Money, str, int, float, Decimal]

# ---------------------------------------------------------------------------
# Constants for business rules
# ---------------------------------------------------------------------------
TAX_RATE = Decimal("0.075")


def _to_money(price: PriceLike) -> Money:
    if isinstance(price, Money):
        return price
    return Money.of(price)


@dataclass
class Order:
    """A grocery purchase: an id plus the products bought and their prices.

    ``id`` is fixed once the order exists. ``products`` is mutated in place
    through ``add_product`` / ``remove_product``, which report success as a
    boolean instead of raising.
    """

    id: int
    products: dict[str, Money] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if isinstance(self.id, bool) or not isinstance(self.id, int):
            raise ValidationError(
                f"Order id must be an integer, got {type(self.id).__name__}"
            )

    def __setattr__(self, name: str, value: object) -> None:
        if name == "id" and "id" in self.__dict__:
            raise AttributeError("Order id cannot be changed once assigned")
        if name == "products":
            # Copied so the caller's mapping is never aliased.
            value = {
                product: _to_money(price) for product, price in dict(value).items()
            }
        super().__setattr__(name, value)

    # --- Mutations ------------------------------------------------------------

    def add_product(self, name: str, price: PriceLike) -> bool:
        """Add *name* at *price*.

        Returns False (and leaves the existing price alone) if the product
        is already on the order.
        """
        if name in self.products:
            return False
        self.products[name] = _to_money(price)
        return True

    def remove_product(self, name: str) -> bool:
        """Remove *name*; returns False if it was not on the order."""
        if name not in self.products:
            return False
        del self.products[name]
        return True

    def has_product(self, name: str) -> bool:
        return name in self.products

    # --- Computed properties --------------------------------------------------

    @property
    def subtotal(self) -> Money:
        result = Money.zero()
        for price in self.products.values():
            result = result + price
        return result

    @property
    def tax(self) -> Money:
        return self.subtotal.apply_rate(TAX_RATE)

    @property
    def total(self) -> Money:
        """Subtotal plus 7.5% tax, the tax rounded to cents first."""
        subtotal = self.subtotal
        return subtotal + subtotal.apply_rate(TAX_RATE)
