"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data from the application layer to the CLI without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass

from grocery.domain.model.order import Order


@dataclass(frozen=True)
class ProductLineDTO:
    """Output: a single product as displayed to the user."""

    name: str
    price: str  # formatted, e.g. "$1.99"


@dataclass(frozen=True)
class OrderDTO:
    """Output: a complete order as displayed to the user."""

    id: int
    products: list[ProductLineDTO]
    subtotal: str
    tax: str
    total: str

    @staticmethod
    def from_order(order: Order) -> OrderDTO:
        return OrderDTO(
            id=order.id,
            products=[
                ProductLineDTO(name=name, price=str(price))
                for name, price in order.products.items()
            ],
            subtotal=str(order.subtotal),
            tax=str(order.tax),
            total=str(order.total),
        )
