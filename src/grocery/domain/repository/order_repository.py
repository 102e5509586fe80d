"""Abstract repository for the Order entity.

Defined in the domain layer so the domain never depends on
infrastructure. The CSV-backed implementation lives in the
infrastructure layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from grocery.domain.model.order import Order
from grocery.domain.model.value_objects import Money


class OrderRepository(ABC):

    @abstractmethod
    def list_all(self) -> list[Order]:
        """Return every order, in source order."""

    @abstractmethod
    def get_by_id(self, order_id: int) -> Order | None:
        """Return the first order with this ID, or None if not found."""

    def find(self, order_id: int) -> dict[str, Money] | None:
        """Return the products of the order with this ID, or None."""
        order = self.get_by_id(order_id)
        if order is None:
            return None
        return order.products
