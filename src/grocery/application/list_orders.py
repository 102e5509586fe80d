"""Application service: List Orders use case (query)."""

from __future__ import annotations

from grocery.application.dto import OrderDTO
from grocery.domain.repository.order_repository import OrderRepository


class ListOrdersHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self) -> list[OrderDTO]:
        """Return every order in source order."""
        return [OrderDTO.from_order(order) for order in self._order_repo.list_all()]
