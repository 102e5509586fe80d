"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from pathlib import Path

from grocery.infrastructure.persistence.csv_order_repository import (
    CsvOrderRepository,
)

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
_DATA_DIR = Path(__file__).resolve().parents[3] / "data"

DEFAULT_ORDERS_FILE = _DATA_DIR / "orders.csv"


def order_repository(file_path: Path | None = None) -> CsvOrderRepository:
    return CsvOrderRepository(file_path or DEFAULT_ORDERS_FILE)
