"""CSV-file-backed, read-only implementation of OrderRepository.

Each row of the file is one order:

    <id>,<product>,<price>,<product>,<price>,...

The packed layout ``<id>,"<product>:<price>;<product>:<price>"`` is
accepted as well. Blank lines are skipped; any other malformed row aborts
the load with a ValidationError naming its line number.
"""

from __future__ import annotations

import csv
import logging
from pathlib import Path
from typing import Iterable, Sequence

from grocery.domain.exceptions import OrderSourceError, ValidationError
from grocery.domain.model.order import Order
from grocery.domain.model.value_objects import Money
from grocery.domain.repository.order_repository import OrderRepository

logger = logging.getLogger(__name__)

_PACKED_PAIR_SEP = ";"
_PACKED_PRICE_SEP = ":"


def rows_to_orders(rows: Iterable[Sequence[str]]) -> list[Order]:
    """Turn parsed CSV rows into Orders, one per non-blank row, in order.

    Rows are numbered from 1 in error messages, one line per row.
    """
    return _numbered_rows_to_orders(enumerate(rows, start=1))


def _numbered_rows_to_orders(
    numbered_rows: Iterable[tuple[int, Sequence[str]]],
) -> list[Order]:
    orders: list[Order] = []
    for line_no, row in numbered_rows:
        if not row or all(not field.strip() for field in row):
            continue
        orders.append(_row_to_order(row, line_no))
    return orders


def _row_to_order(row: Sequence[str], line_no: int) -> Order:
    id_field, *rest = row
    try:
        order_id = int(id_field.strip())
    except ValueError:
        raise _malformed(line_no, f"order id {id_field!r} is not an integer") from None

    if len(rest) == 1 and _PACKED_PRICE_SEP in rest[0]:
        pairs = _split_packed(rest[0], line_no)
    else:
        if len(rest) % 2 != 0:
            raise _malformed(line_no, "expected product/price pairs after the order id")
        pairs = list(zip(rest[0::2], rest[1::2]))

    products: dict[str, Money] = {}
    for raw_name, raw_price in pairs:
        name = raw_name.strip()
        if not name:
            raise _malformed(line_no, "product name is empty")
        if name in products:
            raise _malformed(line_no, f"product {name!r} appears more than once")
        try:
            products[name] = Money.of(raw_price)
        except ValidationError as exc:
            raise _malformed(line_no, str(exc)) from exc

    return Order(id=order_id, products=products)


def _split_packed(packed: str, line_no: int) -> list[tuple[str, str]]:
    """Split 'banana:1.99;cracker:3.00' into (name, price) pairs."""
    pairs: list[tuple[str, str]] = []
    for chunk in packed.split(_PACKED_PAIR_SEP):
        if not chunk.strip():
            continue
        if _PACKED_PRICE_SEP not in chunk:
            raise _malformed(line_no, f"expected 'product:price', got {chunk!r}")
        name, price = chunk.rsplit(_PACKED_PRICE_SEP, 1)
        pairs.append((name, price))
    return pairs


def _malformed(line_no: int, reason: str) -> ValidationError:
    logger.warning("Malformed order row at line %d: %s", line_no, reason)
    return ValidationError(f"Line {line_no}: {reason}")


class CsvOrderRepository(OrderRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = Path(file_path)

    @property
    def file_path(self) -> Path:
        return self._file_path

    # --- OrderRepository interface --------------------------------------------

    def list_all(self) -> list[Order]:
        orders = _numbered_rows_to_orders(self._read_rows())
        logger.debug("Loaded %d orders from %s", len(orders), self._file_path)
        return orders

    def get_by_id(self, order_id: int) -> Order | None:
        for order in self.list_all():
            if order.id == order_id:
                return order
        return None

    # --- File helpers ---------------------------------------------------------

    def _read_rows(self) -> list[tuple[int, list[str]]]:
        """Read every record, paired with the physical line it starts on."""
        if not self._file_path.is_file():
            raise OrderSourceError(f"Orders file not found: {self._file_path}")
        try:
            # utf-8-sig drops the byte-order mark spreadsheet exports prepend.
            with self._file_path.open(newline="", encoding="utf-8-sig") as fh:
                reader = csv.reader(fh)
                rows: list[tuple[int, list[str]]] = []
                last_line = 0
                for row in reader:
                    rows.append((last_line + 1, row))
                    last_line = reader.line_num
                return rows
        except (OSError, UnicodeDecodeError, csv.Error) as exc:
            raise OrderSourceError(
                f"Cannot read orders file {self._file_path}: {exc}"
            ) from exc
