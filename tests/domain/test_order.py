"""Unit tests for the Order entity and its business rules."""

from decimal import ROUND_HALF_UP, Decimal

import pytest

from grocery.domain.exceptions import ValidationError
from grocery.domain.model.order import TAX_RATE, Order
from grocery.domain.model.value_objects import Money


def _make_order(products: dict | None = None) -> Order:
    """Helper to build the usual two-product order."""
    if products is None:
        products = {"banana": 1.99, "cracker": 3.00}
    return Order(1337, products)


def _expected_total(prices: list[str]) -> Decimal:
    subtotal = sum((Decimal(p) for p in prices), Decimal("0"))
    tax = (subtotal * Decimal("0.075")).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    return subtotal + tax


class TestOrderCreation:

    def test_takes_id_and_empty_products(self):
        order = Order(1337, {})
        assert order.id == 1337
        assert len(order.products) == 0

    def test_products_default_to_empty(self):
        assert Order(7).products == {}

    def test_prices_are_coerced_to_money(self):
        order = _make_order()
        assert order.products == {"banana": Money.of("1.99"), "cracker": Money.of("3.00")}

    def test_money_prices_are_kept(self):
        price = Money.of("2.50")
        order = Order(1, {"salad": price})
        assert order.products["salad"] is price

    def test_caller_mapping_is_copied(self):
        products = {"banana": 1.99}
        order = Order(1, products)
        order.add_product("salad", 4.25)
        assert products == {"banana": 1.99}

    def test_reassigned_products_are_coerced(self):
        order = _make_order()
        replacement = {"apple": 1.50}
        order.products = replacement
        assert order.products == {"apple": Money.of("1.50")}
        assert order.total == Money.of("1.61")
        order.add_product("pear", 2)
        assert replacement == {"apple": 1.50}

    def test_reassigned_invalid_price_rejected(self):
        order = _make_order()
        with pytest.raises(ValidationError, match="Invalid money amount"):
            order.products = {"apple": "free"}

    def test_non_integer_id_rejected(self):
        with pytest.raises(ValidationError, match="must be an integer"):
            Order("1337", {})  # type: ignore[arg-type]

    def test_bool_id_rejected(self):
        with pytest.raises(ValidationError, match="must be an integer"):
            Order(True, {})

    def test_invalid_price_rejected(self):
        with pytest.raises(ValidationError, match="Invalid money amount"):
            Order(1, {"banana": "free"})

    def test_id_is_immutable(self):
        order = Order(1337, {})
        with pytest.raises(AttributeError, match="cannot be changed"):
            order.id = 42
        assert order.id == 1337


class TestOrderTotal:

    def test_total_includes_rounded_tax(self):
        # 4.99 + round(0.37425, 2) = 4.99 + 0.37
        assert _make_order().total == Money.of("5.36")

    def test_total_of_empty_order_is_zero(self):
        assert Order(1337, {}).total.amount == 0

    @pytest.mark.parametrize(
        "prices",
        [
            ["1.99", "3.00"],
            ["10.10"],
            ["0.01", "0.02", "0.03"],
            ["48.16", "19.40"],
            ["97.00", "42.12", "65.00"],
        ],
    )
    def test_total_is_subtotal_plus_rounded_tax(self, prices):
        order = Order(1, {f"item{i}": p for i, p in enumerate(prices)})
        assert order.total.amount == _expected_total(prices)

    def test_subtotal_and_tax(self):
        order = _make_order()
        assert order.subtotal == Money.of("4.99")
        assert order.tax == Money.of("0.37")
        assert order.subtotal + order.tax == order.total

    def test_tax_rate_is_seven_and_a_half_percent(self):
        assert TAX_RATE == Decimal("0.075")


class TestAddProduct:

    def test_increases_the_number_of_products(self):
        order = _make_order()
        order.add_product("salad", 4.25)
        assert len(order.products) == 3

    def test_is_added_to_the_collection(self):
        order = _make_order()
        order.add_product("sandwich", 4.25)
        assert "sandwich" in order.products
        assert order.products["sandwich"] == Money.of("4.25")
        assert order.has_product("sandwich")

    def test_returns_true_if_the_product_is_new(self):
        assert _make_order().add_product("salad", 4.25) is True

    def test_returns_false_if_the_product_is_already_present(self):
        order = _make_order()
        before_total = order.total

        result = order.add_product("banana", 4.25)

        assert result is False
        assert order.total == before_total

    def test_duplicate_does_not_update_price(self):
        order = _make_order()
        order.add_product("banana", 4.25)
        assert len(order.products) == 2
        assert order.products["banana"] == Money.of("1.99")


class TestRemoveProduct:

    def test_decreases_the_number_of_products(self):
        order = _make_order()
        order.remove_product("banana")
        assert len(order.products) == 1

    def test_removes_the_product_from_the_collection(self):
        order = _make_order()
        order.remove_product("banana")
        assert "banana" not in order.products
        assert not order.has_product("banana")

    def test_returns_true_if_removed(self):
        assert _make_order().remove_product("banana") is True

    def test_returns_false_if_not_in_the_collection(self):
        order = _make_order()
        assert order.remove_product("sandwich") is False
        assert order.products == {"banana": Money.of("1.99"), "cracker": Money.of("3.00")}
