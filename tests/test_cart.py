"""
Cart store tests

Exercise the cart directly against the in-memory store: merge semantics,
validation, removal and the derived totals.
"""
from datetime import timedelta

import pytest

from storefront.core.errors import InvalidArgument, NotFound
from storefront.database.carts import MAX_QUANTITY


def _expected_total(store, cart):
    prices = {p.id: p.price for p in store.products.list_products()}
    return round(sum(prices[line.product_id] * line.quantity for line in cart.items), 2)


class TestAddItem:

    def test_adding_same_product_merges_into_one_line(self, store):
        """
        Adding product "1" with quantities 1 and 2 gives one line of 3.
        """
        # Act
        first = store.carts.add_item("1", 1)
        second = store.carts.add_item("1", 2)
        cart = store.carts.list_cart()

        # Assert
        assert first.created is True
        assert second.created is False
        assert first.line_id == second.line_id
        assert len(cart.items) == 1
        assert cart.items[0].quantity == 3
        assert cart.total == 299.97
        assert cart.item_count == 3

    def test_default_quantity_is_one(self, store):
        store.carts.add_item("5")

        cart = store.carts.list_cart()
        assert cart.items[0].quantity == 1
        assert cart.total == 19.99

    def test_line_is_joined_with_product_data(self, store):
        result = store.carts.add_item("2", 1)

        line = store.carts.list_cart().items[0]
        assert line.id == result.line_id
        assert line.product_id == "2"
        assert line.name == "Smart Watch"
        assert line.price == 199.99
        assert line.image.startswith("https://")
        assert line.added_at is not None

    @pytest.mark.parametrize("quantity", [0, -1])
    def test_non_positive_quantity_is_rejected(self, store, quantity):
        with pytest.raises(InvalidArgument):
            store.carts.add_item("1", quantity)

        assert store.carts.list_cart().items == []

    @pytest.mark.parametrize("product_id", [None, ""])
    def test_missing_product_id_is_rejected(self, store, product_id):
        with pytest.raises(InvalidArgument) as exc_info:
            store.carts.add_item(product_id, 1)

        assert exc_info.value.message == "Product ID is required"

    def test_unknown_product_is_not_found(self, store):
        with pytest.raises(NotFound) as exc_info:
            store.carts.add_item("999", 1)

        assert exc_info.value.message == "Product not found"
        assert store.carts.list_cart().items == []

    def test_no_upper_bound_on_merged_quantity(self, store):
        store.carts.add_item("6", 500)
        store.carts.add_item("6", 700)

        assert store.carts.list_cart().item_count == 1200

    def test_quantity_beyond_column_range_is_rejected(self, store):
        with pytest.raises(InvalidArgument) as exc_info:
            store.carts.add_item("1", 10**20)

        assert exc_info.value.message == "Quantity is too large"
        assert store.carts.list_cart().items == []

    def test_largest_storable_quantity_is_accepted(self, store):
        store.carts.add_item("1", MAX_QUANTITY)

        assert store.carts.list_cart().item_count == MAX_QUANTITY

    def test_merge_beyond_column_range_keeps_line(self, store):
        """
        Two adds that each fit but together overflow leave the first line as it was.
        """
        store.carts.add_item("1", 2**62)

        with pytest.raises(InvalidArgument):
            store.carts.add_item("1", 2**62)

        cart = store.carts.list_cart()
        assert len(cart.items) == 1
        assert cart.items[0].quantity == 2**62

    def test_added_at_is_utc_aware(self, store):
        store.carts.add_item("1")

        added_at = store.carts.list_cart().items[0].added_at
        assert added_at.tzinfo is not None
        assert added_at.utcoffset() == timedelta(0)


class TestRemoveItem:

    def test_remove_deletes_whole_line(self, store):
        result = store.carts.add_item("3", 4)

        store.carts.remove_item(result.line_id)

        cart = store.carts.list_cart()
        assert cart.items == []
        assert cart.item_count == 0

    def test_remove_unknown_line_leaves_cart_unchanged(self, store):
        store.carts.add_item("1", 2)
        before = store.carts.list_cart()

        with pytest.raises(NotFound) as exc_info:
            store.carts.remove_item("no-such-line")

        assert exc_info.value.message == "Cart item not found"
        after = store.carts.list_cart()
        assert after.items == before.items
        assert after.total == before.total

    def test_remove_one_line_preserves_others(self, store):
        keep = store.carts.add_item("7", 1)
        drop = store.carts.add_item("8", 1)

        store.carts.remove_item(drop.line_id)

        cart = store.carts.list_cart()
        assert [line.id for line in cart.items] == [keep.line_id]


class TestCartTotals:

    def test_empty_cart_is_not_an_error(self, store):
        cart = store.carts.list_cart()

        assert cart.items == []
        assert cart.total == 0.0
        assert cart.item_count == 0

    def test_totals_follow_adds_and_removes(self, store):
        store.carts.add_item("1", 2)
        removed = store.carts.add_item("3", 1)
        store.carts.add_item("6", 4)
        store.carts.remove_item(removed.line_id)

        cart = store.carts.list_cart()

        assert cart.total == 259.94
        assert cart.total == _expected_total(store, cart)
        assert cart.item_count == 6
        assert cart.item_count == sum(line.quantity for line in cart.items)

    def test_total_is_rounded_to_cents(self, store):
        store.carts.add_item("5", 3)

        assert store.carts.list_cart().total == 59.97

    def test_totals_across_many_lines(self, store):
        for product_id, quantity in [("1", 1), ("2", 3), ("4", 2), ("5", 5), ("2", 1)]:
            store.carts.add_item(product_id, quantity)

        cart = store.carts.list_cart()

        assert len(cart.items) == 4
        assert cart.item_count == 12
        assert cart.total == _expected_total(store, cart)


class TestClear:

    def test_clear_removes_every_line(self, store):
        store.carts.add_item("1", 1)
        store.carts.add_item("2", 1)

        removed = store.carts.clear()

        assert removed == 2
        assert store.carts.list_cart().items == []

    def test_clear_on_empty_cart(self, store):
        assert store.carts.clear() == 0
