"""Tests for the cart manager."""

import pytest

from growcery.exceptions import InsufficientStock, InvalidArgument, NotFound
from growcery.schemas.auth import Identity
from growcery.models.user import Role
from growcery.services.cart_service import CartService
from growcery.services.product_service import ProductService

from conftest import make_product


@pytest.fixture
def carts(db):
    return CartService(db)


@pytest.fixture
def tomato(db):
    return make_product(db, "Tomato", quantity=5, price=1.25)


def lines(carts, identity):
    return [(line.product_id, line.quantity) for line in carts.get_cart(identity).cart]


class TestAddItem:
    def test_adds_new_line_with_default_quantity(self, carts, customer, tomato):
        response = carts.add_item(customer, tomato.id)

        assert response.message == "Item added to cart successfully"
        assert lines(carts, customer) == [(tomato.id, 1)]

    def test_merges_repeated_product(self, carts, customer, tomato):
        carts.add_item(customer, tomato.id, 2)
        carts.add_item(customer, tomato.id, 3)

        assert lines(carts, customer) == [(tomato.id, 5)]

    def test_merged_total_is_checked_against_stock(self, carts, customer, tomato):
        carts.add_item(customer, tomato.id, 4)

        with pytest.raises(InsufficientStock) as exc_info:
            carts.add_item(customer, tomato.id, 2)

        assert exc_info.value.requested == 6
        assert exc_info.value.available == 5
        assert lines(carts, customer) == [(tomato.id, 4)]

    def test_quantity_above_stock(self, carts, customer, tomato):
        with pytest.raises(InsufficientStock):
            carts.add_item(customer, tomato.id, 6)
        assert lines(carts, customer) == []

    def test_unknown_product(self, carts, customer):
        with pytest.raises(NotFound):
            carts.add_item(customer, 404, 1)

    def test_carts_are_per_user(self, db, carts, customer, tomato):
        from conftest import make_user

        other = make_user(db, "other@example.com")
        carts.add_item(customer, tomato.id, 2)
        carts.add_item(other, tomato.id, 5)

        assert lines(carts, customer) == [(tomato.id, 2)]
        assert lines(carts, other) == [(tomato.id, 5)]

    def test_unknown_user(self, carts, tomato):
        ghost = Identity(id=999, email="ghost@example.com", role=Role.CUSTOMER)
        with pytest.raises(NotFound):
            carts.add_item(ghost, tomato.id, 1)


class TestUpdateItem:
    def test_overwrites_quantity(self, carts, customer, tomato):
        carts.add_item(customer, tomato.id, 1)

        response = carts.update_item(customer, tomato.id, 4)

        assert [line.quantity for line in response.cart] == [4]

    @pytest.mark.parametrize("quantity", [0, -3])
    def test_quantity_below_one(self, carts, customer, tomato, quantity):
        carts.add_item(customer, tomato.id, 1)
        with pytest.raises(InvalidArgument):
            carts.update_item(customer, tomato.id, quantity)

    def test_product_not_in_cart(self, carts, customer, tomato):
        with pytest.raises(NotFound, match="not found in cart"):
            carts.update_item(customer, tomato.id, 1)

    def test_quantity_above_stock(self, carts, customer, tomato):
        carts.add_item(customer, tomato.id, 1)
        with pytest.raises(InsufficientStock):
            carts.update_item(customer, tomato.id, 9)
        assert lines(carts, customer) == [(tomato.id, 1)]


class TestRemoveAndClear:
    def test_remove_is_idempotent(self, db, carts, customer, tomato):
        other = make_product(db, "Cabbage", quantity=3, price=2.0)
        carts.add_item(customer, tomato.id, 1)
        carts.add_item(customer, other.id, 1)

        carts.remove_item(customer, tomato.id)
        carts.remove_item(customer, tomato.id)

        assert lines(carts, customer) == [(other.id, 1)]

    def test_clear(self, carts, customer, tomato):
        carts.add_item(customer, tomato.id, 2)
        carts.clear(customer)
        assert lines(carts, customer) == []


class TestGetCart:
    def test_resolves_products(self, carts, customer, tomato):
        carts.add_item(customer, tomato.id, 2)

        line = carts.get_cart(customer).cart[0]
        assert line.product.name == "Tomato"
        assert line.product.price == 1.25

    def test_deleted_product_resolves_to_none(self, db, carts, customer, tomato):
        carts.add_item(customer, tomato.id, 2)
        ProductService(db).delete_product(tomato.id)

        line = carts.get_cart(customer).cart[0]
        assert line.product_id == tomato.id
        assert line.product is None
