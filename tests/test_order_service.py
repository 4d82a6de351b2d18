"""Tests for checkout and the order status lifecycle."""

import pytest

from growcery.exceptions import (
    EmptyCart,
    InsufficientStock,
    InvalidTransition,
    NotFound,
    ProductMissing,
)
from growcery.models.order import TIME_OF_DAY_FORMAT, OrderStatus
from growcery.repositories.product_repository import ProductRepository
from growcery.schemas.product import ProductUpdate
from growcery.services.cart_service import CartService
from growcery.services.order_service import OrderService
from growcery.services.product_service import ProductService

from conftest import make_product


def stock(db, product_id):
    product = ProductService(db).get_product_by_id(product_id)
    return product.quantity, product.quantity_sold


@pytest.fixture
def tomato(db):
    return make_product(db, "Tomato", quantity=10, price=2.5)


@pytest.fixture
def eggs(db):
    return make_product(db, "Eggs", quantity=6, price=4.0)


@pytest.fixture
def orders(db):
    return OrderService(db)


@pytest.fixture
def carts(db):
    return CartService(db)


class TestCheckout:
    def test_creates_pending_order_and_clears_cart(self, db, orders, carts, customer, tomato, eggs):
        carts.add_item(customer, tomato.id, 3)
        carts.add_item(customer, eggs.id, 2)

        order = orders.checkout(customer)

        assert order.status == OrderStatus.PENDING
        assert order.user_id == customer.id
        assert order.total_amount == 3 * 2.5 + 2 * 4.0
        assert [(i.product_id, i.quantity, i.unit_price) for i in order.items] == [
            (tomato.id, 3, 2.5),
            (eggs.id, 2, 4.0),
        ]
        assert order.time == order.created_at.strftime(TIME_OF_DAY_FORMAT)
        assert carts.get_cart(customer).cart == []
        # Stock is only committed on approval
        assert stock(db, tomato.id) == (10, 0)
        assert stock(db, eggs.id) == (6, 0)

    def test_empty_cart(self, orders, customer):
        with pytest.raises(EmptyCart):
            orders.checkout(customer)

    def test_insufficient_stock_leaves_cart_and_stock(self, db, orders, carts, customer, tomato):
        carts.add_item(customer, tomato.id, 5)
        ProductService(db).update_product(tomato.id, ProductUpdate(quantity=2))

        with pytest.raises(InsufficientStock) as exc_info:
            orders.checkout(customer)

        assert "Tomato" in exc_info.value.message
        assert exc_info.value.available == 2
        assert exc_info.value.requested == 5
        assert [line.quantity for line in carts.get_cart(customer).cart] == [5]
        assert stock(db, tomato.id) == (2, 0)
        assert orders.get_user_orders(customer).orders == []

    def test_deleted_product_in_cart(self, db, orders, carts, customer, tomato):
        carts.add_item(customer, tomato.id, 1)
        ProductService(db).delete_product(tomato.id)

        with pytest.raises(ProductMissing):
            orders.checkout(customer)
        assert len(carts.get_cart(customer).cart) == 1

    def test_unit_price_is_captured_at_checkout(self, db, orders, carts, customer, tomato):
        carts.add_item(customer, tomato.id, 4)
        order = orders.checkout(customer)

        ProductService(db).update_product(tomato.id, ProductUpdate(price=9.99))

        stored = orders.get_user_orders(customer).orders[0]
        assert stored.id == order.id
        assert stored.items[0].unit_price == 2.5
        assert stored.total_amount == 10.0
        assert stored.items[0].product.price == 9.99

    def test_orders_listed_newest_first(self, orders, carts, customer, tomato):
        carts.add_item(customer, tomato.id, 1)
        first = orders.checkout(customer)
        carts.add_item(customer, tomato.id, 2)
        second = orders.checkout(customer)

        listed = orders.get_user_orders(customer)
        assert [o.id for o in listed.orders] == [second.id, first.id]
        assert listed.total == 2
        assert [o.id for o in orders.get_all_orders().orders] == [second.id, first.id]


class TestStatusTransitions:
    @pytest.fixture
    def pending_order(self, orders, carts, customer, tomato, eggs):
        carts.add_item(customer, tomato.id, 3)
        carts.add_item(customer, eggs.id, 4)
        return orders.checkout(customer)

    def test_approve_moves_stock_to_sold(self, db, orders, pending_order, tomato, eggs):
        order = orders.update_order_status(pending_order.id, OrderStatus.APPROVED)

        assert order.status == OrderStatus.APPROVED
        assert stock(db, tomato.id) == (7, 3)
        assert stock(db, eggs.id) == (2, 4)

    def test_approve_with_insufficient_stock_changes_nothing(self, db, orders, pending_order, tomato, eggs):
        ProductService(db).update_product(eggs.id, ProductUpdate(quantity=3))

        with pytest.raises(InsufficientStock) as exc_info:
            orders.update_order_status(pending_order.id, OrderStatus.APPROVED)

        assert "Eggs" in exc_info.value.message
        assert stock(db, tomato.id) == (10, 0)
        assert stock(db, eggs.id) == (3, 0)
        listed = orders.get_all_orders().orders
        assert listed[0].status == OrderStatus.PENDING

    def test_approve_rolls_back_when_stock_is_taken_concurrently(self, db, orders, pending_order, tomato, eggs, monkeypatch):
        reserve_stock = ProductRepository.reserve_stock

        def reserve_all_eggs_first(repository, product_id, quantity):
            # Another approval consumed the eggs after the pre-check
            if product_id == eggs.id:
                quantity += 100
            return reserve_stock(repository, product_id, quantity)

        monkeypatch.setattr(ProductRepository, "reserve_stock", reserve_all_eggs_first)

        with pytest.raises(InsufficientStock) as exc_info:
            orders.update_order_status(pending_order.id, OrderStatus.APPROVED)

        assert "Eggs" in exc_info.value.message
        assert stock(db, tomato.id) == (10, 0)
        assert stock(db, eggs.id) == (6, 0)
        assert orders.get_all_orders().orders[0].status == OrderStatus.PENDING

    def test_approve_with_deleted_product(self, db, orders, pending_order, tomato, eggs):
        ProductService(db).delete_product(eggs.id)

        with pytest.raises(ProductMissing):
            orders.update_order_status(pending_order.id, OrderStatus.APPROVED)
        assert stock(db, tomato.id) == (10, 0)

    @pytest.mark.parametrize("target", [OrderStatus.PENDING, OrderStatus.CANCELED])
    def test_leaving_approved_restores_stock(self, db, orders, pending_order, tomato, eggs, target):
        orders.update_order_status(pending_order.id, OrderStatus.APPROVED)

        order = orders.update_order_status(pending_order.id, target)

        assert order.status == target
        assert stock(db, tomato.id) == (10, 0)
        assert stock(db, eggs.id) == (6, 0)

    def test_complete_keeps_stock_committed(self, db, orders, pending_order, tomato):
        orders.update_order_status(pending_order.id, OrderStatus.APPROVED)
        order = orders.update_order_status(pending_order.id, OrderStatus.COMPLETED)

        assert order.status == OrderStatus.COMPLETED
        assert stock(db, tomato.id) == (7, 3)

    def test_cancel_pending_does_not_touch_stock(self, db, orders, pending_order, tomato):
        order = orders.update_order_status(pending_order.id, OrderStatus.CANCELED)

        assert order.status == OrderStatus.CANCELED
        assert stock(db, tomato.id) == (10, 0)

    def test_same_status_is_not_reconciled_twice(self, db, orders, pending_order, tomato):
        orders.update_order_status(pending_order.id, OrderStatus.APPROVED)
        order = orders.update_order_status(pending_order.id, OrderStatus.APPROVED)

        assert order.status == OrderStatus.APPROVED
        assert stock(db, tomato.id) == (7, 3)

    @pytest.mark.parametrize("terminal", [OrderStatus.COMPLETED, OrderStatus.CANCELED])
    @pytest.mark.parametrize("target", [OrderStatus.PENDING, OrderStatus.APPROVED])
    def test_terminal_states_cannot_be_left(self, db, orders, pending_order, tomato, terminal, target):
        orders.update_order_status(pending_order.id, OrderStatus.APPROVED)
        orders.update_order_status(pending_order.id, terminal)
        before = stock(db, tomato.id)

        with pytest.raises(InvalidTransition):
            orders.update_order_status(pending_order.id, target)

        assert stock(db, tomato.id) == before
        assert orders.get_all_orders().orders[0].status == terminal

    def test_pending_cannot_jump_to_completed(self, orders, pending_order):
        with pytest.raises(InvalidTransition):
            orders.update_order_status(pending_order.id, OrderStatus.COMPLETED)

    def test_unknown_order(self, orders):
        with pytest.raises(NotFound):
            orders.update_order_status(999, OrderStatus.APPROVED)


class TestStockPrimitives:
    def test_reserve_refuses_to_go_negative(self, db, tomato):
        repository = ProductRepository(db)

        assert repository.reserve_stock(tomato.id, 11) is False
        db.commit()
        assert stock(db, tomato.id) == (10, 0)

        assert repository.reserve_stock(tomato.id, 10) is True
        db.commit()
        assert stock(db, tomato.id) == (0, 10)

    def test_release_missing_product(self, db):
        assert ProductRepository(db).release_stock(12345, 1) is False


def test_end_to_end_scenario(db, orders, carts, customer, tomato):
    carts.add_item(customer, tomato.id, 3)

    order = orders.checkout(customer)
    assert order.status == OrderStatus.PENDING
    assert order.total_amount == 3 * 2.5
    assert carts.get_cart(customer).cart == []
    assert stock(db, tomato.id) == (10, 0)

    orders.update_order_status(order.id, OrderStatus.APPROVED)
    assert stock(db, tomato.id) == (7, 3)

    orders.update_order_status(order.id, OrderStatus.CANCELED)
    assert stock(db, tomato.id) == (10, 0)
