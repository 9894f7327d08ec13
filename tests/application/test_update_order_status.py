"""Integration tests for UpdateOrderStatus and the ActionDispatcher."""

import logging
from datetime import timedelta

import pytest

from storefront.application.dispatch_action import ActionDispatcher
from storefront.application.sync import SyncTopic
from storefront.application.update_order_status import UpdateOrderStatusHandler
from storefront.domain.exceptions import ValidationError
from storefront.domain.model.order import Order, OrderItem, OrderStatus
from storefront.domain.model.role import Role
from storefront.domain.model.value_objects import Money, Quantity
from tests.fakes import FakeClock, FakeOrderRepository, RecordingSynchronizer


def _order(order_id: str = "ORDER0001", status: OrderStatus = OrderStatus.PENDING,
           clock: FakeClock | None = None) -> Order:
    item = OrderItem("p1", "Fuji Apples", Quantity(2), Money.of("8.5"))
    order = Order.create(order_id, "C-ABC123", [item], now=(clock or FakeClock())())
    order.status = status
    return order


def _setup(*orders: Order):
    clock = FakeClock()
    order_repo = FakeOrderRepository(list(orders))
    sync = RecordingSynchronizer()
    handler = UpdateOrderStatusHandler(order_repo, sync, clock=clock)
    return handler, order_repo, sync, clock


class TestUpdateOrderStatus:

    def test_transition_updates_status_and_timestamp(self):
        handler, order_repo, _, clock = _setup(_order())
        created = order_repo.get_by_id("ORDER0001").created_at
        clock.advance(60)

        handler.handle("ORDER0001", OrderStatus.PICKING_DONE)

        saved = order_repo.get_by_id("ORDER0001")
        assert saved.status == OrderStatus.PICKING_DONE
        assert saved.updated_at == created + timedelta(seconds=60)
        assert saved.created_at == created
        assert saved.total_amount == Money.of("17.0")

    def test_broadcasts_order_collection(self):
        handler, _, sync, _ = _setup(_order("A"), _order("B"))
        handler.handle("A", OrderStatus.PICKING_DONE)
        assert len(sync.sent) == 1
        assert sync.sent[0].topic is SyncTopic.ORDERS_UPDATED
        assert {o.id for o in sync.sent[0].payload} == {"A", "B"}

    def test_missing_order_is_logged_noop(self, caplog):
        handler, _, sync, _ = _setup()
        with caplog.at_level(logging.WARNING, logger="storefront"):
            result = handler.handle("GONE", OrderStatus.PICKING_DONE)
        assert result is None
        assert sync.sent == []
        assert "GONE not found" in caplog.text

    def test_second_identical_call_only_bumps_timestamp(self):
        handler, order_repo, sync, clock = _setup(_order())
        handler.handle("ORDER0001", OrderStatus.PICKING_DONE)
        first = order_repo.get_by_id("ORDER0001").updated_at

        clock.advance(30)
        handler.handle("ORDER0001", OrderStatus.PICKING_DONE)

        saved = order_repo.get_by_id("ORDER0001")
        assert saved.status == OrderStatus.PICKING_DONE
        assert saved.updated_at == first + timedelta(seconds=30)
        assert len(sync.sent) == 2

    def test_illegal_transition_rejected_and_not_persisted(self):
        handler, order_repo, sync, _ = _setup(_order())
        with pytest.raises(ValidationError):
            handler.handle("ORDER0001", OrderStatus.COMPLETED)
        assert order_repo.get_by_id("ORDER0001").status == OrderStatus.PENDING
        assert sync.sent == []


class TestActionDispatcher:

    def _dispatcher(self, *orders: Order):
        handler, order_repo, sync, _ = _setup(*orders)
        return ActionDispatcher(order_repo, handler), order_repo, sync

    def test_picker_marks_picked(self):
        dispatcher, order_repo, _ = self._dispatcher(_order())
        dispatcher.dispatch("ORDER0001", Role.PICKER)
        assert order_repo.get_by_id("ORDER0001").status == OrderStatus.PICKING_DONE

    def test_full_lifecycle_as_cashier(self):
        dispatcher, order_repo, _ = self._dispatcher(_order())
        dispatcher.dispatch("ORDER0001", Role.CASHIER, OrderStatus.PICKING_DONE)
        dispatcher.dispatch("ORDER0001", Role.CASHIER, OrderStatus.COMPLETED)
        assert order_repo.get_by_id("ORDER0001").status == OrderStatus.COMPLETED

    def test_picker_cannot_complete(self):
        dispatcher, order_repo, sync = self._dispatcher(
            _order(status=OrderStatus.PICKING_DONE)
        )
        with pytest.raises(ValidationError, match="PICKER may not"):
            dispatcher.dispatch("ORDER0001", Role.PICKER, OrderStatus.COMPLETED)
        assert order_repo.get_by_id("ORDER0001").status == OrderStatus.PICKING_DONE
        assert sync.sent == []

    def test_customer_has_nothing_to_do(self):
        dispatcher, _, _ = self._dispatcher(_order())
        with pytest.raises(ValidationError, match="No action available"):
            dispatcher.dispatch("ORDER0001", Role.CUSTOMER)

    def test_completed_order_offers_nothing(self):
        dispatcher, _, _ = self._dispatcher(_order(status=OrderStatus.COMPLETED))
        with pytest.raises(ValidationError):
            dispatcher.dispatch("ORDER0001", Role.CASHIER)

    def test_vanished_order_is_noop(self):
        dispatcher, _, sync = self._dispatcher()
        assert dispatcher.dispatch("GONE", Role.CASHIER) is None
        assert sync.sent == []
