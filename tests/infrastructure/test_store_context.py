"""Two store contexts on one hub, as two open tabs on the same store."""

import pytest

from storefront.application.order_alert import ALERT_MESSAGE
from storefront.domain.model.cart import Cart
from storefront.domain.model.role import Role
from storefront.infrastructure.bootstrap import StoreContext
from storefront.infrastructure.config import Settings
from storefront.infrastructure.sync.local_broadcast import LocalBroadcastHub
from tests.fakes import FakeClock


@pytest.fixture
def tabs(tmp_path):
    hub = LocalBroadcastHub()
    settings = Settings(data_dir=tmp_path)
    spoken: list[str] = []
    clock = FakeClock()
    customer = StoreContext(settings, hub, clock=clock).open()
    picker = StoreContext(settings, hub, role=Role.PICKER, speaker=spoken.append,
                          clock=clock).open()
    customer.initialize_store().handle()
    yield customer, picker, spoken
    customer.close()
    picker.close()


def _cart(*product_ids: str) -> Cart:
    cart = Cart()
    for product_id in product_ids:
        cart.add(product_id)
    return cart


def test_submitted_order_reaches_the_other_view(tabs):
    customer, picker, spoken = tabs
    customer.submit_order().handle(_cart("p1", "p1", "p1"), "C-TEST01")

    stored = customer.order_repo.list_all()
    assert picker.view.orders == stored
    assert picker.view.orders[0] is not stored[0]
    assert spoken == [ALERT_MESSAGE]


def test_sender_view_is_not_notified(tabs):
    customer, picker, _ = tabs
    customer.submit_order().handle(_cart("p1"), "C-TEST01")
    assert customer.view.orders == []


def test_product_changes_reach_the_other_view(tabs):
    customer, picker, _ = tabs
    picker.delete_product().handle("p5")
    assert [p.id for p in customer.view.products] == ["p1", "p2", "p3", "p4"]


def test_customer_view_does_not_alert(tabs):
    customer, picker, spoken = tabs
    picker.sign_in(Role.CUSTOMER)
    customer.submit_order().handle(_cart("p2"), "C-TEST01")
    assert spoken == []
    assert len(picker.view.orders) == 1


def test_closed_view_stops_receiving(tabs):
    customer, picker, _ = tabs
    picker.close()
    customer.submit_order().handle(_cart("p1"), "C-TEST01")
    assert picker.view.orders == []


def test_separate_hubs_do_not_share(tmp_path):
    settings = Settings(data_dir=tmp_path)
    with StoreContext(settings, LocalBroadcastHub()) as first, \
            StoreContext(settings, LocalBroadcastHub(), role=Role.CASHIER) as second:
        first.initialize_store().handle()
        first.submit_order().handle(_cart("p1"), "C-TEST01")
        assert second.view.orders == []
