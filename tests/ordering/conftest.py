from datetime import date, timedelta

import pytest
from catalogue.product.product import Product
from identity.customer.customer import Customer
from notifications.channel.fake_output import FakeOutputAdapter
from notifications.dispatch import NoticeDispatcher
from ordering.cart.cart import Cart
from ordering.checkout.checkout import CheckoutService
from protean.integrations.pytest import DomainFixture
from shared.clock import FixedClock

TODAY = date(2026, 10, 19)


@pytest.fixture(scope="session")
def ordering_bed():
    from ordering.domain import ordering

    bed = DomainFixture(ordering)
    bed.setup()
    yield bed
    bed.teardown()


@pytest.fixture(autouse=True)
def _ctx(ordering_bed):
    with ordering_bed.domain_context():
        yield


@pytest.fixture
def today():
    return TODAY


@pytest.fixture
def clock(today):
    return FixedClock(today)


@pytest.fixture
def cheese():
    return Product.create("Cheese", 100, 10, TODAY + timedelta(days=7), True, 0.4)


@pytest.fixture
def tv():
    return Product.create("TV", 5000, 3, None, True, 15.0)


@pytest.fixture
def scratch_card():
    return Product.create("ScratchCard", 50, 20, None, False, 0.0)


@pytest.fixture
def customer():
    return Customer.create("John", 10000)


@pytest.fixture
def cart(clock):
    return Cart.create(clock=clock)


@pytest.fixture
def output():
    return FakeOutputAdapter()


@pytest.fixture
def service(output):
    return CheckoutService(dispatcher=NoticeDispatcher(channel=output))
