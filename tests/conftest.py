import os
from pathlib import Path

import pytest


def pytest_sessionstart(session):
    """Pytest hook to run before collecting tests.

    Runs the suite with test settings and logging configured, then initializes
    the domains and pushes the ordering domain context. Checkout spans all
    three domains, so tests outside a context of their own run under ordering.
    """
    os.environ["ENVIRONMENT"] = "test"
    os.environ.pop("SHIPPING_RATE_PER_KG", None)
    os.environ.pop("OUTPUT_CHANNEL", None)
    os.environ.pop("LOG_LEVEL", None)

    from shared.logging import configure_logging

    configure_logging()

    from catalogue.domain import catalogue
    from identity.domain import identity
    from ordering.domain import ordering

    catalogue.init()
    identity.init()
    ordering.init()
    ordering.domain_context().push()


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their directory location."""
    for item in items:
        test_path = Path(item.fspath)

        if "/domain/" in str(test_path):
            item.add_marker(pytest.mark.domain)
        elif "/application/" in str(test_path):
            item.add_marker(pytest.mark.application)
        elif "/bdd/" in str(test_path):
            item.add_marker(pytest.mark.bdd)


@pytest.fixture(autouse=True)
def run_around_tests():
    """Reset channel singletons after every test"""
    yield

    from notifications.channel import reset_channels

    reset_channels()
