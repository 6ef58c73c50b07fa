from datetime import UTC, datetime
from typing import TYPE_CHECKING

import pytest

from koolihub_trips.trips_logging import LogContext
from tests.factories import FIXED_NOW, TripFactory
from tests.faker_providers import create_faker_instance

if TYPE_CHECKING:
    from faker.proxy import Faker


@pytest.fixture
def now() -> datetime:
    """Fixed clock for deadline and refund tests."""
    return FIXED_NOW.replace(tzinfo=UTC)


@pytest.fixture
def fake() -> "Faker":
    """Seeded Faker instance for deterministic test data."""
    return create_faker_instance(seed=42)


@pytest.fixture
def trip_factory() -> TripFactory:
    """Factory for trips, bookings and vehicles with seeded Faker."""
    return TripFactory(seed=42)


@pytest.fixture(autouse=True)
def clear_log_context():
    """Keep thread-local log context from leaking between tests."""
    LogContext.clear()
    yield
    LogContext.clear()
