from unittest.mock import AsyncMock

import pytest

from koolihub_trips.core.exceptions import SeatAvailabilityError, TransientError
from koolihub_trips.pricing import SeatAvailability, check_seat_availability


@pytest.mark.unit
class TestCheckSeatAvailability:
    @pytest.mark.asyncio
    async def test_enough_seats(self):
        getter = AsyncMock(return_value=4)

        result = await check_seat_availability("trip-1", 2, getter)

        assert result == SeatAvailability(available=True, current_seats=4)
        getter.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_exact_seat_count_is_available(self):
        result = await check_seat_availability("trip-1", 2, AsyncMock(return_value=2))
        assert result.available is True

    @pytest.mark.asyncio
    async def test_seats_taken_since_page_load(self):
        result = await check_seat_availability("trip-1", 3, AsyncMock(return_value=1))

        assert result.available is False
        assert result.current_seats == 1

    @pytest.mark.asyncio
    async def test_getter_failure_is_wrapped(self):
        getter = AsyncMock(side_effect=ConnectionError("connection reset"))

        with pytest.raises(SeatAvailabilityError) as exc_info:
            await check_seat_availability("trip-7", 2, getter)

        err = exc_info.value
        assert isinstance(err, TransientError)
        assert err.details == {"trip_id": "trip-7", "requested_seats": 2}
        assert isinstance(err.__cause__, ConnectionError)

    @pytest.mark.asyncio
    async def test_plain_coroutine_getter(self):
        async def fetch_seats() -> int:
            return 5

        result = await check_seat_availability("trip-1", 5, fetch_seats)
        assert result.available is True
