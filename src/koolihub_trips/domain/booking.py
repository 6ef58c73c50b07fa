"""Passenger seat booking and its payment."""

import logging
from datetime import datetime
from enum import Enum
from typing import Literal

from pydantic import BaseModel, Field

from koolihub_trips.core.exceptions import StateError
from koolihub_trips.pricing.cancellation import utc_now
from koolihub_trips.trips_logging import log_booking_context

logger = logging.getLogger(__name__)


class BookingStatus(str, Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"
    COMPLETED = "completed"


class PaymentStatus(str, Enum):
    PENDING = "pending"
    PROCESSING = "processing"
    COMPLETED = "completed"
    FAILED = "failed"
    REFUNDED = "refunded"


class PaymentDetails(BaseModel):
    id: str
    booking_id: str
    payment_method: Literal["card", "upi", "wallet", "cash", "netbanking"]
    payment_provider: str | None = None
    amount: float = Field(ge=0)
    currency: str = "INR"
    booking_fee: float = Field(default=0.0, ge=0)
    total_amount: float = Field(ge=0)
    status: PaymentStatus = PaymentStatus.PENDING
    transaction_id: str | None = None
    paid_at: datetime | None = None
    refunded_at: datetime | None = None
    refund_amount: float | None = None


class Booking(BaseModel):
    """Seats reserved by one passenger on one trip."""

    id: str
    trip_id: str
    passenger_id: str
    seats_booked: int = Field(ge=1)
    total_price: float = Field(ge=0)
    booking_status: BookingStatus = BookingStatus.PENDING
    payment_status: PaymentStatus = PaymentStatus.PENDING
    pickup_location: str | None = None
    dropoff_location: str | None = None
    special_requests: str | None = None
    cancellation_reason: str | None = None
    cancelled_by: str | None = None
    cancelled_at: datetime | None = None
    payment: PaymentDetails | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def can_be_cancelled(self) -> bool:
        return self.booking_status in {BookingStatus.CONFIRMED, BookingStatus.PENDING}

    def is_eligible_for_refund(self) -> bool:
        return self.payment_status == PaymentStatus.COMPLETED and self.booking_status in {
            BookingStatus.CANCELLED,
            BookingStatus.PENDING,
        }

    def calculate_refund_amount(self, cancellation_hours_before_trip: float) -> float:
        """Refund under the booking's own policy: 90% from 24h out, 50% from 12h, else 0.

        Checkout uses pricing.calculate_refund instead, which follows the
        platform-wide tiers and keeps the platform fee.
        """
        if cancellation_hours_before_trip >= 24:
            return self.total_price * 0.9
        elif cancellation_hours_before_trip >= 12:
            return self.total_price * 0.5
        return 0.0

    def is_confirmed(self) -> bool:
        return self.booking_status == BookingStatus.CONFIRMED

    def is_paid(self) -> bool:
        return self.payment_status == PaymentStatus.COMPLETED

    def requires_payment(self) -> bool:
        return (
            self.booking_status == BookingStatus.PENDING
            and self.payment_status == PaymentStatus.PENDING
            and (self.payment is None or self.payment.payment_method != "cash")
        )

    def cancel(self, by: str, reason: str, at: datetime | None = None) -> None:
        """Cancel the booking with metadata.

        Raises:
            StateError: The booking is already cancelled or completed.
        """
        if not self.can_be_cancelled():
            raise StateError(
                f"Cannot cancel booking in state {self.booking_status.value}",
                details={"booking_id": self.id, "status": self.booking_status.value},
            )

        with log_booking_context(self.id, self.trip_id):
            logger.info(f"Booking cancelled by {by}: {reason}")

        self.booking_status = BookingStatus.CANCELLED
        self.cancelled_by = by
        self.cancellation_reason = reason
        self.cancelled_at = at or utc_now()
