"""Tiered cancellation policy and refund computation."""

import logging
from datetime import UTC, datetime

from pydantic import BaseModel, ConfigDict, Field

from koolihub_trips.utils.rounding import round_half_up

logger = logging.getLogger(__name__)

SECONDS_PER_HOUR = 3600


class CancellationPolicy(BaseModel):
    """Refund terms for cancellations made at least N hours before departure."""

    model_config = ConfigDict(frozen=True)

    hours_before_departure: float = Field(ge=0)
    refund_percentage: float = Field(ge=0, le=100)
    service_fee: float = Field(ge=0)
    description: str


# Ordered by descending threshold
CANCELLATION_POLICIES: tuple[CancellationPolicy, ...] = (
    CancellationPolicy(
        hours_before_departure=2,
        refund_percentage=100,
        service_fee=25,
        description="Full refund (minus ₹25 service fee)",
    ),
    CancellationPolicy(
        hours_before_departure=0.5,
        refund_percentage=50,
        service_fee=0,
        description="50% refund",
    ),
    CancellationPolicy(
        hours_before_departure=0,
        refund_percentage=0,
        service_fee=0,
        description="No refund",
    ),
)

NO_REFUND_POLICY = CANCELLATION_POLICIES[-1]


class RefundCalculation(BaseModel):
    is_eligible: bool
    original_amount: float
    refund_percentage: float
    service_fee: float
    refund_amount: float
    reason: str
    policy: CancellationPolicy


def utc_now() -> datetime:
    return datetime.now(UTC)


def as_utc(moment: datetime) -> datetime:
    """Treat naive datetimes as UTC so they compare with aware ones."""
    if moment.tzinfo is None:
        return moment.replace(tzinfo=UTC)
    return moment


def hours_until(departure_time: datetime, now: datetime | None = None) -> float:
    """Hours from now until departure; negative once the trip has left."""
    now = as_utc(now) if now is not None else utc_now()
    return (as_utc(departure_time) - now).total_seconds() / SECONDS_PER_HOUR


def get_cancellation_policy(hours_before_departure: float) -> CancellationPolicy:
    if hours_before_departure >= 2:
        return CANCELLATION_POLICIES[0]
    elif hours_before_departure >= 0.5:
        return CANCELLATION_POLICIES[1]
    return NO_REFUND_POLICY


def calculate_refund(
    departure_time: datetime,
    total_amount: float,
    platform_fee: float = 0.0,
    *,
    now: datetime | None = None,
) -> RefundCalculation:
    """Refund owed when a booking is cancelled at `now`.

    The platform fee is never refunded. The matching policy's percentage
    applies to the rest of the amount, then its service fee is deducted,
    flooring at zero.

    Args:
        departure_time: Scheduled departure of the trip
        total_amount: Amount the passenger paid
        platform_fee: Non-refundable part of total_amount
        now: Cancellation time, defaults to the current UTC time

    Returns:
        RefundCalculation; is_eligible is False for departed trips and for
        refunds that come out at zero
    """
    hours_before_departure = hours_until(departure_time, now)

    if hours_before_departure < 0:
        logger.debug(
            f"Refund refused: departure was {-hours_before_departure:.2f}h ago"
        )
        return RefundCalculation(
            is_eligible=False,
            original_amount=total_amount,
            refund_percentage=0,
            service_fee=0,
            refund_amount=0,
            reason="Cannot cancel past trips",
            policy=NO_REFUND_POLICY,
        )

    policy = get_cancellation_policy(hours_before_departure)

    refundable_amount = total_amount - platform_fee
    refund_amount = refundable_amount * policy.refund_percentage / 100

    if policy.service_fee > 0:
        refund_amount = max(0.0, refund_amount - policy.service_fee)

    logger.debug(
        f"Refund computed {hours_before_departure:.2f}h before departure: "
        f"{policy.description} -> {refund_amount:.2f}"
    )

    return RefundCalculation(
        is_eligible=refund_amount > 0,
        original_amount=total_amount,
        refund_percentage=policy.refund_percentage,
        service_fee=policy.service_fee,
        refund_amount=round_half_up(refund_amount),
        reason=policy.description,
        policy=policy,
    )
