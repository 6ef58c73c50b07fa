"""Seat booking price breakdown: base fare, platform fee, GST, tolls and discount."""

from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field

from koolihub_trips.utils.rounding import round_half_up

if TYPE_CHECKING:
    from koolihub_trips.settings import PricingSettings


class PlatformFeeConfig(BaseModel):
    """Platform fee rules applied to every seat booking."""

    model_config = ConfigDict(frozen=True)

    percentage: float = Field(default=5.0, ge=0)
    min_fee: float = Field(default=10.0, ge=0)
    max_fee: float = Field(default=100.0, ge=0)
    gst_percentage: float = Field(default=18.0, ge=0)
    currency: str = "INR"

    @classmethod
    def from_settings(cls, settings: "PricingSettings") -> "PlatformFeeConfig":
        return cls(
            percentage=settings.platform_fee_percentage,
            min_fee=settings.min_platform_fee,
            max_fee=settings.max_platform_fee,
            gst_percentage=settings.gst_percentage,
            currency=settings.currency,
        )


PLATFORM_FEE_CONFIG = PlatformFeeConfig()


class TripPricingInput(BaseModel):
    """Pricing fields read off a trip record for a single booking."""

    price_per_seat: float = Field(ge=0)
    seats_booked: int = Field(ge=1)
    toll_charges: float = Field(default=0.0, ge=0)
    discount_amount: float = Field(default=0.0, ge=0)


class BookingPriceBreakdown(BaseModel):
    """Detailed breakdown of a seat booking price.

    total_amount is not clamped and goes negative when the discount exceeds
    everything else; see validate_price_breakdown.
    """

    base_fare: float
    seats_booked: int
    price_per_seat: float
    platform_fee: float
    gst: float
    toll_charges: float
    discount_amount: float
    total_amount: float
    currency: str = "INR"


def calculate_platform_fee(
    base_fare: float, config: PlatformFeeConfig = PLATFORM_FEE_CONFIG
) -> float:
    """Percentage of the base fare, clamped to [min_fee, max_fee]."""
    percentage_fee = base_fare * config.percentage / 100
    fee = max(config.min_fee, min(config.max_fee, percentage_fee))
    return round_half_up(fee)


def calculate_gst(
    platform_fee: float, config: PlatformFeeConfig = PLATFORM_FEE_CONFIG
) -> float:
    """GST is charged on the platform fee only."""
    return round_half_up(platform_fee * config.gst_percentage / 100)


def calculate_booking_price(
    price_per_seat: float,
    seats_booked: int,
    toll_charges: float = 0.0,
    discount_amount: float = 0.0,
    config: PlatformFeeConfig = PLATFORM_FEE_CONFIG,
) -> BookingPriceBreakdown:
    base_fare = price_per_seat * seats_booked

    # Split per seat then recombined; equal to toll_charges until tolls are
    # allocated to a subset of the booked seats.
    toll_per_seat = toll_charges / seats_booked if toll_charges > 0 else 0.0
    total_toll = toll_per_seat * seats_booked

    platform_fee = calculate_platform_fee(base_fare, config)
    gst = calculate_gst(platform_fee, config)

    total_amount = base_fare + platform_fee + gst + total_toll - discount_amount

    return BookingPriceBreakdown(
        base_fare=base_fare,
        seats_booked=seats_booked,
        price_per_seat=price_per_seat,
        platform_fee=platform_fee,
        gst=gst,
        toll_charges=total_toll,
        discount_amount=discount_amount,
        total_amount=round_half_up(total_amount),
        currency=config.currency,
    )


def price_booking(
    pricing: TripPricingInput, config: PlatformFeeConfig = PLATFORM_FEE_CONFIG
) -> BookingPriceBreakdown:
    """Price a validated pricing input."""
    return calculate_booking_price(
        pricing.price_per_seat,
        pricing.seats_booked,
        pricing.toll_charges,
        pricing.discount_amount,
        config,
    )
