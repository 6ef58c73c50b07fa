from typing import Literal

import pytz
from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class PricingSettings(BaseSettings):
    platform_fee_percentage: float = Field(default=5.0, ge=0.0, le=100.0)
    min_platform_fee: float = Field(default=10.0, ge=0.0)
    max_platform_fee: float = Field(default=100.0, ge=0.0)
    gst_percentage: float = Field(default=18.0, ge=0.0, le=100.0)
    currency: str = Field(default="INR", min_length=3, max_length=3)

    default_booking_deadline_hours: float = Field(
        default=2.0,
        ge=0.0,
        le=72.0,
        description="Hours before departure after which new bookings are refused",
    )
    imminent_departure_hours: float = Field(
        default=4.0,
        ge=0.0,
        le=48.0,
        description="Bookings closer than this to departure get a warning",
    )

    model_config = SettingsConfigDict(env_prefix="PRICING_")

    @model_validator(mode="after")
    def validate_fee_bounds(self) -> "PricingSettings":
        if self.min_platform_fee > self.max_platform_fee:
            raise ValueError(
                f"Minimum platform fee ({self.min_platform_fee}) exceeds "
                f"maximum platform fee ({self.max_platform_fee})"
            )
        return self


class SearchSettings(BaseSettings):
    """Trip search radius and fuzzy matching configuration."""

    default_radius_km: float = Field(default=5.0, gt=0.0)
    max_radius_km: float = Field(default=50.0, gt=0.0)
    fuzzy_match_threshold: float = Field(default=0.75, ge=0.0, le=1.0)
    min_search_length: int = Field(default=2, ge=1)
    max_candidates: int = Field(
        default=500,
        ge=1,
        description="Maximum number of candidate trips examined per search",
    )
    timezone: str = Field(
        default="Asia/Kolkata",
        description="Timezone in which a searched date is compared with departures",
    )

    model_config = SettingsConfigDict(env_prefix="SEARCH_")

    @field_validator("timezone")
    @classmethod
    def validate_timezone(cls, v: str) -> str:
        try:
            pytz.timezone(v)
        except pytz.UnknownTimeZoneError as e:
            raise ValueError(f"Unknown timezone: {v}") from e
        return v

    @model_validator(mode="after")
    def validate_radius(self) -> "SearchSettings":
        if self.default_radius_km > self.max_radius_km:
            raise ValueError(
                f"Default radius ({self.default_radius_km} km) exceeds "
                f"max radius ({self.max_radius_km} km)"
            )
        return self


class LoggingSettings(BaseSettings):
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    format: Literal["text", "json"] = "text"
    environment: str = "development"

    model_config = SettingsConfigDict(env_prefix="LOG_")


class Settings(BaseSettings):
    pricing: PricingSettings = Field(default_factory=PricingSettings)
    search: SearchSettings = Field(default_factory=SearchSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    model_config = SettingsConfigDict(
        env_nested_delimiter="__",
        case_sensitive=False,
    )


def get_settings() -> Settings:
    """Load and validate settings from environment variables."""
    return Settings()
