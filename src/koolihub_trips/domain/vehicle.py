"""Driver vehicle and the checks gating trip publication."""

from datetime import datetime, timedelta
from typing import Literal

from pydantic import BaseModel, Field

from koolihub_trips.pricing.cancellation import as_utc, utc_now

DocumentType = Literal["registration", "insurance", "pollution", "permit"]


class VehiclePhoto(BaseModel):
    id: str
    vehicle_id: str
    photo_url: str
    is_primary: bool = False
    display_order: int = 0
    created_at: datetime | None = None


class VehicleDocument(BaseModel):
    id: str
    vehicle_id: str
    document_type: DocumentType
    document_url: str
    document_number: str | None = None
    issue_date: datetime | None = None
    expiry_date: datetime | None = None
    verification_status: Literal["pending", "verified", "rejected", "expired"] = "pending"
    rejection_reason: str | None = None
    verified_at: datetime | None = None
    verified_by: str | None = None


class Vehicle(BaseModel):
    id: str
    user_id: str
    vehicle_type: Literal["car", "auto", "bike"]
    make: str
    model: str
    year: int
    color: str
    license_plate: str
    vehicle_number: str | None = None
    seating_capacity: int = Field(ge=1)
    is_verified: bool = False
    verification_status: Literal["pending", "verified", "rejected"] = "pending"
    is_default: bool = False
    amenities: list[str] = Field(default_factory=list)
    insurance_expiry: datetime | None = None
    pollution_expiry: datetime | None = None
    last_service_date: datetime | None = None
    photos: list[VehiclePhoto] = Field(default_factory=list)
    documents: list[VehicleDocument] = Field(default_factory=list)

    def is_document_expiring_soon(self, days: int = 30, now: datetime | None = None) -> bool:
        """True if any verified document expires within `days`."""
        now = as_utc(now) if now is not None else utc_now()
        threshold = now + timedelta(days=days)
        return any(
            as_utc(doc.expiry_date) <= threshold
            for doc in self.documents
            if doc.expiry_date is not None and doc.verification_status == "verified"
        )

    def _has_verified(self, document_type: DocumentType) -> bool:
        return any(
            doc.document_type == document_type and doc.verification_status == "verified"
            for doc in self.documents
        )

    def can_publish_trips(self) -> bool:
        return (
            self.is_verified
            and self.verification_status == "verified"
            and len(self.photos) > 0
            and self._has_verified("registration")
            and self._has_verified("insurance")
        )

    @property
    def primary_photo(self) -> VehiclePhoto | None:
        for photo in self.photos:
            if photo.is_primary:
                return photo
        return self.photos[0] if self.photos else None

    @property
    def display_name(self) -> str:
        return f"{self.make} {self.model} ({self.year})"

    def has_amenity(self, amenity: str) -> bool:
        return amenity in self.amenities
