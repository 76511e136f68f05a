"""
Parcel Pydantic schemas.

Defines the record types passed into and returned from the parcel store.
"""

from datetime import datetime, timezone
from pydantic import BaseModel, Field
from tracker.app.models.parcel_enums import ParcelStatus


def utc_timestamp() -> str:
    """Current UTC time as an RFC3339 string with second precision."""
    return datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")


class ParcelCreate(BaseModel):
    """Schema for creating a new parcel. The number is assigned on insert."""
    client: int = Field(..., description="Owning client identifier")
    status: ParcelStatus = Field(default=ParcelStatus.REGISTERED)
    address: str = Field(..., max_length=500, description="Delivery address")
    created_at: str = Field(default_factory=utc_timestamp, description="RFC3339 creation time")


class ParcelRead(BaseModel):
    """Schema for a stored parcel."""
    number: int
    client: int
    status: ParcelStatus
    address: str
    created_at: str

    class Config:
        from_attributes = True
