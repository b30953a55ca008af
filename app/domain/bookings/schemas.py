"""Booking domain schemas - Pydantic models for validation"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ...models import BookingStatus
from ...shared.validators import to_naive_utc
from ..pets.schemas import PetSummary
from ..users.schemas import UserSummary


class BookingCreate(BaseModel):
    """Schema for requesting a booking"""

    ownerId: int
    sitterId: int
    startDate: datetime
    endDate: datetime
    totalAmount: float = Field(..., ge=0)
    hourlyRate: Optional[float] = Field(None, ge=0)
    location: Optional[str] = Field(None, max_length=500)
    specialInstructions: Optional[str] = None
    petIds: list[int] = Field(default_factory=list)

    @field_validator("startDate", "endDate")
    @classmethod
    def normalize_dates(cls, v):
        return to_naive_utc(v)


class BookingUpdate(BaseModel):
    """Schema for updating a booking"""

    startDate: Optional[datetime] = None
    endDate: Optional[datetime] = None
    totalAmount: Optional[float] = Field(None, ge=0)
    specialInstructions: Optional[str] = None
    status: Optional[BookingStatus] = None

    @field_validator("startDate", "endDate")
    @classmethod
    def normalize_dates(cls, v):
        return to_naive_utc(v)


class BookingStatusUpdate(BaseModel):
    status: BookingStatus


class BookingResponse(BaseModel):
    """Schema for booking response"""

    model_config = ConfigDict(from_attributes=True)

    id: int
    ownerId: int = Field(validation_alias="owner_id")
    sitterId: int = Field(validation_alias="sitter_id")
    status: BookingStatus
    startDate: datetime = Field(validation_alias="start_date")
    endDate: datetime = Field(validation_alias="end_date")
    totalAmount: float = Field(validation_alias="total_amount")
    hourlyRate: Optional[float] = Field(None, validation_alias="hourly_rate")
    location: Optional[str] = None
    specialInstructions: Optional[str] = Field(None, validation_alias="special_instructions")
    owner: Optional[UserSummary] = None
    sitter: Optional[UserSummary] = None
    pets: list[PetSummary] = Field(default_factory=list)
    createdAt: Optional[datetime] = Field(None, validation_alias="created_at")
