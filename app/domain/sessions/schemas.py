"""Care session schemas - Pydantic models for validation"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ...models import SessionStatus
from ...shared.validators import to_naive_utc


class SessionCreate(BaseModel):
    """Schema for starting a care session on a booking"""

    userId: int
    bookingId: int
    startTime: Optional[datetime] = None
    notes: Optional[str] = None

    @field_validator("startTime")
    @classmethod
    def normalize_start(cls, v):
        return to_naive_utc(v)


class SessionUpdate(BaseModel):
    notes: Optional[str] = None
    endTime: Optional[datetime] = None

    @field_validator("endTime")
    @classmethod
    def normalize_end(cls, v):
        return to_naive_utc(v)


class SessionResponse(BaseModel):
    """Schema for care session response"""

    model_config = ConfigDict(from_attributes=True)

    id: int
    userId: int = Field(validation_alias="user_id")
    bookingId: int = Field(validation_alias="booking_id")
    status: SessionStatus
    startTime: Optional[datetime] = Field(None, validation_alias="start_time")
    endTime: Optional[datetime] = Field(None, validation_alias="end_time")
    notes: Optional[str] = None
    createdAt: Optional[datetime] = Field(None, validation_alias="created_at")
