"""User domain schemas - Pydantic models for validation"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ...models import UserRole
from ...shared.validators import validate_email, validate_phone


class UserCreate(BaseModel):
    """Schema for registering a new owner or sitter"""

    email: str
    firstName: str = Field(..., min_length=1, max_length=100)
    lastName: str = Field(..., min_length=1, max_length=100)
    role: UserRole
    phone: Optional[str] = None
    bio: Optional[str] = None
    hourlyRate: Optional[float] = Field(None, ge=0)

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v):
        if not v or not v.strip():
            raise ValueError("Email is required")
        return validate_email(v)

    @field_validator("phone")
    @classmethod
    def normalize_phone(cls, v):
        if v:
            return validate_phone(v)
        return v


class UserUpdate(BaseModel):
    """Schema for updating a user profile"""

    firstName: Optional[str] = Field(None, min_length=1, max_length=100)
    lastName: Optional[str] = Field(None, min_length=1, max_length=100)
    phone: Optional[str] = None
    profilePicture: Optional[str] = None
    bio: Optional[str] = None
    hourlyRate: Optional[float] = Field(None, ge=0)

    @field_validator("phone")
    @classmethod
    def normalize_phone(cls, v):
        if v:
            return validate_phone(v)
        return v


class UserSummary(BaseModel):
    """Compact user representation embedded in other resources"""

    model_config = ConfigDict(from_attributes=True)

    id: int
    firstName: str = Field(validation_alias="first_name")
    lastName: str = Field(validation_alias="last_name")
    email: str


class UserResponse(BaseModel):
    """Schema for user response"""

    model_config = ConfigDict(from_attributes=True)

    id: int
    email: str
    firstName: str = Field(validation_alias="first_name")
    lastName: str = Field(validation_alias="last_name")
    role: UserRole
    phone: Optional[str] = None
    profilePicture: Optional[str] = Field(None, validation_alias="profile_picture")
    bio: Optional[str] = None
    hourlyRate: Optional[float] = Field(None, validation_alias="hourly_rate")
    rating: float
    reviewCount: int = Field(validation_alias="review_count")
    createdAt: Optional[datetime] = Field(None, validation_alias="created_at")
    updatedAt: Optional[datetime] = Field(None, validation_alias="updated_at")
