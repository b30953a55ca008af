"""Pet domain schemas - Pydantic models for validation"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from ...models import PetType
from ..users.schemas import UserSummary


class PetCreate(BaseModel):
    """Schema for registering a pet"""

    ownerId: int
    name: str = Field(..., min_length=1, max_length=100)
    type: PetType
    breed: Optional[str] = Field(None, max_length=100)
    age: Optional[int] = Field(None, ge=0, le=100)
    weight: Optional[float] = Field(None, gt=0)
    specialNeeds: Optional[str] = None
    photos: list[str] = Field(default_factory=list)


class PetUpdate(BaseModel):
    """Schema for updating a pet"""

    name: Optional[str] = Field(None, min_length=1, max_length=100)
    type: Optional[PetType] = None
    breed: Optional[str] = Field(None, max_length=100)
    age: Optional[int] = Field(None, ge=0, le=100)
    weight: Optional[float] = Field(None, gt=0)
    specialNeeds: Optional[str] = None
    photos: Optional[list[str]] = None


class PetSummary(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    type: PetType
    breed: Optional[str] = None


class PetResponse(BaseModel):
    """Schema for pet response"""

    model_config = ConfigDict(from_attributes=True)

    id: int
    ownerId: int = Field(validation_alias="owner_id")
    name: str
    type: PetType
    breed: Optional[str] = None
    age: Optional[int] = None
    weight: Optional[float] = None
    specialNeeds: Optional[str] = Field(None, validation_alias="special_needs")
    photos: Optional[list[str]] = None
    owner: Optional[UserSummary] = None
    createdAt: Optional[datetime] = Field(None, validation_alias="created_at")
