"""Search domain schemas - Pydantic models for validation"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from ..pets.schemas import PetSummary


class SitterSearchRequest(BaseModel):
    """Schema for a sitter search; every filter is optional"""

    query: Optional[str] = Field(None, max_length=100)
    location: Optional[str] = Field(None, max_length=100)
    rating: Optional[float] = Field(None, ge=0, le=5)


class SitterSuggestion(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    firstName: str = Field(validation_alias="first_name")
    lastName: str = Field(validation_alias="last_name")


class SearchSuggestions(BaseModel):
    sitters: list[SitterSuggestion]
    pets: list[PetSummary]


class SearchStatus(BaseModel):
    searchEnabled: bool
    indexingEnabled: bool
    fuzzySearchEnabled: bool
    resultLimit: int
    suggestionLimit: int
    timestamp: datetime
