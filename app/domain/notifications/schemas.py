"""Notification domain schemas - Pydantic models for validation"""

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field

from ...models import NotificationType


class NotificationCreate(BaseModel):
    """Schema for creating a notification"""

    userId: int
    type: NotificationType
    title: str = Field(..., min_length=1, max_length=255)
    message: str = Field(..., min_length=1)
    data: Optional[dict[str, Any]] = None


class NotificationUpdate(BaseModel):
    """Schema for updating a notification"""

    isRead: Optional[bool] = None
    title: Optional[str] = Field(None, min_length=1, max_length=255)
    message: Optional[str] = None
    data: Optional[dict[str, Any]] = None


class NotificationResponse(BaseModel):
    """Schema for notification response"""

    model_config = ConfigDict(from_attributes=True)

    id: int
    userId: int = Field(validation_alias="user_id")
    type: NotificationType
    title: str
    message: str
    isRead: bool = Field(validation_alias="is_read")
    data: Optional[dict[str, Any]] = None
    createdAt: Optional[datetime] = Field(None, validation_alias="created_at")


class UnreadCountResponse(BaseModel):
    userId: int
    unreadCount: int
