"""Payment domain schemas - Pydantic models for validation"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ...models import PaymentMethod, PaymentStatus


class PaymentCreate(BaseModel):
    """Schema for paying for a booking"""

    bookingId: int
    amount: float = Field(..., gt=0)
    currency: str = Field("USD", min_length=3, max_length=3)
    paymentMethod: PaymentMethod
    description: Optional[str] = None

    @field_validator("currency")
    @classmethod
    def normalize_currency(cls, v):
        return v.upper()


class PaymentUpdate(BaseModel):
    """Schema for updating a payment"""

    status: Optional[PaymentStatus] = None
    transactionId: Optional[str] = None


class RefundRequest(BaseModel):
    reason: Optional[str] = None


class PaymentResponse(BaseModel):
    """Schema for payment response"""

    model_config = ConfigDict(from_attributes=True)

    id: int
    bookingId: int = Field(validation_alias="booking_id")
    amount: float
    currency: str
    paymentMethod: PaymentMethod = Field(validation_alias="payment_method")
    status: PaymentStatus
    transactionId: Optional[str] = Field(None, validation_alias="transaction_id")
    description: Optional[str] = None
    createdAt: Optional[datetime] = Field(None, validation_alias="created_at")
