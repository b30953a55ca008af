"""Analytics domain schemas - Response models for the reports"""

from pydantic import BaseModel

from ..bookings.schemas import BookingResponse
from ..payments.schemas import PaymentResponse
from ..users.schemas import UserResponse


class DashboardSummary(BaseModel):
    totalUsers: int
    totalBookings: int
    totalPets: int
    totalPayments: int
    totalReviews: int
    completedBookings: int
    pendingBookings: int
    totalRevenue: float
    completionRate: float


class BookingAnalytics(BaseModel):
    totalBookings: int
    statusCounts: dict[str, int]
    bookings: list[BookingResponse]


class UserAnalytics(BaseModel):
    totalUsers: int
    owners: int
    sitters: int
    ownerPercentage: float
    sitterPercentage: float
    recentUsers: list[UserResponse]


class RevenueAnalytics(BaseModel):
    totalRevenue: float
    averagePayment: float
    totalPayments: int
    payments: list[PaymentResponse]


class SitterStat(BaseModel):
    """One leaderboard row"""

    id: int
    firstName: str
    lastName: str
    email: str
    totalBookings: int
    completedBookings: int
    totalReviews: int
    averageRating: float
    completionRate: float


class PetBreakdown(BaseModel):
    total: int
    dogs: int
    cats: int
    others: int
    dogPercentage: float
    catPercentage: float
    otherPercentage: float
