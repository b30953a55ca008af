"""Analytics router - FastAPI endpoints for dashboard reports"""

from datetime import datetime
from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from ...config import DEFAULT_TOP_SITTERS_LIMIT
from ...database import get_db
from .schemas import (
    BookingAnalytics,
    DashboardSummary,
    PetBreakdown,
    RevenueAnalytics,
    SitterStat,
    UserAnalytics,
)
from .service import AnalyticsService

router = APIRouter(prefix="/analytics", tags=["Analytics"])


def get_analytics_service(db: Session = Depends(get_db)) -> AnalyticsService:
    """Dependency injection for AnalyticsService"""
    return AnalyticsService(db)


@router.get("/dashboard", response_model=DashboardSummary)
def dashboard(service: AnalyticsService = Depends(get_analytics_service)):
    return service.get_dashboard()


@router.get("/bookings", response_model=BookingAnalytics)
def booking_analytics(
    start_date: Optional[datetime] = Query(None, alias="startDate"),
    end_date: Optional[datetime] = Query(None, alias="endDate"),
    service: AnalyticsService = Depends(get_analytics_service),
):
    return service.get_booking_analytics(start_date, end_date)


@router.get("/users", response_model=UserAnalytics)
def user_analytics(service: AnalyticsService = Depends(get_analytics_service)):
    return service.get_user_analytics()


@router.get("/revenue", response_model=RevenueAnalytics)
def revenue_analytics(
    start_date: Optional[datetime] = Query(None, alias="startDate"),
    end_date: Optional[datetime] = Query(None, alias="endDate"),
    service: AnalyticsService = Depends(get_analytics_service),
):
    return service.get_revenue_analytics(start_date, end_date)


@router.get("/top-sitters", response_model=list[SitterStat])
def top_sitters(
    limit: int = Query(DEFAULT_TOP_SITTERS_LIMIT),
    service: AnalyticsService = Depends(get_analytics_service),
):
    return service.get_top_sitters(limit)


@router.get("/pets", response_model=PetBreakdown)
def pet_analytics(service: AnalyticsService = Depends(get_analytics_service)):
    return service.get_pet_analytics()
