"""Search router - FastAPI endpoints for marketplace search"""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from ...database import get_db
from ..bookings.schemas import BookingResponse
from ..pets.schemas import PetResponse
from ..users.schemas import UserResponse
from .schemas import SearchStatus, SearchSuggestions, SitterSearchRequest
from .service import SearchService

router = APIRouter(prefix="/search", tags=["Search"])


def get_search_service(db: Session = Depends(get_db)) -> SearchService:
    """Dependency injection for SearchService"""
    return SearchService(db)


@router.get("/status", response_model=SearchStatus)
def search_status():
    return SearchService.get_status()


@router.post("/sitters", response_model=list[UserResponse])
def search_sitters(body: SitterSearchRequest, service: SearchService = Depends(get_search_service)):
    return service.search_sitters(body)


@router.get("/pets", response_model=list[PetResponse])
def search_pets(
    query: str = Query(..., min_length=1, max_length=100),
    service: SearchService = Depends(get_search_service),
):
    return service.search_pets(query)


@router.get("/bookings", response_model=list[BookingResponse])
def search_bookings(
    query: str = Query(..., min_length=1, max_length=100),
    service: SearchService = Depends(get_search_service),
):
    return service.search_bookings(query)


@router.get("/suggestions", response_model=SearchSuggestions)
def search_suggestions(
    query: str = Query(..., min_length=1, max_length=100),
    service: SearchService = Depends(get_search_service),
):
    return service.get_suggestions(query)
