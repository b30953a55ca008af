"""Pet router - FastAPI endpoints for pet operations"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ...database import get_db
from ...models import PetType
from .schemas import PetCreate, PetResponse, PetUpdate
from .service import PetService

router = APIRouter(prefix="/pets", tags=["Pets"])


def get_pet_service(db: Session = Depends(get_db)) -> PetService:
    """Dependency injection for PetService"""
    return PetService(db)


@router.get("", response_model=list[PetResponse])
def list_pets(service: PetService = Depends(get_pet_service)):
    return service.get_pets()


@router.get("/owner/{owner_id}", response_model=list[PetResponse])
def list_pets_by_owner(owner_id: int, service: PetService = Depends(get_pet_service)):
    return service.get_pets_by_owner(owner_id)


@router.get("/type/{pet_type}", response_model=list[PetResponse])
def list_pets_by_type(pet_type: PetType, service: PetService = Depends(get_pet_service)):
    return service.get_pets(pet_type)


@router.get("/{pet_id}", response_model=PetResponse)
def get_pet(pet_id: int, service: PetService = Depends(get_pet_service)):
    return service.get_pet(pet_id)


@router.post("", response_model=PetResponse, status_code=201)
def create_pet(body: PetCreate, service: PetService = Depends(get_pet_service)):
    return service.create_pet(body)


@router.put("/{pet_id}", response_model=PetResponse)
def update_pet(pet_id: int, body: PetUpdate, service: PetService = Depends(get_pet_service)):
    return service.update_pet(pet_id, body)


@router.delete("/{pet_id}")
def delete_pet(pet_id: int, service: PetService = Depends(get_pet_service)):
    return service.delete_pet(pet_id)
