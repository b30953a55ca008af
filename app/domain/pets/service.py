"""Pet service - Business logic for pet operations"""

import logging
from typing import Optional

from fastapi import HTTPException
from sqlalchemy.orm import Session

from ...models import Pet, PetType, UserRole
from ...utils.sanitization import sanitize_string
from .repository import PetRepository
from .schemas import PetCreate, PetUpdate

logger = logging.getLogger(__name__)


class PetService:
    """Service layer for pet business logic"""

    def __init__(self, db: Session):
        self.db = db
        self.repo = PetRepository()

    def get_pets(self, pet_type: Optional[PetType] = None) -> list[Pet]:
        return self.repo.get_pets(self.db, pet_type=pet_type)

    def get_pets_by_owner(self, owner_id: int) -> list[Pet]:
        return self.repo.get_pets(self.db, owner_id=owner_id)

    def get_pet(self, pet_id: int) -> Pet:
        pet = self.repo.get_pet_by_id(self.db, pet_id)
        if not pet:
            raise HTTPException(status_code=404, detail="Pet not found")
        return pet

    def create_pet(self, data: PetCreate) -> Pet:
        """Register a pet for an existing owner"""
        owner = self.repo.get_user_by_id(self.db, data.ownerId)
        if not owner:
            raise HTTPException(status_code=400, detail="Owner not found")
        if owner.role != UserRole.OWNER:
            raise HTTPException(status_code=400, detail="User must be an owner to create pets")

        pet = self.repo.create_pet(
            self.db,
            owner_id=data.ownerId,
            name=sanitize_string(data.name),
            type=data.type,
            breed=sanitize_string(data.breed),
            age=data.age,
            weight=data.weight,
            special_needs=sanitize_string(data.specialNeeds),
            photos=data.photos,
        )
        logger.info(f"✅ Pet {pet.id} ({pet.type.value}) created for owner {owner.id}")
        return pet

    def update_pet(self, pet_id: int, data: PetUpdate) -> Pet:
        pet = self.get_pet(pet_id)

        updates = {}
        if data.name is not None:
            updates["name"] = sanitize_string(data.name)
        if data.type is not None:
            updates["type"] = data.type
        if data.breed is not None:
            updates["breed"] = sanitize_string(data.breed)
        if data.age is not None:
            updates["age"] = data.age
        if data.weight is not None:
            updates["weight"] = data.weight
        if data.specialNeeds is not None:
            updates["special_needs"] = sanitize_string(data.specialNeeds)
        if data.photos is not None:
            updates["photos"] = data.photos

        return self.repo.update_pet(self.db, pet, **updates)

    def delete_pet(self, pet_id: int) -> dict:
        pet = self.get_pet(pet_id)
        self.repo.delete_pet(self.db, pet)
        return {"message": "Pet deleted successfully"}
