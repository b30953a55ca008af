"""Pet repository - Database operations for pets"""

from typing import Optional

from sqlalchemy.orm import Session, joinedload

from ...models import Pet, PetType, User


class PetRepository:
    """Repository for pet database operations"""

    @staticmethod
    def get_pets(
        db: Session, owner_id: Optional[int] = None, pet_type: Optional[PetType] = None
    ) -> list[Pet]:
        """Get pets with optional owner/type filters"""
        query = db.query(Pet).options(joinedload(Pet.owner))
        if owner_id is not None:
            query = query.filter(Pet.owner_id == owner_id)
        if pet_type is not None:
            query = query.filter(Pet.type == pet_type)
        return query.order_by(Pet.id).all()

    @staticmethod
    def get_pet_by_id(db: Session, pet_id: int) -> Optional[Pet]:
        """Get a specific pet by ID"""
        return db.query(Pet).options(joinedload(Pet.owner)).filter(Pet.id == pet_id).first()

    @staticmethod
    def get_user_by_id(db: Session, user_id: int) -> Optional[User]:
        """Get a user by ID"""
        return db.query(User).filter(User.id == user_id).first()

    @staticmethod
    def create_pet(db: Session, **pet_data) -> Pet:
        """Create a new pet"""
        pet = Pet(**pet_data)
        db.add(pet)
        db.commit()
        db.refresh(pet)
        return pet

    @staticmethod
    def update_pet(db: Session, pet: Pet, **updates) -> Pet:
        """Update a pet with provided fields"""
        for key, value in updates.items():
            if value is not None and hasattr(pet, key):
                setattr(pet, key, value)

        db.commit()
        db.refresh(pet)
        return pet

    @staticmethod
    def delete_pet(db: Session, pet: Pet) -> None:
        """Delete a pet"""
        db.delete(pet)
        db.commit()
