"""Pet API router with CRUD operations."""

from fastapi import APIRouter, Depends, HTTPException, Path, status
from loguru import logger
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session

from src.pet_registry.api.http.deps import get_session
from src.pet_registry.entities.service.pet import MAX_PET_ID, Pet, PetRepository

router = APIRouter()


def _constraint_violation(exc: IntegrityError) -> HTTPException:
    logger.bind(error_type=type(exc).__name__).warning(
        "Pet rejected by storage constraints: {}", exc.orig
    )
    return HTTPException(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        detail="Pet type is required and must not be empty",
    )


@router.post("/", response_model=Pet, status_code=status.HTTP_201_CREATED)
def create_pet(
    pet: Pet,
    session: Session = Depends(get_session),
) -> Pet:
    """Register a new pet type."""
    repository = PetRepository(session)
    try:
        created_pet = repository.create(pet)
    except IntegrityError as e:
        raise _constraint_violation(e) from e
    session.commit()
    return created_pet


@router.get("/{item_id}", response_model=Pet)
def get_pet(
    item_id: int = Path(ge=1, le=MAX_PET_ID),
    session: Session = Depends(get_session),
) -> Pet:
    """Get a pet by ID."""
    repository = PetRepository(session)
    pet = repository.get(item_id)
    if pet is None:
        raise HTTPException(status_code=404, detail="Pet not found")
    return pet


@router.put("/{item_id}", response_model=Pet)
def update_pet(
    pet_update: Pet,
    item_id: int = Path(ge=1, le=MAX_PET_ID),
    session: Session = Depends(get_session),
) -> Pet:
    """Overwrite the type of a pet."""
    repository = PetRepository(session)

    # path id wins over any id in the body
    try:
        updated_pet = repository.update(Pet(id=item_id, type=pet_update.type))
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e
    except IntegrityError as e:
        raise _constraint_violation(e) from e
    session.commit()
    return updated_pet


@router.delete("/{item_id}")
def delete_pet(
    item_id: int = Path(ge=1, le=MAX_PET_ID),
    session: Session = Depends(get_session),
) -> dict[str, str]:
    """Delete a pet."""
    repository = PetRepository(session)
    deleted = repository.delete(item_id)
    if not deleted:
        raise HTTPException(status_code=404, detail="Pet not found")
    session.commit()
    return {"message": "Pet deleted successfully"}


@router.get("/", response_model=list[Pet])
def list_pets(
    type: str | None = None,
    session: Session = Depends(get_session),
) -> list[Pet]:
    """List all pets, optionally only those with the given type."""
    repository = PetRepository(session)
    if type is not None:
        return repository.find_by_type(type)
    return repository.list_all()
