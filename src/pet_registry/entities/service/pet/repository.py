"""Pet repository for data access operations."""

from loguru import logger
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, select

from .entity import Pet
from .table import PetTable


class PetRepository:
    """Data-access layer for pets."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def get(self, pet_id: int) -> Pet | None:
        """Return the pet with ``pet_id`` or ``None``."""
        row = self._session.get(PetTable, pet_id)
        if row is None:
            return None
        return Pet.model_validate(row, from_attributes=True)

    def create(self, pet: Pet) -> Pet:
        """Insert ``pet`` and return it with the database-assigned id.

        Raises:
            IntegrityError: when the ``pet`` table rejects the row, e.g. a
                missing or empty ``type``.
        """
        row = PetTable(type=pet.type)
        self._session.add(row)
        try:
            self._session.flush()
        except IntegrityError:
            self._session.rollback()
            logger.warning("Rejected pet insert for type {!r}", pet.type)
            raise
        self._session.refresh(row)
        logger.debug("Created pet {} ({})", row.id, row.type)
        return Pet.model_validate(row, from_attributes=True)

    def update(self, pet: Pet) -> Pet:
        """Overwrite the ``type`` of an existing pet."""
        if pet.id is None:
            raise ValueError("Pet has no id; persist it before updating")

        row = self._session.get(PetTable, pet.id)
        if row is None:
            raise ValueError(f"Pet with id {pet.id} not found")

        row.type = pet.type
        self._session.add(row)
        try:
            self._session.flush()
        except IntegrityError:
            self._session.rollback()
            logger.warning("Rejected update of pet {} to type {!r}", pet.id, pet.type)
            raise
        self._session.refresh(row)
        return Pet.model_validate(row, from_attributes=True)

    def delete(self, pet_id: int) -> bool:
        """Delete a pet by id. Returns ``False`` if nothing was deleted."""
        row = self._session.get(PetTable, pet_id)
        if row is None:
            return False

        self._session.delete(row)
        self._session.flush()
        logger.debug("Deleted pet {}", pet_id)
        return True

    def list_all(self) -> list[Pet]:
        """List all pets ordered by id."""
        statement = select(PetTable).order_by(PetTable.id)
        rows = self._session.exec(statement).all()
        return [Pet.model_validate(row, from_attributes=True) for row in rows]

    def find_by_type(self, type_: str) -> list[Pet]:
        """List pets whose type label equals ``type_``."""
        statement = (
            select(PetTable).where(PetTable.type == type_).order_by(PetTable.id)
        )
        rows = self._session.exec(statement).all()
        return [Pet.model_validate(row, from_attributes=True) for row in rows]
