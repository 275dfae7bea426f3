"""Pet database table model."""

from sqlalchemy import CheckConstraint
from sqlmodel import Field

from src.pet_registry.entities.core._base import EntityTable

# Largest id a signed 64-bit INTEGER column can hold.
MAX_PET_ID = 2**63 - 1


class PetTable(EntityTable, table=True):
    """Database persistence model for pets.

    Maps to the ``pet`` table. ``type`` is NOT NULL and must hold at least one
    character; both rules are enforced by the database. Ids are never reused
    after a delete (``AUTOINCREMENT`` on SQLite, a sequence elsewhere).
    """

    __tablename__ = "pet"
    __table_args__ = (
        CheckConstraint("length(type) > 0", name="ck_pet_type_not_empty"),
        {"sqlite_autoincrement": True},
    )

    type: str = Field(nullable=False)
