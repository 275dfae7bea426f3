"""Entity: Pet."""

from typing import Any

from pydantic import Field

from src.pet_registry.entities.core._base import Entity


class Pet(Entity):
    """Pet entity representing a registered pet type.

    The identifier stays ``None`` until the record is persisted; the database
    assigns it. Once set it cannot change. An empty ``type`` is accepted here
    and rejected by the ``pet`` table's constraints at write time.

    Hashing follows the identifier, so only hash pets that already have one.
    """

    type: str = Field(description="Pet type label")

    def __setattr__(self, name: str, value: Any) -> None:
        if name == "id" and self.id is not None and value != self.id:
            raise ValueError(f"Pet id {self.id} is already assigned")
        super().__setattr__(name, value)

    def __eq__(self, other: Any) -> bool:
        """Compare pets by identifier; unpersisted pets only equal themselves."""
        if not isinstance(other, Pet):
            return False
        if self.id is None or other.id is None:
            return self is other

        return self.id == other.id

    def __hash__(self) -> int:
        """Hash based on the identifier."""
        return hash((Pet, self.id))
