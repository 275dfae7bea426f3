"""Entity package: Pet."""

from .entity import Pet
from .repository import PetRepository
from .table import MAX_PET_ID, PetTable

__all__ = ["MAX_PET_ID", "Pet", "PetRepository", "PetTable"]
