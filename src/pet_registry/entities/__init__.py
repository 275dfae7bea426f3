"""Entities module with hybrid entity-centric structure.

Each entity has its own package containing:
- entity.py: Domain record
- table.py: Database persistence model
- repository.py: Data access layer
"""

from .service.pet import Pet, PetRepository, PetTable

__all__ = [
    "Pet",
    "PetTable",
    "PetRepository",
]
