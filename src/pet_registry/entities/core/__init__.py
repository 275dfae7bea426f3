"""Base classes shared by all entities."""

from ._base import Entity, EntityTable

__all__ = ["Entity", "EntityTable"]
