from dataclasses import dataclass

from src.pet_registry.core.services import DbSessionService


@dataclass
class ApplicationDependencies:
    database_service: DbSessionService
