from pydantic import BaseModel, ConfigDict
from pydantic import Field as PydanticField
from sqlmodel import Field, SQLModel


class Entity(BaseModel):
    """Base entity class whose identifier is assigned by the storage layer."""

    model_config = ConfigDict(validate_assignment=True)

    id: int | None = PydanticField(
        default=None,
        description="Unique identifier, generated by the database on insert",
    )


class EntityTable(SQLModel, table=False):
    """Base table class with a database-generated integer primary key."""

    id: int | None = Field(
        default=None,
        primary_key=True,
        description="Unique identifier for the entity",
    )
