"""Unit tests for the pet entity package.

Tests the hybrid entity structure where the domain record, database model,
and repository are colocated in the same package.
"""

from unittest.mock import Mock

import pytest
from pydantic import ValidationError
from sqlalchemy import CheckConstraint
from sqlalchemy.exc import IntegrityError

from src.pet_registry.entities.service.pet import Pet, PetRepository, PetTable


class TestPet:
    """Test the Pet domain entity."""

    def test_pet_creation_without_id(self):
        """A new pet has no id until the database assigns one."""
        pet = Pet(type="dog")

        assert pet.id is None
        assert pet.type == "dog"

    def test_pet_creation_with_explicit_id(self):
        pet = Pet(id=7, type="cat")

        assert pet.id == 7
        assert pet.type == "cat"

    def test_pet_requires_type(self):
        """Absent or null type is rejected when the record is built."""
        with pytest.raises(ValidationError):
            Pet()
        with pytest.raises(ValidationError):
            Pet(type=None)

    def test_pet_allows_empty_type(self):
        """Empty labels are left to the storage constraints."""
        pet = Pet(type="")
        assert pet.type == ""

    def test_assignment_is_validated(self):
        pet = Pet(type="dog")

        pet.type = "hamster"
        pet.id = 3
        assert pet.type == "hamster"
        assert pet.id == 3

        with pytest.raises(ValidationError):
            Pet(type="dog").id = "not-a-number"

    def test_id_is_fixed_once_assigned(self):
        pet = Pet(type="dog")
        pet.id = 4
        registered = {pet}

        pet.id = 4
        with pytest.raises(ValueError, match="already assigned"):
            pet.id = 5
        assert pet.id == 4
        assert pet in registered

    def test_identity_is_defined_by_id(self):
        """Same type with different ids means different records."""
        first = Pet(id=1, type="dog")
        second = Pet(id=2, type="dog")
        renamed = Pet(id=1, type="wolf")

        assert first != second
        assert first == renamed
        assert hash(first) == hash(renamed)

    def test_unpersisted_pets_only_equal_themselves(self):
        first = Pet(type="dog")
        second = Pet(type="dog")

        assert first == first
        assert first != second

    def test_pet_not_equal_to_other_types(self):
        assert Pet(id=1, type="dog") != {"id": 1, "type": "dog"}

    def test_pets_usable_in_sets(self):
        pets = {Pet(id=1, type="dog"), Pet(id=1, type="dog"), Pet(id=2, type="dog")}
        assert len(pets) == 2

    def test_pet_representation(self):
        pet = Pet(id=1, type="parrot")

        assert "parrot" in str(pet)


class TestPetTable:
    """Test the PetTable database model."""

    def test_table_name(self):
        assert PetTable.__tablename__ == "pet"
        assert PetTable.__table__.name == "pet"

    def test_columns(self):
        columns = PetTable.__table__.columns

        assert set(columns.keys()) == {"id", "type"}
        assert columns["id"].primary_key
        assert not columns["type"].nullable

    def test_type_must_not_be_empty_constraint(self):
        constraints = [
            c for c in PetTable.__table__.constraints if isinstance(c, CheckConstraint)
        ]

        assert [c.name for c in constraints] == ["ck_pet_type_not_empty"]

    def test_table_model_from_entity(self):
        pet = Pet(type="dog")

        table = PetTable.model_validate(pet, from_attributes=True)

        assert table.id is None
        assert table.type == "dog"

    def test_entity_from_table_model(self):
        table = PetTable(id=5, type="cat")

        pet = Pet.model_validate(table, from_attributes=True)

        assert pet.id == 5
        assert pet.type == "cat"


class TestPetRepository:
    """Test the PetRepository data access layer."""

    def setup_method(self):
        self.mock_session = Mock()
        self.repo = PetRepository(self.mock_session)

    def test_repository_initialization(self):
        assert self.repo._session == self.mock_session

    def test_get_existing_pet(self):
        self.mock_session.get.return_value = PetTable(id=1, type="dog")

        pet = self.repo.get(1)

        self.mock_session.get.assert_called_once_with(PetTable, 1)
        assert pet == Pet(id=1, type="dog")
        assert pet.type == "dog"

    def test_get_nonexistent_pet(self):
        self.mock_session.get.return_value = None

        assert self.repo.get(42) is None
        self.mock_session.get.assert_called_once_with(PetTable, 42)

    def test_create_pet(self):
        """create() adds a row without an id and lets the database assign it."""
        pet = Pet(id=99, type="dog")

        result = self.repo.create(pet)

        self.mock_session.add.assert_called_once()
        added_row = self.mock_session.add.call_args[0][0]
        assert isinstance(added_row, PetTable)
        assert added_row.id is None
        assert added_row.type == "dog"
        self.mock_session.flush.assert_called_once()
        self.mock_session.refresh.assert_called_once_with(added_row)
        assert result.type == "dog"

    def test_create_rejected_by_storage(self):
        self.mock_session.flush.side_effect = IntegrityError(
            "INSERT INTO pet", {}, Exception("NOT NULL constraint failed: pet.type")
        )

        with pytest.raises(IntegrityError):
            self.repo.create(Pet(type=""))

        self.mock_session.rollback.assert_called_once()
        self.mock_session.refresh.assert_not_called()

    def test_update_existing_pet(self):
        row = PetTable(id=1, type="dog")
        self.mock_session.get.return_value = row

        result = self.repo.update(Pet(id=1, type="wolf"))

        assert row.type == "wolf"
        self.mock_session.flush.assert_called_once()
        assert result.id == 1
        assert result.type == "wolf"

    def test_update_missing_pet(self):
        self.mock_session.get.return_value = None

        with pytest.raises(ValueError, match="not found"):
            self.repo.update(Pet(id=1, type="wolf"))

    def test_update_unpersisted_pet(self):
        with pytest.raises(ValueError, match="no id"):
            self.repo.update(Pet(type="wolf"))

        self.mock_session.get.assert_not_called()

    def test_delete_existing_pet(self):
        row = PetTable(id=1, type="dog")
        self.mock_session.get.return_value = row

        assert self.repo.delete(1) is True
        self.mock_session.delete.assert_called_once_with(row)

    def test_delete_missing_pet(self):
        self.mock_session.get.return_value = None

        assert self.repo.delete(1) is False
        self.mock_session.delete.assert_not_called()
