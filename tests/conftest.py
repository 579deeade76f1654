"""Pytest configuration and shared fixtures for PetClinic tests."""

from datetime import date

import pytest
from fastapi.testclient import TestClient

from petclinic.app.core.config import settings
from petclinic.app.core.db import get_connection, init_db
from petclinic.app.main import create_app
from petclinic.app.schemas.owner import Owner
from petclinic.app.schemas.pet import Pet
from petclinic.app.services.owner_repository import OwnerRepository


@pytest.fixture
def database(tmp_path, monkeypatch):
    """A freshly migrated, empty SQLite database in a temporary directory."""
    monkeypatch.setattr(settings, "database_url", str(tmp_path / "petclinic-test.db"))
    monkeypatch.setattr(settings, "seed_sample_data", False)
    init_db()
    return settings.database_url


@pytest.fixture
def sample_database(tmp_path, monkeypatch):
    """A temporary database holding the demo owners and pets."""
    monkeypatch.setattr(settings, "database_url", str(tmp_path / "petclinic-sample.db"))
    monkeypatch.setattr(settings, "seed_sample_data", True)
    init_db()
    return settings.database_url


@pytest.fixture
def repository(database):
    return OwnerRepository(get_connection)


@pytest.fixture
def owner_factory(repository):
    """Persist owners with sensible defaults; keyword arguments override them."""

    def create(pets=(), **overrides):
        data = {
            "first_name": "George",
            "last_name": "Franklin",
            "address": "110 W. Liberty St.",
            "city": "Madison",
            "telephone": "6085551023",
        }
        data.update(overrides)
        owner = Owner(**data)
        for name, birth_date, type_name in pets:
            pet_type = next(t for t in repository.find_pet_types() if t.name == type_name)
            owner.add_pet(Pet(name=name, birth_date=date.fromisoformat(birth_date), type=pet_type))
        repository.save(owner)
        return owner

    return create


@pytest.fixture
def client(database):
    with TestClient(create_app()) as test_client:
        yield test_client
