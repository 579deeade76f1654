"""
FastAPI dependencies for the web layer.

Handlers never reach for a module‑level repository; they declare the
collaborators they need and FastAPI builds them per request.  Tests can
swap either one through ``app.dependency_overrides``.
"""

from fastapi import Depends

from ..core.db import get_connection
from ..services.owner_repository import OwnerRepository
from ..services.pet_type_formatter import PetTypeFormatter


def get_owner_repository() -> OwnerRepository:
    return OwnerRepository(get_connection)


def get_pet_type_formatter(
    owners: OwnerRepository = Depends(get_owner_repository),
) -> PetTypeFormatter:
    return PetTypeFormatter(owners)
