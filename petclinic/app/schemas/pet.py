"""
Pydantic models for pets and pet types.

``PetType`` is immutable reference data identified by its name.  A
``Pet`` may be partially filled while a form is being bound, so every
field except ``id`` tolerates ``None``; the pet validator decides
which of those gaps are errors.
"""

from datetime import date
from typing import Optional

from pydantic import BaseModel, ConfigDict


class PetType(BaseModel):
    """A category of pet such as ``cat`` or ``dog``."""

    model_config = ConfigDict(frozen=True, from_attributes=True)

    id: Optional[int] = None
    name: str

    def __str__(self) -> str:
        return self.name


class Pet(BaseModel):
    """An animal belonging to exactly one owner."""

    model_config = ConfigDict(from_attributes=True)

    id: Optional[int] = None
    name: Optional[str] = None
    birth_date: Optional[date] = None
    type: Optional[PetType] = None
    owner_id: Optional[int] = None

    @property
    def is_new(self) -> bool:
        """True until the repository has assigned an id."""
        return self.id is None
