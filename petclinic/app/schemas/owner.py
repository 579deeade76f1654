"""
Pydantic models for owners.

``Owner`` is the record rendered by templates and persisted by the
repository.  ``OwnerForm`` describes the fields a client may submit
for an owner: it has no ``id`` field, so a submitted id can never be
bound onto a record.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .pet import Pet


class Owner(BaseModel):
    """A customer of the clinic and the pets they own."""

    model_config = ConfigDict(from_attributes=True)

    id: Optional[int] = None
    first_name: str = ""
    last_name: str = ""
    address: str = ""
    city: str = ""
    telephone: str = ""
    pets: List[Pet] = Field(default_factory=list)

    @property
    def is_new(self) -> bool:
        return self.id is None

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    def add_pet(self, pet: Pet) -> None:
        if pet.is_new:
            self.pets.append(pet)
        pet.owner_id = self.id

    def get_pet(self, name: str, ignore_new: bool = False) -> Optional[Pet]:
        """Return the pet with the given name, compared case‑insensitively.

        With ``ignore_new`` set, pets that have not been saved yet are
        skipped.
        """
        wanted = name.lower()
        for pet in self.pets:
            if ignore_new and pet.is_new:
                continue
            if pet.name is not None and pet.name.lower() == wanted:
                return pet
        return None

    def get_pet_by_id(self, pet_id: int) -> Optional[Pet]:
        for pet in self.pets:
            if pet.id == pet_id:
                return pet
        return None


class OwnerForm(BaseModel):
    """Fields accepted from the create/update owner form.

    Aliases match the HTML input names.  Blank values are rejected with
    the ``required`` code; a telephone must be exactly ten digits.
    """

    model_config = ConfigDict(populate_by_name=True, str_strip_whitespace=True)

    first_name: str = Field("", alias="firstName")
    last_name: str = Field("", alias="lastName")
    address: str = Field("", alias="address")
    city: str = Field("", alias="city")
    telephone: str = Field("", alias="telephone")

    @field_validator("first_name", "last_name", "address", "city", "telephone")
    @classmethod
    def not_blank(cls, v: str) -> str:
        if not v:
            raise ValueError("required")
        return v

    @field_validator("telephone")
    @classmethod
    def ten_digits(cls, v: str) -> str:
        if len(v) != 10 or not v.isdigit():
            raise ValueError("Telephone must be a 10-digit number")
        return v
