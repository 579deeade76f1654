"""
Validation rules for the pet form.

The rules are plain code rather than pydantic constraints because the
``type`` requirement depends on whether the pet has been saved yet.
"""

from ..core.binding import BindingResult
from ..schemas.pet import Pet

REQUIRED = "required"


def supports(cls: type) -> bool:
    """This validator only handles ``Pet`` (and subclasses)."""
    return isinstance(cls, type) and issubclass(cls, Pet)


def validate_pet(pet: Pet, errors: BindingResult) -> None:
    """Append a ``required`` error for every missing pet field.

    Every rule is evaluated; a pet with no name, no type and no birth
    date yields three errors.  Only new pets need a type.
    """
    if not supports(type(pet)):
        raise TypeError(f"Cannot validate {type(pet).__name__}; expected Pet")

    if pet.name is None or not pet.name.strip():
        errors.reject_value("name", REQUIRED, REQUIRED)

    if pet.is_new and pet.type is None:
        errors.reject_value("type", REQUIRED, REQUIRED)

    if pet.birth_date is None:
        errors.reject_value("birthDate", REQUIRED, REQUIRED)
