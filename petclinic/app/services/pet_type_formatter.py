"""
Conversion between ``PetType`` records and the names shown in forms.

The pet form submits the type as its display name; ``parse`` resolves
that name against the reference data held by the repository and
``print`` produces the name again when the form is rendered.
"""

from typing import Optional

from ..schemas.pet import PetType


class ParseError(ValueError):
    """Raised when a submitted text does not name a known pet type."""

    def __init__(self, text: str, error_offset: int = 0) -> None:
        super().__init__(f"type not found: {text}")
        self.text = text
        self.error_offset = error_offset


class PetTypeFormatter:
    """Parses and prints ``PetType`` values.

    ``locale`` is accepted by both methods to keep the formatter
    interface uniform; type names are not localised.
    """

    def __init__(self, owners) -> None:
        self.owners = owners

    def print(self, pet_type: PetType, locale: Optional[str] = None) -> str:
        return pet_type.name

    def parse(self, text: str, locale: Optional[str] = None) -> PetType:
        # Exact, case-sensitive match; the list is small so no caching.
        for pet_type in self.owners.find_pet_types():
            if pet_type.name == text:
                return pet_type
        raise ParseError(text)
