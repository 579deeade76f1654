"""
Field error collection for form binding.

A ``BindingResult`` is created for every submitted form.  Binding
helpers and validators append ``FieldError`` entries to it instead of
raising, and templates read the messages back per field to render
them next to the corresponding input.
"""

from dataclasses import dataclass, field
from typing import Any, List, Optional


@dataclass
class FieldError:
    """A single rejected form field."""

    field: str
    code: str
    message: str
    rejected_value: Any = None


@dataclass
class BindingResult:
    """Errors collected while binding and validating one form object."""

    object_name: str
    errors: List[FieldError] = field(default_factory=list)

    def reject_value(
        self,
        field_name: str,
        code: str,
        message: Optional[str] = None,
        rejected_value: Any = None,
    ) -> None:
        """Record an error for ``field_name``; ``message`` defaults to ``code``."""
        self.errors.append(
            FieldError(
                field=field_name,
                code=code,
                message=message if message is not None else code,
                rejected_value=rejected_value,
            )
        )

    def has_errors(self) -> bool:
        return bool(self.errors)

    def has_field_errors(self, field_name: str) -> bool:
        return any(error.field == field_name for error in self.errors)

    def get_field_errors(self, field_name: str) -> List[FieldError]:
        return [error for error in self.errors if error.field == field_name]

    def messages(self, field_name: str) -> List[str]:
        """Return the messages for ``field_name`` in the order they were rejected."""
        return [error.message for error in self.get_field_errors(field_name)]

    def codes(self, field_name: str) -> List[str]:
        return [error.code for error in self.get_field_errors(field_name)]
