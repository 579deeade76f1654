"""
Binding of submitted HTML form fields onto domain records.

Only the fields listed here are ever read from a submission.  In
particular no ``id`` is bound: owner and pet ids come from the URL
path or from the repository.  Binding never raises for bad input;
problems are recorded in the returned ``BindingResult``.
"""

from datetime import date
from typing import Any, Mapping, Tuple

from pydantic import ValidationError

from ..core.binding import BindingResult
from ..schemas.owner import Owner, OwnerForm
from ..schemas.pet import Pet
from ..services.pet_type_formatter import ParseError, PetTypeFormatter
from ..services.pet_validator import REQUIRED, validate_pet

# form input name -> Owner attribute
OWNER_FIELDS = {
    "firstName": "first_name",
    "lastName": "last_name",
    "address": "address",
    "city": "city",
    "telephone": "telephone",
}

TYPE_MISMATCH = "typeMismatch"
TELEPHONE = "telephone"


def _text(form: Mapping[str, Any], name: str) -> str:
    value = form.get(name)
    return value.strip() if isinstance(value, str) else ""


def bind_owner(form: Mapping[str, Any]) -> Tuple[Owner, BindingResult]:
    """Build a transient ``Owner`` from the form and validate it."""
    result = BindingResult("owner")
    data = {name: _text(form, name) for name in OWNER_FIELDS}
    owner = Owner(**{attr: data[name] for name, attr in OWNER_FIELDS.items()})

    try:
        OwnerForm.model_validate(data)
    except ValidationError as exc:
        for error in exc.errors():
            field_name = str(error["loc"][0])
            cause = error.get("ctx", {}).get("error")
            message = str(cause) if cause is not None else error["msg"]
            code = REQUIRED if message == REQUIRED else TELEPHONE
            result.reject_value(field_name, code, message, data.get(field_name))
    return owner, result


def bind_pet(
    form: Mapping[str, Any],
    pet: Pet,
    formatter: PetTypeFormatter,
) -> BindingResult:
    """Copy ``name``, ``birthDate`` and ``type`` onto ``pet`` and validate it.

    The type name goes through ``formatter.parse``; an unknown name and
    an unparseable date are reported as ``typeMismatch`` errors and
    leave the attribute unset, so the validator may add ``required``
    for the same field.
    """
    result = BindingResult("pet")

    name = form.get("name")
    pet.name = name.strip() if isinstance(name, str) else None

    raw_birth_date = _text(form, "birthDate")
    pet.birth_date = None
    if raw_birth_date:
        try:
            pet.birth_date = date.fromisoformat(raw_birth_date)
        except ValueError:
            result.reject_value("birthDate", TYPE_MISMATCH, "invalid date", raw_birth_date)

    raw_type = _text(form, "type")
    if raw_type:
        try:
            pet.type = formatter.parse(raw_type)
        except ParseError as exc:
            pet.type = None
            result.reject_value("type", TYPE_MISMATCH, str(exc), raw_type)

    validate_pet(pet, result)
    return result
