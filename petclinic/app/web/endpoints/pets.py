"""
Pet pages nested under an owner.

New and edited pets are bound through ``web.forms.bind_pet``, which
parses the pet type with the formatter and runs the pet validator.
On top of that the handlers reject a name already used by another of
the owner's pets and a birth date in the future.
"""

import logging
from datetime import date
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Request, status
from fastapi.responses import RedirectResponse

from petclinic.app.core.binding import BindingResult
from petclinic.app.schemas.owner import Owner
from petclinic.app.schemas.pet import Pet
from petclinic.app.services.owner_repository import OwnerRepository
from petclinic.app.services.pet_type_formatter import PetTypeFormatter
from petclinic.app.web.deps import get_owner_repository, get_pet_type_formatter
from petclinic.app.web.endpoints.owners import load_owner
from petclinic.app.web.flash import flash
from petclinic.app.web.forms import TYPE_MISMATCH, bind_pet
from petclinic.app.web.templating import templates

logger = logging.getLogger(__name__)

router = APIRouter()

VIEWS_PETS_CREATE_OR_UPDATE_FORM = "pets/create_or_update_pet_form.html"


def _render_pet_form(
    request: Request,
    owners: OwnerRepository,
    owner: Owner,
    pet: Pet,
    errors: BindingResult,
    formatter: PetTypeFormatter,
    error: Optional[str] = None,
):
    pet_types = owners.find_pet_types()
    return templates.TemplateResponse(
        request,
        VIEWS_PETS_CREATE_OR_UPDATE_FORM,
        {
            "owner": owner,
            "pet": pet,
            "errors": errors,
            "error": error,
            "types": [formatter.print(pet_type) for pet_type in pet_types],
            "selected_type": formatter.print(pet.type) if pet.type else "",
        },
    )


def _check_business_rules(owner: Owner, pet: Pet, result: BindingResult) -> None:
    if pet.name and pet.name.strip():
        existing = owner.get_pet(pet.name.strip())
        if existing is not None and existing.id != pet.id:
            result.reject_value("name", "duplicate", "already exists", pet.name)
    if pet.birth_date is not None and pet.birth_date > date.today():
        result.reject_value("birthDate", TYPE_MISMATCH, "birth date cannot be in the future", pet.birth_date)


def _find_pet(owner: Owner, pet_id: int) -> Pet:
    pet = owner.get_pet_by_id(pet_id)
    if pet is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Pet {pet_id} not found for owner {owner.id}",
        )
    return pet


@router.get("/{owner_id}/pets/new")
async def init_creation_form(
    request: Request,
    owner_id: int,
    owners: OwnerRepository = Depends(get_owner_repository),
    formatter: PetTypeFormatter = Depends(get_pet_type_formatter),
):
    owner = load_owner(owners, owner_id)
    return _render_pet_form(request, owners, owner, Pet(owner_id=owner_id), BindingResult("pet"), formatter)


@router.post("/{owner_id}/pets/new")
async def process_creation_form(
    request: Request,
    owner_id: int,
    owners: OwnerRepository = Depends(get_owner_repository),
    formatter: PetTypeFormatter = Depends(get_pet_type_formatter),
):
    """Add a pet to the owner."""
    owner = load_owner(owners, owner_id)
    pet = Pet(owner_id=owner_id)
    result = bind_pet(await request.form(), pet, formatter)
    _check_business_rules(owner, pet, result)
    if result.has_errors():
        return _render_pet_form(
            request, owners, owner, pet, result, formatter, error="There was an error in adding the pet."
        )

    owner.add_pet(pet)
    owners.save(owner)
    flash(request, "message", "New Pet has been Added")
    return RedirectResponse(f"/owners/{owner_id}", status_code=status.HTTP_303_SEE_OTHER)


@router.get("/{owner_id}/pets/{pet_id}/edit")
async def init_update_form(
    request: Request,
    owner_id: int,
    pet_id: int,
    owners: OwnerRepository = Depends(get_owner_repository),
    formatter: PetTypeFormatter = Depends(get_pet_type_formatter),
):
    owner = load_owner(owners, owner_id)
    pet = _find_pet(owner, pet_id)
    return _render_pet_form(request, owners, owner, pet, BindingResult("pet"), formatter)


@router.post("/{owner_id}/pets/{pet_id}/edit")
async def process_update_form(
    request: Request,
    owner_id: int,
    pet_id: int,
    owners: OwnerRepository = Depends(get_owner_repository),
    formatter: PetTypeFormatter = Depends(get_pet_type_formatter),
):
    """Update a pet; an omitted type keeps the stored one."""
    owner = load_owner(owners, owner_id)
    stored = _find_pet(owner, pet_id)
    pet = Pet(id=pet_id, owner_id=owner_id)
    result = bind_pet(await request.form(), pet, formatter)
    _check_business_rules(owner, pet, result)
    if result.has_errors():
        if pet.type is None:
            pet.type = stored.type
        return _render_pet_form(
            request, owners, owner, pet, result, formatter, error="There was an error in updating the pet."
        )

    owner.pets = _replace_pet(owner.pets, pet)
    owners.save(owner)
    logger.info("Updated pet %s of owner %s", pet_id, owner_id)
    flash(request, "message", "Pet details has been edited")
    return RedirectResponse(f"/owners/{owner_id}", status_code=status.HTTP_303_SEE_OTHER)


def _replace_pet(pets: List[Pet], updated: Pet) -> List[Pet]:
    return [updated if pet.id == updated.id else pet for pet in pets]
