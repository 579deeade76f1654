"""
Owner pages.

These routes create, find, edit and display owners.  Successful form
submissions redirect to the owner's detail page (POST/redirect/GET)
with a flash message; failed ones re‑render the form with field
errors.  Unknown owner ids answer 404.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request, status
from fastapi.responses import RedirectResponse

from petclinic.app.core.binding import BindingResult
from petclinic.app.core.config import settings
from petclinic.app.schemas.owner import Owner
from petclinic.app.services.owner_repository import OwnerRepository
from petclinic.app.web.deps import get_owner_repository
from petclinic.app.web.flash import flash, pop_flashes
from petclinic.app.web.forms import bind_owner
from petclinic.app.web.templating import templates

logger = logging.getLogger(__name__)

router = APIRouter()

VIEWS_OWNER_CREATE_OR_UPDATE_FORM = "owners/create_or_update_owner_form.html"
VIEWS_FIND_OWNERS = "owners/find_owners.html"
VIEWS_OWNERS_LIST = "owners/owners_list.html"
VIEWS_OWNER_DETAILS = "owners/owner_details.html"

# keeps the row offset inside SQLite's INTEGER range
MAX_PAGE = 100_000


def load_owner(owners: OwnerRepository, owner_id: int) -> Owner:
    try:
        return owners.find_by_id(owner_id)
    except (ValueError, OverflowError) as e:
        # ids outside SQLite's 64-bit INTEGER range overflow instead of missing
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail=f"Owner {owner_id} not found"
        ) from e


def _render_owner_form(request: Request, owner: Owner, errors: BindingResult, error: Optional[str] = None):
    return templates.TemplateResponse(
        request,
        VIEWS_OWNER_CREATE_OR_UPDATE_FORM,
        {"owner": owner, "errors": errors, "error": error},
    )


@router.get("/new")
async def init_creation_form(request: Request):
    """Show an empty owner form."""
    return _render_owner_form(request, Owner(), BindingResult("owner"))


@router.post("/new")
async def process_creation_form(
    request: Request,
    owners: OwnerRepository = Depends(get_owner_repository),
):
    """Create an owner from the submitted form."""
    owner, result = bind_owner(await request.form())
    if result.has_errors():
        return _render_owner_form(
            request, owner, result, error="There was an error in creating the owner."
        )

    owners.save(owner)
    flash(request, "message", "New Owner Created")
    return RedirectResponse(f"/owners/{owner.id}", status_code=status.HTTP_303_SEE_OTHER)


@router.get("/find")
async def init_find_form(request: Request):
    """Show the owner search form."""
    return templates.TemplateResponse(
        request,
        VIEWS_FIND_OWNERS,
        {"owner": Owner(), "errors": BindingResult("owner")},
    )


@router.get("")
async def process_find_form(
    request: Request,
    page: int = Query(1, ge=1, le=MAX_PAGE),
    last_name: Optional[str] = Query(None, alias="lastName"),
    owners: OwnerRepository = Depends(get_owner_repository),
):
    """Search owners by last name prefix.

    - **page**: 1‑indexed page of results, 5 owners per page.
    - **lastName**: prefix to match; omitted or empty matches everyone.

    No match re‑renders the search form with an error, a single match
    redirects to that owner and several matches render a paginated list.
    """
    if last_name is None:
        # empty string signifies the broadest possible search
        last_name = ""
    owner = Owner(last_name=last_name)
    result = BindingResult("owner")

    # Pages are 1-indexed in the URL and 0-indexed in the repository
    owners_results = owners.find_by_last_name(last_name, page - 1, settings.owners_page_size)
    logger.debug(
        "Owner search lastName=%r page=%d matched %d owners",
        last_name, page, owners_results.total_elements,
    )
    if owners_results.is_empty:
        result.reject_value("lastName", "notFound", "not found", last_name)
        return templates.TemplateResponse(
            request, VIEWS_FIND_OWNERS, {"owner": owner, "errors": result}
        )

    if owners_results.total_elements == 1:
        found = owners_results.content[0]
        return RedirectResponse(f"/owners/{found.id}", status_code=status.HTTP_302_FOUND)

    return templates.TemplateResponse(
        request,
        VIEWS_OWNERS_LIST,
        {
            "currentPage": page,
            "totalPages": owners_results.total_pages,
            "totalItems": owners_results.total_elements,
            "listOwners": owners_results.content,
            "lastName": last_name,
        },
    )


@router.get("/{owner_id}/edit")
async def init_update_owner_form(
    request: Request,
    owner_id: int,
    owners: OwnerRepository = Depends(get_owner_repository),
):
    """Show the owner form filled with the stored values."""
    owner = load_owner(owners, owner_id)
    return _render_owner_form(request, owner, BindingResult("owner"))


@router.post("/{owner_id}/edit")
async def process_update_owner_form(
    request: Request,
    owner_id: int,
    owners: OwnerRepository = Depends(get_owner_repository),
):
    """Update an owner; the id always comes from the path."""
    stored = load_owner(owners, owner_id)
    owner, result = bind_owner(await request.form())
    owner.id = owner_id
    if result.has_errors():
        return _render_owner_form(
            request, owner, result, error="There was an error in updating the owner."
        )

    # Pets are not part of the owner form; keep the stored ones
    owner.pets = stored.pets
    owners.save(owner)
    flash(request, "message", "Owner Values Updated")
    return RedirectResponse(f"/owners/{owner_id}", status_code=status.HTTP_303_SEE_OTHER)


@router.get("/{owner_id}")
async def show_owner(
    request: Request,
    owner_id: int,
    owners: OwnerRepository = Depends(get_owner_repository),
):
    """Display an owner and their pets."""
    owner = load_owner(owners, owner_id)
    context = {"owner": owner}
    context.update(pop_flashes(request))
    return templates.TemplateResponse(request, VIEWS_OWNER_DETAILS, context)
