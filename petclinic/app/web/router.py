"""
Top‑level router for the HTML site.

Aggregates the area routers.  Owner and pet pages share the
``/owners`` prefix; the pet router declares the nested
``/{owner_id}/pets`` paths itself.
"""

from fastapi import APIRouter

from .endpoints import owners, pets, welcome

router = APIRouter()

router.include_router(welcome.router, tags=["welcome"])
router.include_router(owners.router, prefix="/owners", tags=["owners"])
router.include_router(pets.router, prefix="/owners", tags=["pets"])
