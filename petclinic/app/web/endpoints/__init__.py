"""
Endpoint modules.

Each module defines an ``APIRouter`` for one area of the site (owners,
pets, the welcome page).  They are aggregated in ``web/router.py``.
"""
