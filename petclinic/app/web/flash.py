"""
One‑shot messages carried across a redirect.

Messages are stored in the signed session cookie maintained by
Starlette's ``SessionMiddleware`` and removed the first time a page
reads them.
"""

from typing import Dict

from fastapi import Request

FLASH_KEY = "_flashes"


def flash(request: Request, key: str, message: str) -> None:
    """Queue ``message`` under ``key`` (``"message"`` or ``"error"``) for the next page."""
    flashes = dict(request.session.get(FLASH_KEY, {}))
    flashes[key] = message
    request.session[FLASH_KEY] = flashes


def pop_flashes(request: Request) -> Dict[str, str]:
    return request.session.pop(FLASH_KEY, {})
