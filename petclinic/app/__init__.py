"""
Application package initializer.

The application is split by concern rather than by domain object:
``core`` holds configuration, logging, persistence bootstrap and the
binding‑result type; ``schemas`` the pydantic models for owners, pets
and pet types; ``services`` the repository, the pet validator and the
pet type formatter; ``web`` the HTML endpoints and their templates
helper.
"""

from .main import app  # noqa: F401
