"""
Top‑level package for the PetClinic web application.

The package itself exports nothing; the FastAPI application and all of
its building blocks live in the ``app`` subpackage so that they can be
imported with fully qualified names such as ``petclinic.app.main``.
"""

__all__ = []
