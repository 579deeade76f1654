"""
Pydantic models for the clinic domain.

``Owner``, ``Pet`` and ``PetType`` are the in‑memory records shuttled
between HTML forms, templates and the repository.  ``Page`` wraps one
slice of a paginated query result.
"""
