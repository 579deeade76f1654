"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables, with a default for every field.  Override the
values through the environment (or a process manager) in production;
tests assign attributes on the shared ``settings`` instance instead.
"""

import os
from dataclasses import dataclass


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "PetClinic")
    app_version: str = os.getenv("APP_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")

    # Key used to sign the session cookie that carries flash messages
    # between a form submission and the page it redirects to.
    secret_key: str = os.getenv("SECRET_KEY", "change_me")

    # Path to the SQLite database.  A relative path is resolved against
    # the project root by the ``db`` module.
    database_url: str = os.getenv("DATABASE_URL", "petclinic.db")

    # Number of owners shown per page of search results.
    owners_page_size: int = int(os.getenv("OWNERS_PAGE_SIZE", "5"))

    # Insert the demo owners and pets into an empty database on startup.
    seed_sample_data: bool = os.getenv("SEED_SAMPLE_DATA", "true").lower() in {"1", "true", "yes"}

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "8000"))


# Environment variables must be set before this module is imported;
# the dataclass defaults are evaluated once, at class creation.
settings = Settings()
