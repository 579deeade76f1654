"""
SQLite database integration and simple migration system.

This module provides ``get_connection`` for obtaining a connection,
``get_cursor`` for short transactional blocks and ``init_db`` which
applies pending migrations on application start.  Applied versions
are recorded in the ``migrations`` table and new migrations run in
order.  Dates are stored as ISO ``YYYY-MM-DD`` text.
"""

import logging
import os
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

from .config import settings

logger = logging.getLogger(__name__)


MIGRATIONS: list[tuple[int, str]] = [
    # Migration 1: initial schema
    (
        1,
        """
        CREATE TABLE IF NOT EXISTS types (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            name TEXT NOT NULL UNIQUE
        );

        CREATE TABLE IF NOT EXISTS owners (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            first_name TEXT NOT NULL,
            last_name TEXT NOT NULL,
            address TEXT NOT NULL,
            city TEXT NOT NULL,
            telephone TEXT NOT NULL,
            created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
            updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
        );

        CREATE TABLE IF NOT EXISTS pets (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            name TEXT NOT NULL,
            birth_date DATE NOT NULL,
            type_id INTEGER NOT NULL,
            owner_id INTEGER NOT NULL,
            FOREIGN KEY(type_id) REFERENCES types(id),
            FOREIGN KEY(owner_id) REFERENCES owners(id)
        );

        CREATE INDEX IF NOT EXISTS idx_owners_last_name ON owners(last_name);
        CREATE INDEX IF NOT EXISTS idx_pets_owner_id ON pets(owner_id);
        """,
    ),
    # Migration 2: reference pet types
    (
        2,
        """
        INSERT OR IGNORE INTO types (name) VALUES ('bird');
        INSERT OR IGNORE INTO types (name) VALUES ('cat');
        INSERT OR IGNORE INTO types (name) VALUES ('dog');
        INSERT OR IGNORE INTO types (name) VALUES ('hamster');
        INSERT OR IGNORE INTO types (name) VALUES ('lizard');
        INSERT OR IGNORE INTO types (name) VALUES ('snake');
        """,
    ),
]

SAMPLE_OWNERS = [
    ("George", "Franklin", "110 W. Liberty St.", "Madison", "6085551023",
     [("Leo", "2010-09-07", "cat")]),
    ("Betty", "Davis", "638 Cardinal Ave.", "Sun Prairie", "6085551749",
     [("Basil", "2012-08-06", "hamster")]),
    ("Eduardo", "Rodriquez", "2693 Commerce St.", "McFarland", "6085558763",
     [("Rosy", "2011-04-17", "dog"), ("Jewel", "2010-03-07", "dog")]),
    ("Harold", "Davis", "563 Friendly St.", "Windsor", "6085553198",
     [("Iggy", "2010-11-30", "lizard")]),
    ("Peter", "McTavish", "2387 S. Fair Way", "Madison", "6085552765",
     [("George", "2010-01-20", "snake")]),
    ("Jean", "Coleman", "105 N. Lake St.", "Monona", "6085552654",
     [("Samantha", "2012-09-04", "cat"), ("Max", "2012-09-04", "cat")]),
    ("Jeff", "Black", "1450 Oak Blvd.", "Monona", "6085555387",
     [("Lucky", "2011-08-06", "bird")]),
    ("Maria", "Escobito", "345 Maple St.", "Madison", "6085557683",
     [("Mulligan", "2007-02-24", "dog")]),
    ("David", "Schroeder", "2749 Blackhawk Trail", "Madison", "6085559435",
     [("Freddy", "2010-03-09", "bird")]),
    ("Carlos", "Estaban", "2335 Independence La.", "Waunakee", "6085555487",
     [("Lucky", "2010-06-24", "dog"), ("Sly", "2012-06-08", "cat")]),
]


def get_database_path() -> str:
    """Compute the path to the SQLite database file.

    Absolute paths in ``settings.database_url`` are used as is; relative
    paths are resolved against the ``petclinic`` package directory.
    """
    db_url = settings.database_url
    if os.path.isabs(db_url):
        return db_url
    base_dir = Path(__file__).resolve().parent.parent.parent  # petclinic/
    return str((base_dir / db_url).resolve())


def get_connection() -> sqlite3.Connection:
    """Create and return a new SQLite connection.

    Rows are returned as ``sqlite3.Row`` so columns can be read by
    name, and foreign key enforcement is switched on for the lifetime
    of the connection (SQLite disables it by default).
    """
    conn = sqlite3.connect(get_database_path())
    conn.row_factory = sqlite3.Row
    conn.execute("PRAGMA foreign_keys = ON")
    return conn


@contextmanager
def get_cursor() -> Iterator[sqlite3.Cursor]:
    """Yield a cursor, commit on success and always close the connection."""
    conn = get_connection()
    try:
        yield conn.cursor()
        conn.commit()
    finally:
        conn.close()


def _seed_sample_data(cursor: sqlite3.Cursor) -> None:
    """Insert the demo owners and their pets into an empty owners table."""
    row = cursor.execute("SELECT COUNT(*) AS total FROM owners").fetchone()
    if row["total"]:
        return
    for first_name, last_name, address, city, telephone, pets in SAMPLE_OWNERS:
        cursor.execute(
            """
            INSERT INTO owners (first_name, last_name, address, city, telephone)
            VALUES (?, ?, ?, ?, ?)
            """,
            (first_name, last_name, address, city, telephone),
        )
        owner_id = cursor.lastrowid
        for name, birth_date, type_name in pets:
            cursor.execute(
                """
                INSERT INTO pets (name, birth_date, type_id, owner_id)
                VALUES (?, ?, (SELECT id FROM types WHERE name = ?), ?)
                """,
                (name, birth_date, type_name, owner_id),
            )
    logger.info("Seeded %d sample owners", len(SAMPLE_OWNERS))


def init_db() -> None:
    """Initialise the database and apply pending migrations.

    To change the schema append a new ``(version, sql)`` pair to
    ``MIGRATIONS`` with the next version number; never edit an applied
    migration.
    """
    with get_cursor() as cursor:
        cursor.execute(
            "CREATE TABLE IF NOT EXISTS migrations (version INTEGER PRIMARY KEY)"
        )
        cursor.execute("SELECT MAX(version) AS version FROM migrations")
        row = cursor.fetchone()
        current_version = row["version"] if row and row["version"] is not None else 0

        for version, sql in MIGRATIONS:
            if version > current_version:
                cursor.executescript(sql)
                cursor.execute(
                    "INSERT INTO migrations (version) VALUES (?)", (version,)
                )
                logger.info("Applied database migration %d", version)
                current_version = version

        if settings.seed_sample_data:
            _seed_sample_data(cursor)
