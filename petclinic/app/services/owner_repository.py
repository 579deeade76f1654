"""
Persistence for owners, their pets and the pet type reference data.

``OwnerRepository`` is constructed with a connection factory and
opens one connection per call, closing it before returning.  The web
layer obtains an instance through a FastAPI dependency, which keeps
the repository replaceable in tests.

All queries use parameterized statements.  Pets are saved together
with their owner: ``save`` inserts or updates the owner row and then
every pet in ``owner.pets``.
"""

from __future__ import annotations

import logging
import sqlite3
from typing import Callable, Dict, List

from ..schemas.owner import Owner
from ..schemas.page import Page
from ..schemas.pet import Pet, PetType

logger = logging.getLogger(__name__)

OWNER_COLUMNS = "id, first_name, last_name, address, city, telephone"


class OwnerRepository:
    """Repository for ``Owner`` aggregates."""

    def __init__(self, connection_factory: Callable[[], sqlite3.Connection]) -> None:
        self._connect = connection_factory

    def find_pet_types(self) -> List[PetType]:
        """Return every pet type ordered by name."""
        conn = self._connect()
        try:
            rows = conn.execute("SELECT id, name FROM types ORDER BY name").fetchall()
            return [PetType(id=row["id"], name=row["name"]) for row in rows]
        finally:
            conn.close()

    def find_by_id(self, owner_id: int) -> Owner:
        """Load an owner with its pets.

        Raises ``ValueError`` if no owner has the given id.
        """
        conn = self._connect()
        try:
            row = conn.execute(
                f"SELECT {OWNER_COLUMNS} FROM owners WHERE id = ?",
                (owner_id,),
            ).fetchone()
            if not row:
                raise ValueError(f"Owner {owner_id} not found")
            owner = self._row_to_owner(row)
            owner.pets = self._load_pets(conn, [owner.id])[owner.id]
            return owner
        finally:
            conn.close()

    def find_by_last_name(self, last_name: str, page: int, size: int) -> Page[Owner]:
        """Return owners whose last name starts with ``last_name``.

        ``page`` is 0‑indexed.  An empty ``last_name`` matches every
        owner.  Results are ordered by id so that pages are stable.
        """
        pattern = self._escape_like(last_name) + "%"
        conn = self._connect()
        try:
            total = conn.execute(
                "SELECT COUNT(*) AS total FROM owners WHERE last_name LIKE ? ESCAPE '\\'",
                (pattern,),
            ).fetchone()["total"]
            rows = conn.execute(
                f"""
                SELECT {OWNER_COLUMNS} FROM owners
                WHERE last_name LIKE ? ESCAPE '\\'
                ORDER BY id
                LIMIT ? OFFSET ?
                """,
                (pattern, size, page * size),
            ).fetchall()
            owners = [self._row_to_owner(row) for row in rows]
            if owners:
                pets_by_owner = self._load_pets(conn, [owner.id for owner in owners])
                for owner in owners:
                    owner.pets = pets_by_owner[owner.id]
            return Page[Owner](content=owners, number=page, size=size, total_elements=total)
        finally:
            conn.close()

    def save(self, owner: Owner) -> None:
        """Insert or update ``owner`` and cascade to its pets.

        Ids generated by the database are assigned to the owner and to
        every new pet in place.
        """
        conn = self._connect()
        try:
            cursor = conn.cursor()
            values = (owner.first_name, owner.last_name, owner.address, owner.city, owner.telephone)
            if owner.is_new:
                cursor.execute(
                    """
                    INSERT INTO owners (first_name, last_name, address, city, telephone)
                    VALUES (?, ?, ?, ?, ?)
                    """,
                    values,
                )
                owner.id = cursor.lastrowid
                logger.info("Created owner %s (%s)", owner.id, owner.full_name)
            else:
                cursor.execute(
                    """
                    UPDATE owners
                    SET first_name = ?, last_name = ?, address = ?, city = ?, telephone = ?,
                        updated_at = CURRENT_TIMESTAMP
                    WHERE id = ?
                    """,
                    values + (owner.id,),
                )
                if cursor.rowcount == 0:
                    raise ValueError(f"Owner {owner.id} not found")
                logger.info("Updated owner %s", owner.id)
            for pet in owner.pets:
                self._save_pet(cursor, owner.id, pet)
            conn.commit()
        finally:
            conn.close()

    @staticmethod
    def _save_pet(cursor: sqlite3.Cursor, owner_id: int, pet: Pet) -> None:
        pet.owner_id = owner_id
        birth_date = pet.birth_date.isoformat() if pet.birth_date else None
        if pet.is_new:
            cursor.execute(
                """
                INSERT INTO pets (name, birth_date, type_id, owner_id)
                VALUES (?, ?, ?, ?)
                """,
                (pet.name, birth_date, pet.type.id if pet.type else None, owner_id),
            )
            pet.id = cursor.lastrowid
            logger.info("Created pet %s for owner %s", pet.id, owner_id)
        elif pet.type is not None:
            cursor.execute(
                "UPDATE pets SET name = ?, birth_date = ?, type_id = ? WHERE id = ? AND owner_id = ?",
                (pet.name, birth_date, pet.type.id, pet.id, owner_id),
            )
        else:
            # The stored type is kept when an edit does not supply one
            cursor.execute(
                "UPDATE pets SET name = ?, birth_date = ? WHERE id = ? AND owner_id = ?",
                (pet.name, birth_date, pet.id, owner_id),
            )

    @staticmethod
    def _load_pets(conn: sqlite3.Connection, owner_ids: List[int]) -> Dict[int, List[Pet]]:
        placeholders = ", ".join("?" for _ in owner_ids)
        rows = conn.execute(
            f"""
            SELECT p.id, p.name, p.birth_date, p.owner_id, t.id AS type_id, t.name AS type_name
            FROM pets p JOIN types t ON t.id = p.type_id
            WHERE p.owner_id IN ({placeholders})
            ORDER BY p.name
            """,
            tuple(owner_ids),
        ).fetchall()
        pets: Dict[int, List[Pet]] = {owner_id: [] for owner_id in owner_ids}
        for row in rows:
            pets[row["owner_id"]].append(
                Pet(
                    id=row["id"],
                    name=row["name"],
                    birth_date=row["birth_date"],
                    type=PetType(id=row["type_id"], name=row["type_name"]),
                    owner_id=row["owner_id"],
                )
            )
        return pets

    @staticmethod
    def _row_to_owner(row: sqlite3.Row) -> Owner:
        return Owner(
            id=row["id"],
            first_name=row["first_name"],
            last_name=row["last_name"],
            address=row["address"],
            city=row["city"],
            telephone=row["telephone"],
        )

    @staticmethod
    def _escape_like(value: str) -> str:
        return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
