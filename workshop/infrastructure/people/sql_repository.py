"""
Adapter: Relational person repository.

Implements PersonRepository port with hand-written, parameterized
statements over the `person` table. Works with any SQLAlchemy dialect
that supports plain UPDATE/INSERT (PostgreSQL in production, SQLite in tests).
"""

import logging
from typing import Optional

from sqlalchemy import text

from workshop.domain.people.entities import Person, PersonSortKey, SortDirection
from workshop.domain.people.ports import PersonRepository
from workshop.infrastructure.db import SqlTransactionManager
from workshop.infrastructure.people.schema import PERSON_TABLE

logger = logging.getLogger(__name__)

# Column names are interpolated into ORDER BY, so only these may be used.
_SORT_COLUMNS = {
    PersonSortKey.FIRST_NAME: "first_name",
    PersonSortKey.LAST_NAME: "last_name",
}
_DIRECTIONS = {
    SortDirection.ASC: "ASC",
    SortDirection.DESC: "DESC",
}


class SqlPersonRepository(PersonRepository):
    """Persists people to a relational database.

    Implements the PersonRepository port defined in the domain layer.
    Joins the transaction opened by the given SqlTransactionManager
    when one is active.
    """

    def __init__(self, transactions: SqlTransactionManager) -> None:
        self._transactions = transactions

    def save(self, person: Person) -> Person:
        """Update the row with the person's id, inserting it if missing.

        Args:
            person: Person entity to persist.

        Returns:
            The same person.
        """
        params = {
            "id": person.id,
            "first_name": person.first_name,
            "last_name": person.last_name,
        }
        with self._transactions.connection() as conn:
            result = conn.execute(
                text(
                    f"""
                    UPDATE {PERSON_TABLE}
                    SET first_name = :first_name, last_name = :last_name
                    WHERE id = :id
                    """
                ),
                params,
            )
            if result.rowcount == 0:
                conn.execute(
                    text(
                        f"""
                        INSERT INTO {PERSON_TABLE} (id, first_name, last_name)
                        VALUES (:id, :first_name, :last_name)
                        """
                    ),
                    params,
                )
        logger.debug("Saved person id=%s.", person.id)
        return person

    def find_by_id(self, person_id: str) -> Optional[Person]:
        """Return the person with the id, or None if no row matches."""
        with self._transactions.connection() as conn:
            row = conn.execute(
                text(
                    f"""
                    SELECT id, first_name, last_name
                    FROM {PERSON_TABLE}
                    WHERE id = :id
                    """
                ),
                {"id": person_id},
            ).mappings().first()
        if row is None:
            return None
        return Person.restore(row["id"], row["first_name"], row["last_name"])

    def delete_by_id(self, person_id: str) -> None:
        """Delete the row with the id. Deleting a missing id is a no-op."""
        with self._transactions.connection() as conn:
            conn.execute(
                text(f"DELETE FROM {PERSON_TABLE} WHERE id = :id"),
                {"id": person_id},
            )

    def find_page(
        self,
        sort_key: PersonSortKey,
        direction: SortDirection,
        page: int,
        size: int,
    ) -> tuple[list[Person], int]:
        """Return one ordered page of people and the total row count.

        Args:
            sort_key: Field to order by. Ties are broken by id.
            direction: Ascending or descending order.
            page: Zero-based page index.
            size: Maximum number of rows on the page.
        """
        column = _SORT_COLUMNS[sort_key]
        order = _DIRECTIONS[direction]
        with self._transactions.connection() as conn:
            total = conn.execute(
                text(f"SELECT COUNT(*) FROM {PERSON_TABLE}")
            ).scalar_one()
            rows = conn.execute(
                text(
                    f"""
                    SELECT id, first_name, last_name
                    FROM {PERSON_TABLE}
                    ORDER BY {column} {order}, id {order}
                    LIMIT :limit OFFSET :offset
                    """
                ),
                {"limit": size, "offset": page * size},
            ).mappings().all()

        return (
            [
                Person.restore(row["id"], row["first_name"], row["last_name"])
                for row in rows
            ],
            total,
        )
