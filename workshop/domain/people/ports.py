"""
Port interfaces (ABCs) for the people bounded context.

Ports define the contracts that the domain requires from the outside world.
Infrastructure adapters implement these interfaces.
The domain layer never depends on concrete implementations.
"""

from abc import ABC, abstractmethod
from contextlib import contextmanager
from typing import Iterator, Optional

from workshop.domain.people.entities import Person, PersonSortKey, SortDirection


class PersonRepository(ABC):
    """Port for persisting, retrieving and deleting people."""

    @abstractmethod
    def save(self, person: Person) -> Person:
        """Insert the person, or replace the stored person with the same id.

        Store failures (e.g. constraint violations) propagate untranslated.

        Returns:
            The persisted person.
        """
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, person_id: str) -> Optional[Person]:
        """Return the person stored under the id, or None if absent."""
        raise NotImplementedError

    @abstractmethod
    def delete_by_id(self, person_id: str) -> None:
        """Remove the person stored under the id. Missing ids are ignored."""
        raise NotImplementedError

    @abstractmethod
    def find_page(
        self,
        sort_key: PersonSortKey,
        direction: SortDirection,
        page: int,
        size: int,
    ) -> tuple[list[Person], int]:
        """Return one page of people and the total number of people.

        Args:
            sort_key: Field to order by. Ties are broken by id.
            direction: Ascending or descending order.
            page: Zero-based page index.
            size: Maximum number of people on the page.

        Returns:
            The people on the requested page and the total count.
        """
        raise NotImplementedError


class TransactionManager(ABC):
    """Port for scoping a unit of work in a single transaction."""

    @abstractmethod
    def transaction(self):
        """Return a context manager spanning one transaction.

        Leaving the block normally commits. An escaping exception
        rolls back and propagates.
        """
        raise NotImplementedError


class NullTransactionManager(TransactionManager):
    """Transaction manager for stores with no transactional guarantees."""

    @contextmanager
    def transaction(self) -> Iterator[None]:
        yield
