"""
Application service for the people bounded context.

Operations: create, retrieve, update, delete and list people.
Side effects: writes through the PersonRepository port.
Failure cases: PersonNotFoundError, ValidationFailedError, UnknownSortKeyError.

Each operation runs inside a single transaction obtained from the
TransactionManager port. The Person entity never crosses this module's
public boundary; callers only ever see DTOs.
"""

import logging
from abc import ABC, abstractmethod
from typing import Optional

from workshop.application.people.dtos import PageDto, PageSpec, PersonDto
from workshop.domain.people.entities import Person, PersonSortKey
from workshop.domain.people.errors import PersonNotFoundError
from workshop.domain.people.ports import (
    NullTransactionManager,
    PersonRepository,
    TransactionManager,
)

logger = logging.getLogger(__name__)


class PersonService(ABC):
    """Use cases exposed to the interface layer."""

    @abstractmethod
    def create_person(self, first_name: str, last_name: str) -> PersonDto:
        raise NotImplementedError

    @abstractmethod
    def retrieve_person_by_id(self, person_id: str) -> PersonDto:
        raise NotImplementedError

    @abstractmethod
    def update_person(
        self, person_id: str, first_name: str, last_name: str
    ) -> PersonDto:
        raise NotImplementedError

    @abstractmethod
    def delete_person_by_id(self, person_id: str) -> None:
        raise NotImplementedError

    @abstractmethod
    def list_persons(self, page_spec: PageSpec) -> PageDto:
        raise NotImplementedError


class DefaultPersonService(PersonService):
    """Orchestrates person use cases over a PersonRepository."""

    def __init__(
        self,
        repository: PersonRepository,
        transactions: Optional[TransactionManager] = None,
    ) -> None:
        """Initialize the service.

        Args:
            repository: Repository holding the people.
            transactions: Scopes each operation in one transaction.
                Defaults to a manager that does nothing.
        """
        self._repository = repository
        self._transactions = transactions or NullTransactionManager()

    def create_person(self, first_name: str, last_name: str) -> PersonDto:
        """Create and persist a new person.

        Raises:
            ValidationFailedError: If either name is empty.
        """
        logger.info(
            "Creating person with first name %s and last name %s",
            first_name,
            last_name,
        )
        with self._transactions.transaction():
            person = Person(first_name, last_name)
            return self._to_dto(self._repository.save(person))

    def retrieve_person_by_id(self, person_id: str) -> PersonDto:
        """Return the person stored under the id.

        Raises:
            PersonNotFoundError: If no person has that id.
        """
        logger.info("Retrieving person with id %s", person_id)
        with self._transactions.transaction():
            return self._to_dto(self._require(person_id))

    def update_person(
        self, person_id: str, first_name: str, last_name: str
    ) -> PersonDto:
        """Replace both names of an existing person.

        Raises:
            PersonNotFoundError: If no person has that id.
            ValidationFailedError: If either name is empty.
        """
        logger.info(
            "Updating person with id %s to first name %s and last name %s",
            person_id,
            first_name,
            last_name,
        )
        with self._transactions.transaction():
            person = self._require(person_id)
            person.rename(first_name, last_name)
            return self._to_dto(self._repository.save(person))

    def delete_person_by_id(self, person_id: str) -> None:
        """Delete the person stored under the id, if any."""
        logger.info("Deleting person with id %s", person_id)
        with self._transactions.transaction():
            self._repository.delete_by_id(person_id)

    def list_persons(self, page_spec: PageSpec) -> PageDto:
        """Return one sorted page of people.

        Raises:
            UnknownSortKeyError: If page_spec.sort_by is not a known sort key.
        """
        logger.info("Listing persons with page spec %s", page_spec)
        sort_key = PersonSortKey.parse(page_spec.sort_by)
        with self._transactions.transaction():
            people, total = self._repository.find_page(
                sort_key=sort_key,
                direction=page_spec.direction,
                page=page_spec.page,
                size=page_spec.size,
            )
        return PageDto(
            items=[self._to_dto(p) for p in people],
            page=page_spec.page,
            size=page_spec.size,
            total_count=total,
        )

    def _require(self, person_id: str) -> Person:
        person = self._repository.find_by_id(person_id)
        if person is None:
            raise PersonNotFoundError(person_id)
        return person

    @staticmethod
    def _to_dto(person: Person) -> PersonDto:
        return PersonDto(
            id=person.id,
            first_name=person.first_name,
            last_name=person.last_name,
        )
