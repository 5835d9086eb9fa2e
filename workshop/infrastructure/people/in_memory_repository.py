"""
Adapter: In-memory person repository.

Implements PersonRepository port on top of a plain dict.
Not safe for concurrent writers; intended for local runs and tests.
"""

from typing import Optional

from workshop.domain.people.entities import Person, PersonSortKey, SortDirection
from workshop.domain.people.ports import PersonRepository

_SORT_ATTRIBUTES = {
    PersonSortKey.FIRST_NAME: "first_name",
    PersonSortKey.LAST_NAME: "last_name",
}


class InMemoryPersonRepository(PersonRepository):
    """Keeps people in a dict keyed by id."""

    def __init__(self) -> None:
        self._persons: dict[str, Person] = {}

    def save(self, person: Person) -> Person:
        self._persons[person.id] = person
        return person

    def find_by_id(self, person_id: str) -> Optional[Person]:
        return self._persons.get(person_id)

    def delete_by_id(self, person_id: str) -> None:
        self._persons.pop(person_id, None)

    def find_page(
        self,
        sort_key: PersonSortKey,
        direction: SortDirection,
        page: int,
        size: int,
    ) -> tuple[list[Person], int]:
        attribute = _SORT_ATTRIBUTES[sort_key]
        ordered = sorted(
            self._persons.values(),
            key=lambda p: (getattr(p, attribute), p.id),
            reverse=direction is SortDirection.DESC,
        )
        start = page * size
        return ordered[start:start + size], len(ordered)
