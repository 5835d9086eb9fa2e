"""
Domain entities for the people bounded context.

Entities represent core business objects with identity and lifecycle.
They contain no framework imports and no IO operations.
"""

from enum import Enum
from uuid import uuid4

from workshop.domain.people.errors import UnknownSortKeyError, ValidationFailedError

FIRST_NAME_NOT_EMPTY = "First name must not be empty"
LAST_NAME_NOT_EMPTY = "Last name must not be empty"


def _check_names(first_name: str, last_name: str) -> None:
    """Raise ValidationFailedError listing every empty name."""
    violations = []
    if not first_name:
        violations.append(FIRST_NAME_NOT_EMPTY)
    if not last_name:
        violations.append(LAST_NAME_NOT_EMPTY)
    if violations:
        raise ValidationFailedError(violations)


class Person:
    """A person with a generated, immutable identity and two mutable names.

    Two Person instances are equal if and only if they share the same id,
    regardless of their names.
    """

    __slots__ = ("_id", "_first_name", "_last_name")

    def __init__(self, first_name: str, last_name: str) -> None:
        _check_names(first_name, last_name)
        self._id = str(uuid4())
        self._first_name = first_name
        self._last_name = last_name

    @classmethod
    def restore(cls, person_id: str, first_name: str, last_name: str) -> "Person":
        """Rehydrate a stored person without generating a new id."""
        person = cls.__new__(cls)
        person._id = person_id
        person._first_name = first_name
        person._last_name = last_name
        return person

    @property
    def id(self) -> str:
        return self._id

    @property
    def first_name(self) -> str:
        return self._first_name

    @property
    def last_name(self) -> str:
        return self._last_name

    def rename(self, first_name: str, last_name: str) -> None:
        """Replace both names at once.

        Raises:
            ValidationFailedError: If either name is empty. The person
                is left unchanged in that case.
        """
        _check_names(first_name, last_name)
        self._first_name = first_name
        self._last_name = last_name

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Person):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return (
            f"Person(id={self._id!r}, first_name={self._first_name!r}, "
            f"last_name={self._last_name!r})"
        )


class PersonSortKey(Enum):
    """Fields a person listing may be ordered by.

    Values are the names used on the API.
    """

    FIRST_NAME = "firstName"
    LAST_NAME = "lastName"

    @classmethod
    def parse(cls, value: str) -> "PersonSortKey":
        """Return the sort key matching an API value.

        Raises:
            UnknownSortKeyError: If the value names no known sort key.
        """
        for key in cls:
            if key.value == value:
                return key
        raise UnknownSortKeyError(value, [key.value for key in cls])


class SortDirection(Enum):
    """Ordering direction for a listing."""

    ASC = "asc"
    DESC = "desc"
