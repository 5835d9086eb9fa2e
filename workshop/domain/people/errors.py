"""
Domain-specific errors for the people bounded context.

All errors raised from the domain and application layers are defined here.
These are mapped to HTTP responses at the interface layer.
No framework imports allowed.
"""

from typing import Iterable


class PeopleDomainError(Exception):
    """Base error for all people domain errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class PersonNotFoundError(PeopleDomainError):
    """Raised when no person is stored under the requested id."""

    def __init__(self, person_id: str) -> None:
        super().__init__(f"Person with id {person_id} not found")
        self.person_id = person_id


class ValidationFailedError(PeopleDomainError):
    """Raised when one or more fields of a person violate a constraint."""

    def __init__(self, violations: Iterable[str]) -> None:
        self.violations = list(violations)
        super().__init__(". ".join(self.violations))


class UnknownSortKeyError(PeopleDomainError):
    """Raised when a listing is requested with an unsupported sort key."""

    def __init__(self, sort_key: str, allowed: Iterable[str]) -> None:
        self.allowed = list(allowed)
        super().__init__(
            f"Unknown sort key: {sort_key}. "
            f"Allowed values are: {', '.join(self.allowed)}"
        )
        self.sort_key = sort_key
