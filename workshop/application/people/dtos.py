"""
Data Transfer Objects for the people application layer.

DTOs carry data between the interface and application layers.
They are plain dataclasses with no behavior.
"""

from dataclasses import dataclass

from workshop.domain.people.entities import SortDirection

DEFAULT_PAGE_SIZE = 20
MAX_PAGE_SIZE = 100
DEFAULT_SORT_BY = "lastName"


@dataclass(frozen=True)
class PersonDto:
    """Output DTO for a single person.

    Attributes:
        id: Identifier assigned when the person was created.
        first_name: The person's first name.
        last_name: The person's last name.
    """

    id: str
    first_name: str
    last_name: str


@dataclass(frozen=True)
class PageSpec:
    """Input DTO describing which page of people to list.

    Attributes:
        page: Zero-based page index.
        size: Maximum number of people per page.
        sort_by: API name of the field to order by. Validated by the service.
        direction: Ordering direction.
    """

    page: int = 0
    size: int = DEFAULT_PAGE_SIZE
    sort_by: str = DEFAULT_SORT_BY
    direction: SortDirection = SortDirection.ASC


@dataclass(frozen=True)
class PageDto:
    """Output DTO for one page of people.

    Attributes:
        items: People on this page.
        page: Zero-based page index.
        size: Requested page size.
        total_count: Number of people across all pages.
    """

    items: list[PersonDto]
    page: int
    size: int
    total_count: int

    @property
    def total_pages(self) -> int:
        """Number of pages needed to hold every person."""
        if self.size <= 0:
            return 0
        return -(-self.total_count // self.size)
