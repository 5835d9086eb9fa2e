"""
FastAPI router for the people bounded context.

All routes delegate to the PersonService. No business logic here.
Input validation is handled by Pydantic schemas.
Error mapping is handled by centralized error handlers.
"""

from fastapi import APIRouter, Depends, Query, Response

from workshop.application.people.dtos import (
    DEFAULT_PAGE_SIZE,
    DEFAULT_SORT_BY,
    MAX_PAGE_SIZE,
    PageSpec,
    PersonDto,
)
from workshop.application.people.service import PersonService
from workshop.domain.people.entities import SortDirection
from workshop.interfaces.people.dependencies import get_person_service
from workshop.interfaces.people.schemas import (
    PersonPageResponse,
    PersonRequest,
    PersonResponse,
    ProblemResponse,
)
from workshop.shared.security.auth import require_bearer_token

router = APIRouter(
    prefix="/persons",
    tags=["persons"],
    dependencies=[Depends(require_bearer_token)],
    responses={401: {"model": ProblemResponse}},
)


def _to_response(dto: PersonDto) -> PersonResponse:
    return PersonResponse(
        id=dto.id,
        first_name=dto.first_name,
        last_name=dto.last_name,
    )


@router.post(
    "",
    response_model=PersonResponse,
    responses={400: {"model": ProblemResponse}},
    summary="Create a person",
    description="Create a person and return it with its generated id.",
)
def create_person(
    request: PersonRequest,
    service: PersonService = Depends(get_person_service),
) -> PersonResponse:
    """Create a person from a first and last name."""
    return _to_response(
        service.create_person(request.first_name, request.last_name)
    )


@router.get(
    "",
    response_model=PersonPageResponse,
    responses={400: {"model": ProblemResponse}},
    summary="List people",
    description="Return one page of people sorted by firstName or lastName.",
)
def list_persons(
    page: int = Query(0, ge=0, description="Zero-based page index"),
    size: int = Query(DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE, description="Page size"),
    sort_by: str = Query(DEFAULT_SORT_BY, alias="sortBy", description="firstName or lastName"),
    direction: SortDirection = Query(SortDirection.ASC, description="asc or desc"),
    service: PersonService = Depends(get_person_service),
) -> PersonPageResponse:
    """List people one page at a time."""
    result = service.list_persons(
        PageSpec(page=page, size=size, sort_by=sort_by, direction=direction)
    )
    return PersonPageResponse(
        items=[_to_response(dto) for dto in result.items],
        page=result.page,
        size=result.size,
        total_count=result.total_count,
        total_pages=result.total_pages,
    )


@router.get(
    "/{person_id}",
    response_model=PersonResponse,
    responses={404: {"model": ProblemResponse}},
    summary="Retrieve a person",
)
def retrieve_person(
    person_id: str,
    service: PersonService = Depends(get_person_service),
) -> PersonResponse:
    """Return the person with the given id."""
    return _to_response(service.retrieve_person_by_id(person_id))


@router.put(
    "/{person_id}",
    response_model=PersonResponse,
    responses={400: {"model": ProblemResponse}, 404: {"model": ProblemResponse}},
    summary="Rename a person",
    description="Replace both names of an existing person.",
)
def update_person(
    person_id: str,
    request: PersonRequest,
    service: PersonService = Depends(get_person_service),
) -> PersonResponse:
    """Replace the first and last name of the person with the given id."""
    return _to_response(
        service.update_person(person_id, request.first_name, request.last_name)
    )


@router.delete(
    "/{person_id}",
    status_code=200,
    response_class=Response,
    summary="Delete a person",
    description="Delete the person with the given id. Unknown ids succeed.",
)
def delete_person(
    person_id: str,
    service: PersonService = Depends(get_person_service),
) -> Response:
    """Delete the person with the given id."""
    service.delete_person_by_id(person_id)
    return Response(status_code=200)
