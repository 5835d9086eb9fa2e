"""
Dependency providers for the people bounded context.

The service is assembled once by the composition root (`create_app`)
and stored on the application state. Routes obtain it through
`get_person_service` so tests can override it.
"""

from fastapi import Request

from workshop.application.people.service import PersonService


def get_person_service(request: Request) -> PersonService:
    """Return the PersonService wired at startup."""
    return request.app.state.person_service
