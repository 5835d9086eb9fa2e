"""
Tests for the people API endpoints.

Route-level tests mock the PersonService; scenario tests run the real
service over the in-memory repository. Validates request validation,
response schemas and error mapping.
"""

import logging

from fastapi.testclient import TestClient

from workshop.application.people.dtos import PageDto, PageSpec, PersonDto
from workshop.domain.people.entities import FIRST_NAME_NOT_EMPTY, SortDirection
from workshop.domain.people.errors import (
    PeopleDomainError,
    PersonNotFoundError,
    UnknownSortKeyError,
    ValidationFailedError,
)


class TestCreatePersonEndpoint:
    """Tests for POST /persons."""

    def test_calls_service_and_returns_dto(self, client, person_service) -> None:
        person_service.create_person.return_value = PersonDto("1", "John", "Doe")

        response = client.post("/persons", json={"firstName": "John", "lastName": "Doe"})

        assert response.status_code == 200
        assert response.json() == {"id": "1", "firstName": "John", "lastName": "Doe"}
        person_service.create_person.assert_called_once_with("John", "Doe")

    def test_empty_first_name_rejected_before_service(self, client, person_service) -> None:
        response = client.post("/persons", json={"firstName": "", "lastName": "Doe"})

        assert response.status_code == 400
        assert response.headers["content-type"].startswith("application/problem+json")
        assert response.json()["detail"] == "First name must not be empty"
        person_service.create_person.assert_not_called()

    def test_all_violations_concatenated(self, client, person_service) -> None:
        response = client.post("/persons", json={"firstName": "", "lastName": ""})

        assert response.status_code == 400
        assert response.json()["detail"] == (
            "First name must not be empty. Last name must not be empty"
        )

    def test_missing_field_rejected(self, client, person_service) -> None:
        response = client.post("/persons", json={"firstName": "John"})

        assert response.status_code == 400
        assert "lastName" in response.json()["detail"]
        person_service.create_person.assert_not_called()


class TestRetrievePersonEndpoint:
    """Tests for GET /persons/{id}."""

    def test_returns_person(self, client, person_service) -> None:
        person_service.retrieve_person_by_id.return_value = PersonDto("1", "John", "Doe")

        response = client.get("/persons/1")

        assert response.status_code == 200
        assert response.json() == {"id": "1", "firstName": "John", "lastName": "Doe"}
        person_service.retrieve_person_by_id.assert_called_once_with("1")

    def test_not_found_returns_problem(self, client, person_service) -> None:
        person_service.retrieve_person_by_id.side_effect = PersonNotFoundError(
            "non-existent-id"
        )

        response = client.get("/persons/non-existent-id")

        assert response.status_code == 404
        body = response.json()
        assert body["status"] == 404
        assert body["title"] == "Not Found"
        assert body["detail"] == "Person with id non-existent-id not found"
        assert body["instance"] == "/persons/non-existent-id"


class TestUpdatePersonEndpoint:
    """Tests for PUT /persons/{id}."""

    def test_calls_service_with_path_id(self, client, person_service) -> None:
        person_service.update_person.return_value = PersonDto("1", "Jane", "Doe")

        response = client.put("/persons/1", json={"firstName": "Jane", "lastName": "Doe"})

        assert response.status_code == 200
        assert response.json()["firstName"] == "Jane"
        person_service.update_person.assert_called_once_with("1", "Jane", "Doe")

    def test_empty_last_name_rejected(self, client, person_service) -> None:
        response = client.put("/persons/1", json={"firstName": "Jane", "lastName": ""})

        assert response.status_code == 400
        assert response.json()["detail"] == "Last name must not be empty"
        person_service.update_person.assert_not_called()

    def test_entity_validation_failure_returns_400(self, client, person_service) -> None:
        """Violations raised by the entity map to 400 like request validation."""
        person_service.update_person.side_effect = ValidationFailedError([FIRST_NAME_NOT_EMPTY])

        response = client.put("/persons/1", json={"firstName": "Jane", "lastName": "Doe"})

        assert response.status_code == 400
        assert response.headers["content-type"].startswith("application/problem+json")
        assert response.json()["detail"] == FIRST_NAME_NOT_EMPTY


class TestDeletePersonEndpoint:
    """Tests for DELETE /persons/{id}."""

    def test_returns_empty_200(self, client, person_service) -> None:
        response = client.delete("/persons/1")

        assert response.status_code == 200
        assert response.content == b""
        person_service.delete_person_by_id.assert_called_once_with("1")


class TestListPersonsEndpoint:
    """Tests for GET /persons."""

    def test_passes_page_spec_and_returns_envelope(self, client, person_service) -> None:
        person_service.list_persons.return_value = PageDto(
            items=[PersonDto("1", "Ada", "Lovelace")], page=2, size=1, total_count=3
        )

        response = client.get(
            "/persons", params={"page": 2, "size": 1, "sortBy": "firstName", "direction": "desc"}
        )

        assert response.status_code == 200
        assert response.json() == {
            "items": [{"id": "1", "firstName": "Ada", "lastName": "Lovelace"}],
            "page": 2,
            "size": 1,
            "totalCount": 3,
            "totalPages": 3,
        }
        person_service.list_persons.assert_called_once_with(
            PageSpec(page=2, size=1, sort_by="firstName", direction=SortDirection.DESC)
        )

    def test_defaults(self, client, person_service) -> None:
        person_service.list_persons.return_value = PageDto(
            items=[], page=0, size=20, total_count=0
        )

        client.get("/persons")

        person_service.list_persons.assert_called_once_with(PageSpec())

    def test_unknown_sort_key_returns_400(self, client, person_service) -> None:
        person_service.list_persons.side_effect = UnknownSortKeyError(
            "middleName", ["firstName", "lastName"]
        )

        response = client.get("/persons", params={"sortBy": "middleName"})

        assert response.status_code == 400
        assert "middleName" in response.json()["detail"]

    def test_out_of_range_size_rejected(self, client, person_service) -> None:
        response = client.get("/persons", params={"size": 0})

        assert response.status_code == 400
        person_service.list_persons.assert_not_called()


class TestUnexpectedErrors:
    """Unanticipated failures return a generic 500."""

    def test_internal_details_not_leaked(self, app, person_service) -> None:
        person_service.retrieve_person_by_id.side_effect = RuntimeError(
            "connection to db-password-42 refused"
        )
        client = TestClient(app, raise_server_exceptions=False)

        response = client.get("/persons/1")

        assert response.status_code == 500
        assert response.json()["detail"] == "An unexpected error occurred."
        assert "db-password-42" not in response.text

    def test_traceback_logged_server_side(self, app, person_service, caplog) -> None:
        person_service.retrieve_person_by_id.side_effect = RuntimeError(
            "connection to db-password-42 refused"
        )
        client = TestClient(app, raise_server_exceptions=False)

        with caplog.at_level(logging.ERROR):
            client.get("/persons/1")

        errors = [r for r in caplog.records if r.levelno == logging.ERROR]
        assert errors
        assert errors[0].exc_info is not None
        assert "db-password-42" in caplog.text

    def test_500_keeps_security_headers_and_request_id(self, app, person_service) -> None:
        """Unhandled errors still pass through the response middleware."""
        person_service.retrieve_person_by_id.side_effect = RuntimeError("boom")
        client = TestClient(app, raise_server_exceptions=False)

        response = client.get("/persons/1", headers={"X-Request-ID": "req-500"})

        assert response.status_code == 500
        assert response.headers["X-Frame-Options"] == "DENY"
        assert response.headers["X-Request-ID"] == "req-500"

    def test_unmapped_domain_error_returns_generic_500(self, client, person_service) -> None:
        person_service.delete_person_by_id.side_effect = PeopleDomainError("store is read only")

        response = client.delete("/persons/1")

        assert response.status_code == 500
        assert response.json()["detail"] == "An unexpected error occurred."
        assert "read only" not in response.text

    def test_unknown_route_returns_problem(self, client) -> None:
        response = client.get("/nowhere")

        assert response.status_code == 404
        assert response.json()["status"] == 404


class TestPersonScenarios:
    """Full-stack scenarios over the in-memory repository."""

    def test_create_then_retrieve(self, client) -> None:
        created = client.post("/persons", json={"firstName": "John", "lastName": "Doe"})

        assert created.status_code == 200
        body = created.json()
        assert body["id"]
        assert (body["firstName"], body["lastName"]) == ("John", "Doe")
        assert client.get(f"/persons/{body['id']}").json() == body

    def test_retrieve_unknown_id(self, client) -> None:
        response = client.get("/persons/zzz")

        assert response.status_code == 404
        assert "zzz" in response.json()["detail"]

    def test_update_overwrites_names(self, client) -> None:
        person_id = client.post(
            "/persons", json={"firstName": "John", "lastName": "Doe"}
        ).json()["id"]

        updated = client.put(
            f"/persons/{person_id}", json={"firstName": "Jane", "lastName": "Doe"}
        )

        assert updated.status_code == 200
        assert updated.json() == {"id": person_id, "firstName": "Jane", "lastName": "Doe"}
        assert client.get(f"/persons/{person_id}").json()["firstName"] == "Jane"

    def test_update_unknown_id(self, client) -> None:
        response = client.put("/persons/zzz", json={"firstName": "Jane", "lastName": "Doe"})

        assert response.status_code == 404

    def test_delete_twice(self, client) -> None:
        person_id = client.post(
            "/persons", json={"firstName": "John", "lastName": "Doe"}
        ).json()["id"]

        first = client.delete(f"/persons/{person_id}")
        second = client.delete(f"/persons/{person_id}")

        assert (first.status_code, first.content) == (200, b"")
        assert (second.status_code, second.content) == (200, b"")
        assert client.get(f"/persons/{person_id}").status_code == 404

    def test_list_sorted_by_first_name(self, client) -> None:
        for first, last in [("Grace", "Hopper"), ("Ada", "Lovelace"), ("Alan", "Turing")]:
            client.post("/persons", json={"firstName": first, "lastName": last})

        response = client.get("/persons", params={"sortBy": "firstName", "size": 2})

        body = response.json()
        assert response.status_code == 200
        assert [p["firstName"] for p in body["items"]] == ["Ada", "Alan"]
        assert body["totalCount"] == 3
        assert body["totalPages"] == 2

    def test_list_with_unknown_sort_key(self, client) -> None:
        response = client.get("/persons", params={"sortBy": "age"})

        assert response.status_code == 400
        assert "age" in response.json()["detail"]
