"""
Person Workshop: a layered CRUD service for Person records.

Application package root. This is a small modular monolith using
hexagonal architecture (ports & adapters).

Bounded contexts:
    - people: Person creation, retrieval, renaming, deletion and listing.

Layers:
    - domain: Pure business logic, entities, ports (ABCs), errors.
    - application: Service, DTOs, orchestration.
    - infrastructure: Adapters (in-memory, SQL) implementing domain ports.
    - interfaces: FastAPI routers, Pydantic schemas.
    - shared: Cross-cutting concerns (errors, security, logging).
"""
