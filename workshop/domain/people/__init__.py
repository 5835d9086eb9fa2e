"""
People bounded context: domain layer.

Holds the Person entity, the sort keys a listing may use,
the repository and transaction ports, and the domain errors.
"""
