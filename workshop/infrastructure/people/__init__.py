"""
Infrastructure adapters for the people bounded context.

Each adapter implements a domain port (ABC): an in-memory store
for local use and a relational store backed by SQLAlchemy.
"""
