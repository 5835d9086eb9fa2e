"""People bounded context: application layer."""
