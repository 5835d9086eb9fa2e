"""
Domain layer package.

Contains entities, ports (ABCs) and domain errors.
No framework imports allowed.
"""
