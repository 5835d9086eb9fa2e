"""
Relational schema for the people bounded context.

In production the schema is owned by the external migration tool.
`create_schema` exists for local development and tests only.
"""

import logging

from sqlalchemy import text
from sqlalchemy.engine import Engine

logger = logging.getLogger(__name__)

PERSON_TABLE = "person"

CREATE_PERSON_TABLE = f"""
    CREATE TABLE IF NOT EXISTS {PERSON_TABLE} (
        id VARCHAR(36) PRIMARY KEY,
        first_name VARCHAR(255) NOT NULL,
        last_name VARCHAR(255) NOT NULL
    )
"""


def create_schema(engine: Engine) -> None:
    """Create the person table if it does not exist yet."""
    with engine.begin() as conn:
        conn.execute(text(CREATE_PERSON_TABLE))
    logger.info("Ensured table %s exists.", PERSON_TABLE)
