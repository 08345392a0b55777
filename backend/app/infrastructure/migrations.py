"""Migration Runner — applies pending alembic revisions at startup.

Invariants:
    - Runs `alembic upgrade head` on a connection borrowed from the app engine,
      so in-memory SQLite databases see the schema the app will query
    - Blocks startup until migrations finish; any failure aborts the process

Design Decisions:
    - Programmatic Config with script_location only: no alembic.ini needed at
      runtime and alembic never reconfigures the app's logging
    - Connection shared through config.attributes (alembic cookbook pattern,
      picked up by alembic/env.py)
"""

import logging
from pathlib import Path

from alembic import command
from alembic.config import Config
from sqlalchemy.engine import Connection
from sqlalchemy.ext.asyncio import AsyncEngine

logger = logging.getLogger(__name__)

SCRIPT_LOCATION = Path(__file__).resolve().parents[2] / "alembic"


def build_alembic_config() -> Config:
    config = Config()
    config.set_main_option("script_location", str(SCRIPT_LOCATION))
    return config


def _upgrade(connection: Connection, config: Config) -> None:
    config.attributes["connection"] = connection
    command.upgrade(config, "head")


async def run_migrations(engine: AsyncEngine) -> None:
    """Upgrade the database behind `engine` to the latest revision."""
    logger.info("Applying database migrations")
    config = build_alembic_config()
    async with engine.begin() as connection:
        await connection.run_sync(_upgrade, config)
    logger.info("Database schema up to date")
