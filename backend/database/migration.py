import logging
from typing import Optional

from alembic import command
from alembic.config import Config
from sqlalchemy.engine import Connection

from utils.path import app_path

directory = app_path("migrations")


def get_alembic_config(connection: Optional[Connection] = None) -> Config:
    alembic_cfg = Config(app_path("migrations", "alembic.ini"))
    alembic_cfg.set_main_option("script_location", directory)
    if connection is not None:
        alembic_cfg.attributes["connection"] = connection
    return alembic_cfg


def run_online_migrations(connection: Optional[Connection] = None):
    """Bring the schema to the latest revision: users, then files, then shared_links."""
    try:
        command.upgrade(get_alembic_config(connection), "head")
        logging.info("Database migration success.")
    except Exception as e:
        logging.exception("Database migration failed")
        raise RuntimeError(e) from e


def downgrade_migrations(revision: str = "base", connection: Optional[Connection] = None):
    try:
        command.downgrade(get_alembic_config(connection), revision)
        logging.info(f"Database downgraded to {revision}.")
    except Exception as e:
        logging.exception("Database downgrade failed")
        raise RuntimeError(e) from e


if __name__ == "__main__":
    from utils import log  # noqa: F401

    run_online_migrations()
