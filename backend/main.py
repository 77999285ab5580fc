import logging

from utils import log  # noqa: F401  # isort: skip

from database import db
from database.migration import run_online_migrations


def main():
    logging.info(f"Initializing schema on {db.engine.url.render_as_string(hide_password=True)}")
    run_online_migrations()


if __name__ == "__main__":
    main()
