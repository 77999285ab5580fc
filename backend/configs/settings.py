import os

from configs.env import SECURE_SHARE_STORAGE_PATH_SQLITE

DB_SETTINGS = {
    "db_url": os.getenv("DATABASE_URL", f"sqlite:///{SECURE_SHARE_STORAGE_PATH_SQLITE}/sqlite.db"),
    "echo": os.getenv("DATABASE_ECHO", "false").lower() == "true",
    "pool_size": int(os.getenv("DATABASE_POOL_SIZE", "1")),
    "pool_recycle": 3600,
}

PAGINATION_SETTINGS = {
    "default_page": 1,
    "default_limit": 10,
    "max_limit": 50,
}
