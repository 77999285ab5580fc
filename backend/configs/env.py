import os
import sys
from pathlib import Path

from dotenv import load_dotenv

PROJECT_ROOT = Path(__file__).parent.parent

SECURE_SHARE_STORAGE_PATH = os.getenv(
    "SECURE_SHARE_STORAGE_PATH", os.path.join(os.path.expanduser("~"), ".secure_share")
)
if not os.path.exists(SECURE_SHARE_STORAGE_PATH):
    os.makedirs(SECURE_SHARE_STORAGE_PATH)

ENV_PATH = os.path.join(os.path.abspath("."), ".env")
# Check if running as a compiled app
if getattr(sys, "frozen", False) and hasattr(sys, "_MEIPASS"):
    ENV_PATH = os.path.join(SECURE_SHARE_STORAGE_PATH, ".env")

load_dotenv(ENV_PATH)

SECURE_SHARE_STORAGE_PATH_SQLITE = os.path.join(SECURE_SHARE_STORAGE_PATH, "sqlite")
if not os.path.exists(SECURE_SHARE_STORAGE_PATH_SQLITE):
    os.makedirs(SECURE_SHARE_STORAGE_PATH_SQLITE)

SECURE_SHARE_LOG_FILE = os.getenv("SECURE_SHARE_LOG_FILE", os.path.join(SECURE_SHARE_STORAGE_PATH, "app.log"))
