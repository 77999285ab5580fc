import os
import tempfile
from datetime import datetime, timedelta, timezone

import pytest

# point storage and the engine at a throwaway SQLite file before any project import
_storage_dir = tempfile.mkdtemp(prefix="secure_share_test_")
os.environ["SECURE_SHARE_STORAGE_PATH"] = _storage_dir
os.environ["DATABASE_URL"] = f"sqlite:///{os.path.join(_storage_dir, 'test.db')}"

from database import db  # noqa: E402
from services.user.user_service import UserService  # noqa: E402


@pytest.fixture(autouse=True)
def clean_db():
    db.drop_all()
    db.init()
    yield


@pytest.fixture
def alice():
    return UserService.save_user("alice", "alice@example.com", "hashed-alice")


@pytest.fixture
def bob():
    user = UserService.save_user("bob", "bob@example.com", "hashed-bob")
    UserService.save_user_key(user.id, "bob-public-key")
    return user


@pytest.fixture
def carol():
    user = UserService.save_user("carol", "carol@example.org", "hashed-carol")
    UserService.save_user_key(user.id, "carol-public-key")
    return user


@pytest.fixture
def next_week():
    return datetime.now(timezone.utc) + timedelta(days=7)


def naive(value: datetime) -> datetime:
    return value.replace(tzinfo=None)
