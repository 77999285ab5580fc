import logging
import uuid
from typing import Optional

from sqlalchemy import delete

from core.errors.notfound import NotFoundError
from database import db
from models.user import User, get_user, get_user_by_email, get_user_by_name, utcnow


class UserService:
    @staticmethod
    def get_user(
        user_id: Optional[uuid.UUID] = None,
        name: Optional[str] = None,
        email: Optional[str] = None,
    ) -> Optional[User]:
        """Look a user up by id, else by name, else by email."""
        if user_id is not None:
            return get_user(user_id)
        if name is not None:
            return get_user_by_name(name)
        if email is not None:
            return get_user_by_email(email)
        return None

    @staticmethod
    def save_user(name: str, email: str, password: str) -> User:
        with db.session_scope() as session:
            user = User(name=name, email=email, password=password)
            session.add(user)
            session.flush()
            logging.info(f"user created: {user.id}")
            return user

    @staticmethod
    def _update_user(user_id: uuid.UUID, **values) -> User:
        with db.session_scope() as session:
            user = session.get(User, user_id)
            if not user:
                raise NotFoundError(f"User {user_id} not found")
            for key, value in values.items():
                setattr(user, key, value)
            user.updated_at = utcnow()
            return user

    @staticmethod
    def update_user_name(user_id: uuid.UUID, name: str) -> User:
        return UserService._update_user(user_id, name=name)

    @staticmethod
    def update_user_password(user_id: uuid.UUID, password: str) -> User:
        return UserService._update_user(user_id, password=password)

    @staticmethod
    def save_user_key(user_id: uuid.UUID, public_key: str) -> None:
        UserService._update_user(user_id, public_key=public_key)

    @staticmethod
    def search_by_email(user_id: uuid.UUID, query: str) -> list[User]:
        """Users that can receive files: email LIKE ``query``, public key set, not ``user_id``."""
        with db.session_scope() as session:
            return (
                session.query(User)
                .filter(
                    User.email.like(query),
                    User.public_key.isnot(None),
                    User.id != user_id,
                )
                .order_by(User.email.asc())
                .all()
            )

    @staticmethod
    def delete_user(user_id: uuid.UUID) -> bool:
        # owned files and received links go with the user through ON DELETE CASCADE
        with db.session_scope() as session:
            result = session.execute(delete(User).where(User.id == user_id))
            deleted = result.rowcount > 0

        if deleted:
            logging.info(f"user deleted: {user_id}")
        return deleted
