import uuid
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import DateTime, PrimaryKeyConstraint, String, Text, UniqueConstraint, func
from sqlalchemy.orm import Mapped, Session, mapped_column

from database import db
from database.db import with_session

from .sqlalchemy_types import GUID


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class User(db.Base):
    __tablename__ = "users"
    __table_args__ = (
        PrimaryKeyConstraint("id", name="users_pkey"),
        UniqueConstraint("email", name="users_email_key"),
    )

    id: Mapped[uuid.UUID] = mapped_column(GUID, default=uuid.uuid4)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False)
    # stored as handed in; hashing happens before it reaches this layer
    password: Mapped[str] = mapped_column(String(255), nullable=False)
    public_key: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, server_default=func.now(), nullable=True
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utcnow,
        onupdate=utcnow,
        server_default=func.now(),
        nullable=True,
    )

    def __repr__(self):
        return f"<User {self.email}>"


@with_session
def get_user(session: Session, user_id: uuid.UUID) -> Optional[User]:
    return session.get(User, user_id)


@with_session
def get_user_by_email(session: Session, email: str) -> Optional[User]:
    return session.query(User).filter_by(email=email).first()


@with_session
def get_user_by_name(session: Session, name: str) -> Optional[User]:
    return session.query(User).filter_by(name=name).first()
