import uuid
from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime, ForeignKey, PrimaryKeyConstraint, String, func
from sqlalchemy.orm import Mapped, mapped_column

from database import db

from .sqlalchemy_types import GUID
from .user import utcnow


class SharedLink(db.Base):
    __tablename__ = "shared_links"
    __table_args__ = (PrimaryKeyConstraint("id", name="shared_links_pkey"),)

    id: Mapped[uuid.UUID] = mapped_column(GUID, default=uuid.uuid4)
    file_id: Mapped[Optional[uuid.UUID]] = mapped_column(
        GUID, ForeignKey("files.id", ondelete="CASCADE", name="shared_links_file_id_fkey"), nullable=True
    )
    recipient_user_id: Mapped[Optional[uuid.UUID]] = mapped_column(
        GUID,
        ForeignKey("users.id", ondelete="CASCADE", name="shared_links_recipient_user_id_fkey"),
        nullable=True,
    )
    password: Mapped[str] = mapped_column(String(255), nullable=False)
    expiration_date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, server_default=func.now(), nullable=True
    )

    def __repr__(self):
        return f"<SharedLink {self.id} file={self.file_id}>"
