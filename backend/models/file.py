import dataclasses
import uuid
from datetime import datetime
from typing import Optional

from sqlalchemy import (
    BIGINT,
    DateTime,
    ForeignKey,
    LargeBinary,
    PrimaryKeyConstraint,
    String,
    event,
    func,
    inspect,
)
from sqlalchemy.orm import Mapped, Session, composite, mapped_column

from database import db
from database.db import with_session

from .sqlalchemy_types import GUID
from .user import utcnow

PAYLOAD_COLUMNS = ("encrypted_aes_key", "encrypted_file", "iv")


@dataclasses.dataclass(frozen=True)
class EncryptedPayload:
    """Wrapped AES key, ciphertext and IV. Only meaningful as a unit."""

    encrypted_aes_key: bytes
    encrypted_file: bytes
    iv: bytes


class File(db.Base):
    __tablename__ = "files"
    __table_args__ = (PrimaryKeyConstraint("id", name="files_pkey"),)

    id: Mapped[uuid.UUID] = mapped_column(GUID, default=uuid.uuid4)
    user_id: Mapped[Optional[uuid.UUID]] = mapped_column(
        GUID, ForeignKey("users.id", ondelete="CASCADE", name="files_user_id_fkey"), nullable=True
    )
    file_name: Mapped[str] = mapped_column(String(255), nullable=False)
    file_size: Mapped[int] = mapped_column(BIGINT, nullable=False)
    encrypted_aes_key: Mapped[bytes] = mapped_column(LargeBinary, nullable=False)
    encrypted_file: Mapped[bytes] = mapped_column(LargeBinary, nullable=False)
    iv: Mapped[bytes] = mapped_column(LargeBinary, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, server_default=func.now(), nullable=True
    )

    payload: Mapped[EncryptedPayload] = composite(EncryptedPayload, *PAYLOAD_COLUMNS)

    def __repr__(self):
        return f"<File {self.file_name}>"


def record_payload_assignment(target, value, oldvalue, initiator):
    # assignments count, not value changes: a key rewrap keeps ciphertext and iv as they are
    inspect(target).info.setdefault("payload_assigned", set()).add(initiator.key)


for _column in PAYLOAD_COLUMNS:
    event.listen(getattr(File, _column), "set", record_payload_assignment)


@event.listens_for(File, "before_insert")
def reset_payload_assignment(mapper, connection, target):
    inspect(target).info.pop("payload_assigned", None)


@event.listens_for(File, "before_update")
def check_payload_replaced_together(mapper, connection, target):
    assigned = inspect(target).info.pop("payload_assigned", set())
    if assigned and len(assigned) != len(PAYLOAD_COLUMNS):
        partial = ", ".join(name for name in PAYLOAD_COLUMNS if name in assigned)
        raise ValueError(f"File {target.id}: {partial} set without the rest of the encrypted payload")


@with_session
def get_file(session: Session, file_id: uuid.UUID) -> Optional[File]:
    return session.get(File, file_id)
