import logging
import uuid
from datetime import datetime
from typing import Optional

from sqlalchemy import delete

from database import db
from models.shared_link import SharedLink


class SharedLinkService:
    @staticmethod
    def share_file(
        file_id: uuid.UUID,
        recipient_user_id: uuid.UUID,
        password: str,
        expiration_date: datetime,
    ) -> SharedLink:
        with db.session_scope() as session:
            shared_link = SharedLink(
                file_id=file_id,
                recipient_user_id=recipient_user_id,
                password=password,
                expiration_date=expiration_date,
            )
            session.add(shared_link)
            session.flush()

        logging.info(f"file {file_id} shared as {shared_link.id}")
        return shared_link

    @staticmethod
    def get_shared(shared_id: uuid.UUID, user_id: uuid.UUID) -> Optional[SharedLink]:
        """The link ``shared_id`` if it is addressed to ``user_id``. Expiry is left to the caller."""
        with db.session_scope() as session:
            return (
                session.query(SharedLink)
                .filter(
                    SharedLink.id == shared_id,
                    SharedLink.recipient_user_id == user_id,
                )
                .one_or_none()
            )

    @staticmethod
    def get_links_for_file(file_id: uuid.UUID) -> list[SharedLink]:
        with db.session_scope() as session:
            return (
                session.query(SharedLink)
                .filter(SharedLink.file_id == file_id)
                .order_by(SharedLink.created_at.desc())
                .all()
            )

    @staticmethod
    def revoke(shared_id: uuid.UUID) -> bool:
        with db.session_scope() as session:
            result = session.execute(delete(SharedLink).where(SharedLink.id == shared_id))
            revoked = result.rowcount > 0

        if revoked:
            logging.info(f"shared link revoked: {shared_id}")
        return revoked
