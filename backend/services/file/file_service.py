import logging
import uuid
from datetime import datetime
from typing import Optional

from sqlalchemy import delete, func

from configs.settings import PAGINATION_SETTINGS
from core.entities.file_entities import ReceiveFileDetails, SentFileDetails
from core.errors.notfound import NotFoundError
from core.errors.validate import ValidateError
from database import db
from models.file import EncryptedPayload, File, get_file
from models.shared_link import SharedLink
from models.user import User


def page_offset(page: int, limit: int) -> int:
    if page < 1:
        raise ValidateError("page must be at least 1", field="page")
    if limit < 1 or limit > PAGINATION_SETTINGS["max_limit"]:
        raise ValidateError(f"limit must be between 1 and {PAGINATION_SETTINGS['max_limit']}", field="limit")
    return (page - 1) * limit


class FileService:
    @staticmethod
    def save_encrypted_file(
        user_id: uuid.UUID,
        file_name: str,
        file_size: int,
        recipient_user_id: uuid.UUID,
        password: str,
        expiration_date: datetime,
        encrypted_aes_key: bytes,
        encrypted_file: bytes,
        iv: bytes,
    ) -> SharedLink:
        """Store an uploaded file and share it with its first recipient in one transaction."""
        with db.session_scope() as session:
            file = File(
                user_id=user_id,
                file_name=file_name,
                file_size=file_size,
                payload=EncryptedPayload(encrypted_aes_key, encrypted_file, iv),
            )
            session.add(file)
            session.flush()

            shared_link = SharedLink(
                file_id=file.id,
                recipient_user_id=recipient_user_id,
                password=password,
                expiration_date=expiration_date,
            )
            session.add(shared_link)
            session.flush()

        logging.info(f"file {shared_link.file_id} stored and shared as {shared_link.id}")
        return shared_link

    @staticmethod
    def get_file(file_id: uuid.UUID) -> Optional[File]:
        return get_file(file_id)

    @staticmethod
    def replace_payload(file_id: uuid.UUID, payload: EncryptedPayload) -> File:
        with db.session_scope() as session:
            file = session.get(File, file_id)
            if not file:
                raise NotFoundError(f"File {file_id} not found")
            file.payload = payload
            return file

    @staticmethod
    def delete_file(file_id: uuid.UUID) -> bool:
        with db.session_scope() as session:
            result = session.execute(delete(File).where(File.id == file_id))
            deleted = result.rowcount > 0

        if deleted:
            logging.info(f"file deleted: {file_id}")
        return deleted

    @staticmethod
    def get_sent_files(
        user_id: uuid.UUID,
        page: int = PAGINATION_SETTINGS["default_page"],
        limit: int = PAGINATION_SETTINGS["default_limit"],
    ) -> tuple[list[SentFileDetails], int]:
        offset = page_offset(page, limit)

        with db.session_scope() as session:
            rows = (
                session.query(
                    File.id.label("file_id"),
                    File.file_name,
                    User.email.label("recipient_email"),
                    SharedLink.expiration_date,
                    SharedLink.created_at,
                )
                .select_from(SharedLink)
                .join(File, SharedLink.file_id == File.id)
                .join(User, SharedLink.recipient_user_id == User.id)
                .filter(File.user_id == user_id)
                .order_by(SharedLink.created_at.desc())
                .limit(limit)
                .offset(offset)
                .all()
            )

            total = (
                session.query(func.count(SharedLink.id))
                .select_from(SharedLink)
                .join(File, SharedLink.file_id == File.id)
                .filter(File.user_id == user_id)
                .scalar()
            )

        return [SentFileDetails.model_validate(row) for row in rows], total or 0

    @staticmethod
    def get_receive_files(
        user_id: uuid.UUID,
        page: int = PAGINATION_SETTINGS["default_page"],
        limit: int = PAGINATION_SETTINGS["default_limit"],
    ) -> tuple[list[ReceiveFileDetails], int]:
        offset = page_offset(page, limit)

        with db.session_scope() as session:
            rows = (
                session.query(
                    SharedLink.id.label("file_id"),
                    File.file_name,
                    User.email.label("sender_email"),
                    SharedLink.expiration_date,
                    SharedLink.created_at,
                )
                .select_from(SharedLink)
                .join(File, SharedLink.file_id == File.id)
                .join(User, File.user_id == User.id)
                .filter(SharedLink.recipient_user_id == user_id)
                .order_by(SharedLink.created_at.desc())
                .limit(limit)
                .offset(offset)
                .all()
            )

            total = (
                session.query(func.count(SharedLink.id))
                .select_from(SharedLink)
                .join(File, SharedLink.file_id == File.id)
                .filter(SharedLink.recipient_user_id == user_id)
                .scalar()
            )

        return [ReceiveFileDetails.model_validate(row) for row in rows], total or 0
