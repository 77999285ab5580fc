import uuid
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict


class SentFileDetails(BaseModel):
    """
    A shared link on a file the user owns, as seen by the sender.
    """

    model_config = ConfigDict(from_attributes=True)

    file_id: uuid.UUID
    file_name: str
    recipient_email: str
    expiration_date: Optional[datetime] = None
    created_at: Optional[datetime] = None


class ReceiveFileDetails(BaseModel):
    """
    A shared link addressed to the user, as seen by the recipient.

    ``file_id`` carries the shared link id; the recipient retrieves the file through the link.
    """

    model_config = ConfigDict(from_attributes=True)

    file_id: uuid.UUID
    file_name: str
    sender_email: str
    expiration_date: Optional[datetime] = None
    created_at: Optional[datetime] = None
