from .file import EncryptedPayload, File
from .shared_link import SharedLink
from .user import User

__all__ = [
    "EncryptedPayload",
    "File",
    "SharedLink",
    "User",
]
