from .schemas import (
    EmailSchema,
    FileMetaSchema,
    ReceiveFileListSchema,
    ReceiveFileSchema,
    SentFileListSchema,
    SentFileSchema,
    SharedLinkSchema,
    UserSchema,
)

__all__ = [
    "EmailSchema",
    "FileMetaSchema",
    "ReceiveFileListSchema",
    "ReceiveFileSchema",
    "SentFileListSchema",
    "SentFileSchema",
    "SharedLinkSchema",
    "UserSchema",
]
