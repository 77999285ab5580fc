from marshmallow import EXCLUDE, Schema, fields


class BaseSchema(Schema):
    class Meta:
        ordered = True
        unknown = EXCLUDE


class UserSchema(BaseSchema):
    id = fields.UUID()
    name = fields.String()
    email = fields.Email()
    public_key = fields.String(allow_none=True)
    created_at = fields.DateTime()
    updated_at = fields.DateTime()


class EmailSchema(BaseSchema):
    email = fields.Email()


class FileMetaSchema(BaseSchema):
    id = fields.UUID()
    user_id = fields.UUID(allow_none=True)
    file_name = fields.String()
    file_size = fields.Integer()
    created_at = fields.DateTime()


class SharedLinkSchema(BaseSchema):
    id = fields.UUID()
    file_id = fields.UUID(allow_none=True)
    recipient_user_id = fields.UUID(allow_none=True)
    expiration_date = fields.DateTime()
    created_at = fields.DateTime()


class SentFileSchema(BaseSchema):
    file_id = fields.UUID()
    file_name = fields.String()
    recipient_email = fields.Email()
    expiration_date = fields.DateTime()
    created_at = fields.DateTime()


class ReceiveFileSchema(BaseSchema):
    file_id = fields.UUID()
    file_name = fields.String()
    sender_email = fields.Email()
    expiration_date = fields.DateTime()
    created_at = fields.DateTime()


class SentFileListSchema(BaseSchema):
    files = fields.List(fields.Nested(SentFileSchema))
    results = fields.Integer()


class ReceiveFileListSchema(BaseSchema):
    files = fields.List(fields.Nested(ReceiveFileSchema))
    results = fields.Integer()
