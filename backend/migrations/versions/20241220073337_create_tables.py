"""create users, files and shared_links

Revision ID: 20241220073337
Revises:
Create Date: 2024-12-20 07:33:37

"""
from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op

import models.sqlalchemy_types

# revision identifiers, used by Alembic.
revision: str = "20241220073337"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _uuid_pk(is_postgres: bool) -> sa.Column:
    server_default = sa.text("uuid_generate_v4()") if is_postgres else None
    return sa.Column("id", models.sqlalchemy_types.GUID(), nullable=False, server_default=server_default)


def _created_at() -> sa.Column:
    return sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=True)


def upgrade() -> None:
    is_postgres = op.get_bind().dialect.name == "postgresql"
    if is_postgres:
        op.execute('CREATE EXTENSION IF NOT EXISTS "uuid-ossp"')

    # users -> files -> shared_links; each references the ones before it
    op.create_table(
        "users",
        _uuid_pk(is_postgres),
        sa.Column("name", sa.String(length=100), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("password", sa.String(length=255), nullable=False),
        sa.Column("public_key", sa.Text(), nullable=True),
        _created_at(),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=True),
        sa.PrimaryKeyConstraint("id", name="users_pkey"),
        sa.UniqueConstraint("email", name="users_email_key"),
    )
    op.create_table(
        "files",
        _uuid_pk(is_postgres),
        sa.Column("user_id", models.sqlalchemy_types.GUID(), nullable=True),
        sa.Column("file_name", sa.String(length=255), nullable=False),
        sa.Column("file_size", sa.BIGINT(), nullable=False),
        sa.Column("encrypted_aes_key", sa.LargeBinary(), nullable=False),
        sa.Column("encrypted_file", sa.LargeBinary(), nullable=False),
        sa.Column("iv", sa.LargeBinary(), nullable=False),
        _created_at(),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], name="files_user_id_fkey", ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id", name="files_pkey"),
    )
    op.create_table(
        "shared_links",
        _uuid_pk(is_postgres),
        sa.Column("file_id", models.sqlalchemy_types.GUID(), nullable=True),
        sa.Column("recipient_user_id", models.sqlalchemy_types.GUID(), nullable=True),
        sa.Column("password", sa.String(length=255), nullable=False),
        sa.Column("expiration_date", sa.DateTime(timezone=True), nullable=False),
        _created_at(),
        sa.ForeignKeyConstraint(["file_id"], ["files.id"], name="shared_links_file_id_fkey", ondelete="CASCADE"),
        sa.ForeignKeyConstraint(
            ["recipient_user_id"],
            ["users.id"],
            name="shared_links_recipient_user_id_fkey",
            ondelete="CASCADE",
        ),
        sa.PrimaryKeyConstraint("id", name="shared_links_pkey"),
    )


def downgrade() -> None:
    op.drop_table("shared_links")
    op.drop_table("files")
    op.drop_table("users")
