"""Initial schema: users, user_credentials, songs, playlists.

Revision ID: 20260301000000
Revises:
Create Date: 2026-03-01

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

revision: str = "20260301000000"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", postgresql.JSONB(), nullable=False),
        sa.Column("email", sa.String(length=320), nullable=False),
        sa.Column("age", sa.Integer(), nullable=False),
        sa.Column("role", sa.String(length=32), nullable=False, server_default="user"),
        sa.Column("photo_path", sa.String(length=2048), nullable=False, server_default=""),
        sa.Column("number_of_songs_submitted", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("number_of_playlists_created", sa.Integer(), nullable=False, server_default="0"),
        sa.Column(
            "favorite_playlists",
            postgresql.JSONB(),
            nullable=False,
            server_default=sa.text("'[]'::jsonb"),
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_users_email"), "users", ["email"], unique=True)

    op.create_table(
        "user_credentials",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("user_id", sa.Integer(), nullable=False),
        sa.Column("password", sa.String(length=255), nullable=False),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        op.f("ix_user_credentials_user_id"), "user_credentials", ["user_id"], unique=True
    )

    op.create_table(
        "songs",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("title", sa.String(length=255), nullable=False),
        sa.Column("album", sa.String(length=255), nullable=False),
        sa.Column("genre", sa.String(length=64), nullable=False),
        sa.Column("youtube_link", sa.String(length=2048), nullable=True),
        sa.Column("spotify_link", sa.String(length=2048), nullable=True),
        sa.Column("owner", sa.Integer(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_songs_genre"), "songs", ["genre"], unique=False)
    op.create_index(op.f("ix_songs_owner"), "songs", ["owner"], unique=False)

    op.create_table(
        "playlists",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("tags", postgresql.JSONB(), nullable=False),
        sa.Column("songs", postgresql.JSONB(), nullable=False),
        sa.Column("owner", sa.Integer(), nullable=False),
        sa.Column(
            "extra",
            postgresql.JSONB(),
            nullable=False,
            server_default=sa.text("'{}'::jsonb"),
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_playlists_owner"), "playlists", ["owner"], unique=False)


def downgrade() -> None:
    op.drop_index(op.f("ix_playlists_owner"), table_name="playlists")
    op.drop_table("playlists")
    op.drop_index(op.f("ix_songs_owner"), table_name="songs")
    op.drop_index(op.f("ix_songs_genre"), table_name="songs")
    op.drop_table("songs")
    op.drop_index(op.f("ix_user_credentials_user_id"), table_name="user_credentials")
    op.drop_table("user_credentials")
    op.drop_index(op.f("ix_users_email"), table_name="users")
    op.drop_table("users")
