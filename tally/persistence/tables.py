"""SQLAlchemy table definitions for Tally.

These table definitions are used with SQLAlchemy Core.
They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    Column,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
)
from sqlalchemy.dialects.postgresql import ARRAY, TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# Columns of the embedded vote record, shared by every votable table
VOTE_COLUMNS = (
    "up_voter_ids",
    "down_voter_ids",
    "up_count",
    "down_count",
    "vote_count",
    "vote_point",
)


def vote_columns() -> list[Column]:
    """Fresh vote record columns for a votable table."""
    return [
        Column("up_voter_ids", ARRAY(UUID), nullable=False, server_default="{}"),
        Column("down_voter_ids", ARRAY(UUID), nullable=False, server_default="{}"),
        Column("up_count", Integer, nullable=False, server_default="0"),
        Column("down_count", Integer, nullable=False, server_default="0"),
        Column("vote_count", Integer, nullable=False, server_default="0"),
        Column("vote_point", Integer, nullable=False, server_default="0"),
    ]


# ============================================================================
# USERS TABLE (receives karma from authored posts and comments)
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("handle", String(255), nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    *vote_columns(),
)

Index("idx_users_handle", users_table.c.handle)

# ============================================================================
# POSTS TABLE
# ============================================================================
posts_table = Table(
    "posts",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("title", String(300), nullable=False),
    Column(
        "author_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    *vote_columns(),
)

Index("idx_posts_author_id", posts_table.c.author_id)

# ============================================================================
# COMMENTS TABLE
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("text", Text, nullable=False),
    Column("post_id", UUID, ForeignKey("posts.id", ondelete="CASCADE"), nullable=True),
    Column(
        "author_id", UUID, ForeignKey("users.id", ondelete="SET NULL"), nullable=True
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    *vote_columns(),
)

Index("idx_comments_post_id", comments_table.c.post_id)
Index("idx_comments_author_id", comments_table.c.author_id)
