"""SQLAlchemy table definitions for the warehouse tag registry.

They match the schema defined in Alembic migrations.
"""

from sqlalchemy import Column, ForeignKey, Index, MetaData, String, Table, Text
from sqlalchemy.dialects import postgresql
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# ITEMS TABLE
# ============================================================================
items_table = Table(
    "items",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("name", String(255), nullable=False),
    Column("description", Text, nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

# ============================================================================
# TAGS TABLE
# ============================================================================
tags_table = Table(
    "tags",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("uid", String(255), nullable=True),  # NULL until provisioned
    Column(
        "type",
        postgresql.ENUM("unknown", "item", "mode", name="tag_type", create_type=False),
        nullable=False,
        server_default="unknown",
    ),
    Column(
        "item_id", UUID, ForeignKey("items.id", ondelete="SET NULL"), nullable=True
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

# Unique only among non-NULL uids (Postgres treats NULLs as distinct)
Index("idx_tags_uid", tags_table.c.uid, unique=True)
Index("idx_tags_item_id", tags_table.c.item_id)
