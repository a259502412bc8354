"""initial_schema

Create the tag registry schema:
- Items (stock items referenced by tags)
- Tags (uid unique when set, type enum, optional item reference)

Revision ID: 3c1f7a9e52d4
Revises:
Create Date: 2026-10-17 09:12:40.318204

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3c1f7a9e52d4"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.execute('CREATE EXTENSION IF NOT EXISTS "uuid-ossp"')

    # Create ENUM type (idempotent)
    op.execute("""
        DO $$ BEGIN
            CREATE TYPE tag_type AS ENUM ('unknown', 'item', 'mode');
        EXCEPTION
            WHEN duplicate_object THEN null;
        END $$;
    """)

    op.create_table(
        "items",
        sa.Column(
            "id",
            postgresql.UUID(),
            primary_key=True,
            server_default=sa.text("uuid_generate_v4()"),
        ),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column(
            "created_at",
            postgresql.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
    )

    op.create_table(
        "tags",
        sa.Column(
            "id",
            postgresql.UUID(),
            primary_key=True,
            server_default=sa.text("uuid_generate_v4()"),
        ),
        sa.Column("uid", sa.String(255), nullable=True),
        sa.Column(
            "type",
            postgresql.ENUM(
                "unknown", "item", "mode", name="tag_type", create_type=False
            ),
            nullable=False,
            server_default="unknown",
        ),
        sa.Column(
            "item_id",
            postgresql.UUID(),
            sa.ForeignKey("items.id", ondelete="SET NULL"),
            nullable=True,
        ),
        sa.Column(
            "created_at",
            postgresql.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column(
            "updated_at",
            postgresql.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
    )

    # NULL uids are allowed many times; set uids are unique
    op.create_index("idx_tags_uid", "tags", ["uid"], unique=True)
    op.create_index("idx_tags_item_id", "tags", ["item_id"])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("idx_tags_item_id", table_name="tags")
    op.drop_index("idx_tags_uid", table_name="tags")
    op.drop_table("tags")
    op.drop_table("items")
    op.execute("DROP TYPE IF EXISTS tag_type")
