"""Initial schema: prompts and tags.

Revision ID: 001
Revises:
Create Date: 2026-10-19

"""

from collections.abc import Sequence

import sqlalchemy as sa
from alembic import op
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    # 1. Prompts table
    op.create_table(
        "prompts",
        sa.Column("id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("original_prompt", sa.Text(), server_default="", nullable=False),
        sa.Column("translated_prompt", sa.Text(), server_default="", nullable=False),
        sa.Column("summary", sa.Text(), server_default="", nullable=False),
        sa.Column("image_url", sa.Text(), nullable=True),
        sa.Column("aspect_ratio", sa.String(10), server_default="1:1", nullable=False),
        sa.Column(
            "tags",
            postgresql.ARRAY(sa.String(100)),
            server_default="{}",
            nullable=False,
        ),
        sa.Column(
            "generation_type", sa.String(32), server_default="Text To Image", nullable=False
        ),
        sa.Column(
            "created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_prompts_created_at", "prompts", [sa.text("created_at DESC")])
    op.create_index("idx_prompts_tags", "prompts", ["tags"], postgresql_using="gin")

    # 2. Tags table (no unique constraint: uniqueness is checked by callers)
    op.create_table(
        "tags",
        sa.Column("id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("name", sa.String(100), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_tags_name", "tags", ["name"])


def downgrade() -> None:
    op.drop_index("ix_tags_name", table_name="tags")
    op.drop_table("tags")
    op.drop_index("idx_prompts_tags", table_name="prompts")
    op.drop_index("idx_prompts_created_at", table_name="prompts")
    op.drop_table("prompts")
