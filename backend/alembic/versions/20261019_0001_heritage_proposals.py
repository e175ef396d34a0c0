"""heritage proposals

Revision ID: 20261019_0001
Revises:
Create Date: 2026-10-19 00:00:01
"""

from collections.abc import Sequence

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "20261019_0001"
down_revision: str | None = None
branch_labels: Sequence[str] | None = None
depends_on: Sequence[str] | None = None


def upgrade() -> None:
    op.create_table(
        "heritage_proposals",
        sa.Column("id", sa.Integer(), autoincrement=False, nullable=False),
        sa.Column("title", sa.String(length=120), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("location", sa.String(length=100), nullable=False),
        sa.Column("heritage_type", sa.String(length=50), nullable=False),
        sa.Column("initial_hash", sa.LargeBinary(length=32), nullable=False),
        sa.Column("submitter", sa.String(length=255), nullable=False),
        sa.Column("status", sa.String(length=32), nullable=False),
        sa.Column("created_at", sa.BigInteger(), nullable=False),
        sa.Column("updated_at", sa.BigInteger(), nullable=False),
        sa.Column("verified_at", sa.BigInteger(), nullable=True),
        sa.Column("task_count", sa.Integer(), nullable=False, server_default=sa.text("0")),
        sa.Column("nft_minted", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_heritage_proposals_initial_hash", "heritage_proposals", ["initial_hash"], unique=True)
    op.create_index("ix_heritage_proposals_submitter", "heritage_proposals", ["submitter"], unique=False)


def downgrade() -> None:
    op.drop_index("ix_heritage_proposals_submitter", table_name="heritage_proposals")
    op.drop_index("ix_heritage_proposals_initial_hash", table_name="heritage_proposals")
    op.drop_table("heritage_proposals")
