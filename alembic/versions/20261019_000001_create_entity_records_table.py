"""Create entity_records table

Revision ID: 20261019_000001
Revises:
Create Date: 2026-10-19

One row per stored entity (tenant, site, lease, invoice) for the SQL store.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


revision: str = "20261019_000001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "entity_records",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("kind", sa.String(100), nullable=False),
        sa.Column("identity", sa.String(255), nullable=False),
        sa.Column("payload", sa.Text(), nullable=False),
        sa.Column("created_at", sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=True),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("kind", "identity", name="uq_entity_records_kind_identity"),
    )
    op.create_index("ix_entity_records_kind", "entity_records", ["kind"])


def downgrade() -> None:
    op.drop_index("ix_entity_records_kind", table_name="entity_records")
    op.drop_table("entity_records")
