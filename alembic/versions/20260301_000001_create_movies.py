"""create movies table

Revision ID: 20260301_000001
Revises:
Create Date: 2026-03-01 00:00:01
"""

import sqlmodel.sql.sqltypes
from alembic import op  # type: ignore[attr-defined]
import sqlalchemy as sa

revision = "20260301_000001"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "movies",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("year", sa.Integer(), nullable=False),
        sa.Column("title", sqlmodel.sql.sqltypes.AutoString(), nullable=False),
        sa.Column("studios", sqlmodel.sql.sqltypes.AutoString(), nullable=False),
        sa.Column("producers", sqlmodel.sql.sqltypes.AutoString(), nullable=False),
        sa.Column("winner", sa.Boolean(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_movies_year"), "movies", ["year"], unique=False)
    op.create_index(op.f("ix_movies_winner"), "movies", ["winner"], unique=False)


def downgrade() -> None:
    op.drop_index(op.f("ix_movies_winner"), table_name="movies")
    op.drop_index(op.f("ix_movies_year"), table_name="movies")
    op.drop_table("movies")
