"""Seed the fixed member types

Inserts BASIC and BUSINESS when they are missing, so the migration is safe to
run against a database that was seeded by ``memberhub db seed``.

Revision ID: 0002_seed_member_types
Revises: 0001_initial_schema
Create Date: 2026-10-19 00:00:01

"""
from collections.abc import Sequence

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "0002_seed_member_types"
down_revision: str | Sequence[str] | None = "0001_initial_schema"
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None

MEMBER_TYPES = (
    {"id": "BASIC", "discount": 2.3, "posts_limit_per_month": 20},
    {"id": "BUSINESS", "discount": 7.7, "posts_limit_per_month": 100},
)


def upgrade() -> None:
    connection = op.get_bind()

    for row in MEMBER_TYPES:
        existing = connection.execute(
            sa.text("SELECT id FROM member_types WHERE id = :id"), {"id": row["id"]}
        ).fetchone()
        if existing:
            continue
        connection.execute(
            sa.text(
                "INSERT INTO member_types (id, discount, posts_limit_per_month) "
                "VALUES (:id, :discount, :posts_limit_per_month)"
            ),
            row,
        )


def downgrade() -> None:
    op.execute("DELETE FROM member_types WHERE id IN ('BASIC', 'BUSINESS')")
