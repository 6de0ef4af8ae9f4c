"""
Reusable seed data functions for database initialization.

Member types are reference data: every profile points at one of them, so they
must exist before any profile can be created.
"""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ..dbmodels import MemberTypes
from ..logging import get_logger

logger = get_logger(__name__)

MEMBER_TYPE_SEED: tuple[dict[str, object], ...] = (
    {"id": "BASIC", "discount": 2.3, "posts_limit_per_month": 20},
    {"id": "BUSINESS", "discount": 7.7, "posts_limit_per_month": 100},
)


async def ensure_member_types(db: AsyncSession) -> list[str]:
    """
    Ensure the fixed member types exist.

    Existing rows are left untouched, so running this repeatedly is safe.

    Returns:
        IDs of the member types that were inserted by this call
    """
    result = await db.execute(select(MemberTypes.id))
    existing = set(result.scalars().all())

    created: list[str] = []
    for row in MEMBER_TYPE_SEED:
        if row["id"] in existing:
            logger.debug("Member type already exists", member_type_id=row["id"])
            continue
        db.add(MemberTypes(**row))
        created.append(str(row["id"]))

    if created:
        await db.flush()
        logger.info("Seeded member types", member_type_ids=created)

    return created
