from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry

from ...logging import get_logger
from ..context import get_store
from ..scalars import UUID, parse_flag, parse_year
from ..types.member_type import MemberType
from ..types.profile import Profile

if TYPE_CHECKING:
    from ..mutations.root import CreateProfileInput

logger = get_logger(__name__)


async def resolve_profiles(info: strawberry.Info) -> list[Profile]:
    async with get_store(info) as store:
        rows = await store.profiles.find_many()
        return [Profile.from_model(row) for row in rows]


async def resolve_profile_by_id(info: strawberry.Info, id: UUID) -> Profile | None:
    async with get_store(info) as store:
        row = await store.profiles.find_unique(id)
        return Profile.from_model(row) if row else None


async def resolve_profile_member_type(profile: Profile, info: strawberry.Info) -> MemberType | None:
    """Fetch the member type keyed by the profile's stored foreign key."""
    async with get_store(info) as store:
        row = await store.member_types.find_unique(profile.member_type_id)
        return MemberType.from_model(row) if row else None


async def create_profile(info: strawberry.Info, dto: CreateProfileInput) -> Profile:
    data = {
        "is_male": parse_flag(dto.is_male),
        "year_of_birth": parse_year(dto.year_of_birth),
        "user_id": dto.user_id,
        "member_type_id": dto.member_type_id.value,
    }
    async with get_store(info) as store:
        row = await store.profiles.create(**data)
        logger.info("Profile created", profile_id=str(row.id), user_id=str(row.user_id))
        return Profile.from_model(row)


async def delete_profile(info: strawberry.Info, id: UUID) -> str:
    async with get_store(info) as store:
        await store.profiles.delete(id)
    logger.info("Profile deleted", profile_id=str(id))
    return f"Profile with id {id} deleted successfully."
