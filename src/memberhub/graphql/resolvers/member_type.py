from __future__ import annotations

import strawberry

from ..context import get_store
from ..types.member_type import MemberType, MemberTypeId


async def resolve_member_types(info: strawberry.Info) -> list[MemberType]:
    async with get_store(info) as store:
        rows = await store.member_types.find_many()
        return [MemberType.from_model(row) for row in rows]


async def resolve_member_type_by_id(info: strawberry.Info, id: MemberTypeId) -> MemberType | None:
    async with get_store(info) as store:
        row = await store.member_types.find_unique(id.value)
        return MemberType.from_model(row) if row else None
