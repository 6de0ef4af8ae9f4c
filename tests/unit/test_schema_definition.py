"""
Tests for the assembled schema shape
"""

import pytest

from memberhub.graphql.scalars import UUID, UUID_SCALAR
from memberhub.graphql.schema import schema, validate_schema


@pytest.mark.unit
def test_schema_validates():
    validate_schema()


@pytest.mark.unit
def test_schema_roots_and_types():
    sdl = str(schema)

    assert "type RootQueryType {" in sdl
    assert "type Mutations {" in sdl
    assert "scalar UUID" in sdl
    assert "enum MemberTypeId {" in sdl
    assert "userSubscribedTo: [User]\n" in sdl
    assert "subscribedToUser: [User]\n" in sdl
    assert "posts: [Post]\n" in sdl
    assert "users: [User]\n" in sdl
    assert "memberType(id: MemberTypeId!): MemberType" in sdl
    assert "user(id: UUID!): User" in sdl
    assert "createUser(dto: CreateUserInput!): User\n" in sdl
    assert "deleteUser(id: UUID!): String\n" in sdl
    assert "subscribeTo(userId: UUID!, authorId: UUID!): String\n" in sdl


@pytest.mark.unit
def test_private_foreign_key_not_exposed():
    profile_type = schema.get_type_by_name("Profile")

    field_names = {field.python_name for field in profile_type.fields}
    assert "member_type_id" not in field_names
    assert "member_type" in field_names


@pytest.mark.unit
def test_uuid_scalar_registered_through_scalar_map():
    assert schema.config.scalar_map[UUID] is UUID_SCALAR

    uuid_type = schema._schema.get_type("UUID")
    value = "6F1C0B52-E1D1-4A7B-9C3F-2D8E4A5B6C7D"
    assert uuid_type.parse_value(value) == value
