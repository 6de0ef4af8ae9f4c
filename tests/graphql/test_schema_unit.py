"""
Unit tests for schema execution with a mocked database session
"""

import uuid
from contextlib import asynccontextmanager
from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from memberhub.dbmodels import MemberTypes, Profiles, Users
from memberhub.graphql.context import GraphQLContext
from memberhub.graphql.schema import schema


@pytest.fixture
def mock_session():
    """An AsyncSession double; tests configure execute() results."""
    return AsyncMock(spec=AsyncSession)


@pytest.fixture
def context(mock_session):
    """GraphQL context whose store is backed by the mocked session."""

    @asynccontextmanager
    async def session_factory():
        yield mock_session

    return GraphQLContext(session_factory=session_factory)


def scalar_result(value):
    result = MagicMock()
    result.scalar_one_or_none.return_value = value
    result.scalars.return_value.all.return_value = [] if value is None else [value]
    return result


def statement_params(call) -> list:
    stmt = call.args[0]
    return list(stmt.compile().params.values())


@pytest.fixture
def sample_user():
    user = MagicMock(spec=Users)
    user.id = uuid.uuid4()
    user.name = "Alice"
    user.balance = 100.0
    return user


@pytest.fixture
def sample_profile():
    profile = MagicMock(spec=Profiles)
    profile.id = uuid.uuid4()
    profile.is_male = False
    profile.year_of_birth = 1990
    profile.user_id = uuid.uuid4()
    profile.member_type_id = "BUSINESS"
    return profile


@pytest.fixture
def business_member_type():
    member_type = MagicMock(spec=MemberTypes)
    member_type.id = "BUSINESS"
    member_type.discount = 7.7
    member_type.posts_limit_per_month = 100
    return member_type


class TestUUIDScalar:
    """The UUID scalar gates every id argument."""

    @pytest.mark.unit
    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "bad_id",
        [
            "not-a-uuid",
            "",
            "12345",
            "6f1c0b52e1d14a7b9c3f2d8e4a5b6c7d",  # no hyphens
            "{6f1c0b52-e1d1-4a7b-9c3f-2d8e4a5b6c7d}",  # braces
            "urn:uuid:6f1c0b52-e1d1-4a7b-9c3f-2d8e4a5b6c7d",
            "6f1c0b52-e1d1-4a7b-9c3f-2d8e4a5b6c7d ",
            "6f1c0b52-e1d1-0a7b-9c3f-2d8e4a5b6c7d",  # version 0
        ],
    )
    async def test_invalid_literal_rejected_before_resolver(self, context, mock_session, bad_id):
        result = await schema.execute(
            f'query {{ user(id: "{bad_id}") {{ id }} }}', context_value=context
        )

        assert result.errors
        assert result.data is None
        mock_session.execute.assert_not_called()

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_invalid_variable_rejected_before_resolver(self, context, mock_session):
        result = await schema.execute(
            "query ($id: UUID!) { post(id: $id) { id } }",
            variable_values={"id": "definitely-not-a-uuid"},
            context_value=context,
        )

        assert result.errors
        assert "Invalid UUID" in result.errors[0].message
        mock_session.execute.assert_not_called()

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_valid_uuid_reaches_resolver_unchanged(
        self, context, mock_session, sample_user
    ):
        mock_session.execute.return_value = scalar_result(sample_user)
        user_id = str(sample_user.id)

        result = await schema.execute(
            "query ($id: UUID!) { user(id: $id) { id name balance } }",
            variable_values={"id": user_id},
            context_value=context,
        )

        assert result.errors is None
        assert result.data == {"user": {"id": user_id, "name": "Alice", "balance": "100"}}
        mock_session.execute.assert_awaited_once()
        assert statement_params(mock_session.execute.call_args) == [uuid.UUID(user_id)]

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_uppercase_uuid_accepted(self, context, mock_session):
        mock_session.execute.return_value = scalar_result(None)

        result = await schema.execute(
            'query { profile(id: "6F1C0B52-E1D1-4A7B-9C3F-2D8E4A5B6C7D") { id } }',
            context_value=context,
        )

        assert result.errors is None
        assert result.data == {"profile": None}

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_uppercase_id_echoed_but_queried_as_uuid(self, context, mock_session):
        delete_result = MagicMock()
        delete_result.rowcount = 1
        mock_session.execute.return_value = delete_result
        upper_id = "6F1C0B52-E1D1-4A7B-9C3F-2D8E4A5B6C7D"

        result = await schema.execute(
            "mutation ($id: UUID!) { deleteProfile(id: $id) }",
            variable_values={"id": upper_id},
            context_value=context,
        )

        assert result.errors is None
        assert result.data == {"deleteProfile": f"Profile with id {upper_id} deleted successfully."}
        assert statement_params(mock_session.execute.call_args) == [uuid.UUID(upper_id)]


class TestMemberTypeEnum:
    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_unknown_enum_value_rejected(self, context, mock_session):
        result = await schema.execute(
            "query { memberType(id: PREMIUM) { id } }", context_value=context
        )

        assert result.errors
        mock_session.execute.assert_not_called()

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_member_type_looked_up_by_enum_value(
        self, context, mock_session, business_member_type
    ):
        mock_session.execute.return_value = scalar_result(business_member_type)

        result = await schema.execute(
            "query { memberType(id: BUSINESS) { id discount postsLimitPerMonth } }",
            context_value=context,
        )

        assert result.errors is None
        assert result.data == {
            "memberType": {"id": "BUSINESS", "discount": "7.7", "postsLimitPerMonth": "100"}
        }
        assert statement_params(mock_session.execute.call_args) == ["BUSINESS"]


class TestProfileMemberType:
    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_member_type_fetched_once_by_stored_key(
        self, context, mock_session, sample_profile, business_member_type
    ):
        mock_session.execute.side_effect = [
            scalar_result(sample_profile),
            scalar_result(business_member_type),
        ]

        result = await schema.execute(
            "query ($id: UUID!) { profile(id: $id) { id isMale yearOfBirth memberType { id } } }",
            variable_values={"id": str(sample_profile.id)},
            context_value=context,
        )

        assert result.errors is None
        assert result.data == {
            "profile": {
                "id": str(sample_profile.id),
                "isMale": "false",
                "yearOfBirth": "1990",
                "memberType": {"id": "BUSINESS"},
            }
        }
        assert mock_session.execute.await_count == 2
        second_call = mock_session.execute.call_args_list[1]
        assert statement_params(second_call) == ["BUSINESS"]

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_no_member_type_fetch_when_not_requested(
        self, context, mock_session, sample_profile
    ):
        mock_session.execute.return_value = scalar_result(sample_profile)

        result = await schema.execute(
            "query ($id: UUID!) { profile(id: $id) { id } }",
            variable_values={"id": str(sample_profile.id)},
            context_value=context,
        )

        assert result.errors is None
        mock_session.execute.assert_awaited_once()


class TestMutations:
    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_delete_missing_user_reports_persistence_error(self, context, mock_session):
        delete_result = MagicMock()
        delete_result.rowcount = 0
        mock_session.execute.return_value = delete_result
        missing_id = str(uuid.uuid4())

        result = await schema.execute(
            "mutation ($id: UUID!) { deleteUser(id: $id) }",
            variable_values={"id": missing_id},
            context_value=context,
        )

        assert result.errors
        assert "does not exist" in result.errors[0].message
        assert result.errors[0].path == ["deleteUser"]

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_delete_user_returns_confirmation(self, context, mock_session):
        delete_result = MagicMock()
        delete_result.rowcount = 1
        mock_session.execute.return_value = delete_result
        user_id = str(uuid.uuid4())

        result = await schema.execute(
            "mutation ($id: UUID!) { deleteUser(id: $id) }",
            variable_values={"id": user_id},
            context_value=context,
        )

        assert result.errors is None
        assert result.data == {"deleteUser": f"User with id {user_id} deleted successfully."}

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_create_user_rejects_non_numeric_balance(self, context, mock_session):
        result = await schema.execute(
            'mutation { createUser(dto: {name: "Bob", balance: "lots"}) { id } }',
            context_value=context,
        )

        assert result.errors
        assert "Expected a number" in result.errors[0].message
        mock_session.add.assert_not_called()
        mock_session.flush.assert_not_called()

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_subscription_stubs_never_touch_the_store(self, context, mock_session):
        user_id, author_id = str(uuid.uuid4()), str(uuid.uuid4())

        result = await schema.execute(
            """
            mutation ($userId: UUID!, $authorId: UUID!) {
              subscribeTo(userId: $userId, authorId: $authorId)
              unsubscribeFrom(userId: $userId, authorId: $authorId)
            }
            """,
            variable_values={"userId": user_id, "authorId": author_id},
            context_value=context,
        )

        assert result.errors is None
        assert result.data == {
            "subscribeTo": f"Subscribed to user {author_id}",
            "unsubscribeFrom": f"Unsubscribed from user {author_id}",
        }
        mock_session.execute.assert_not_called()
        mock_session.add.assert_not_called()
