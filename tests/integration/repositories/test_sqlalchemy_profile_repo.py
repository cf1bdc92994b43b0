"""Integration tests for the SQLAlchemy profile repository."""

from datetime import datetime

import pytest
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from core.exceptions import DuplicateEmailError
from domain.entities.profile import Profile
from infrastructure.database.repositories.sqlalchemy_profile_repo import (
    SQLAlchemyProfileRepository,
)
from infrastructure.database.sqlalchemy_uow import SQLAlchemyUnitOfWork


def _profile(email: str, name: str = "John Doe") -> Profile:
    now = datetime.now()
    return Profile(name=name, email=email, created_at=now, updated_at=now)


class TestSQLAlchemyProfileRepository:
    @pytest.mark.asyncio
    async def test_create_assigns_id(self, db_session: AsyncSession):
        repo = SQLAlchemyProfileRepository(db_session)

        created = await repo.create(_profile("john@example.com"))

        assert created.id is not None
        assert (await repo.get(created.id)).email == "john@example.com"

    @pytest.mark.asyncio
    async def test_get_all_in_insertion_order(self, db_session: AsyncSession):
        repo = SQLAlchemyProfileRepository(db_session)
        first = await repo.create(_profile("b@example.com", name="Zed"))
        second = await repo.create(_profile("a@example.com", name="Amy"))

        result = await repo.get_all()

        assert [p.id for p in result] == [first.id, second.id]

    @pytest.mark.asyncio
    async def test_exists_by_email_ignores_case(self, db_session: AsyncSession):
        repo = SQLAlchemyProfileRepository(db_session)
        await repo.create(_profile("john@example.com"))

        assert await repo.exists_by_email("JOHN@Example.com")
        assert not await repo.exists_by_email("jane@example.com")

    @pytest.mark.asyncio
    async def test_unique_email_constraint_maps_to_conflict(self, db_session: AsyncSession):
        repo = SQLAlchemyProfileRepository(db_session)
        await repo.create(_profile("john@example.com"))

        with pytest.raises(DuplicateEmailError):
            await repo.create(_profile("john@example.com", name="Other John"))

    @pytest.mark.asyncio
    async def test_missing_email_is_not_reported_as_conflict(self, db_session: AsyncSession):
        repo = SQLAlchemyProfileRepository(db_session)

        # NOT NULL failures surface as they are, not as a duplicate email
        with pytest.raises(IntegrityError):
            await repo.create(_profile(None))  # type: ignore[arg-type]

    @pytest.mark.asyncio
    async def test_exists_by_email_matches_stored_form(self, db_session: AsyncSession):
        repo = SQLAlchemyProfileRepository(db_session)
        await repo.create(_profile("john@example.com"))

        assert await repo.exists_by_email("  john@example.com ")

    @pytest.mark.asyncio
    async def test_update_persists_fields(self, db_session: AsyncSession):
        repo = SQLAlchemyProfileRepository(db_session)
        created = await repo.create(_profile("john@example.com"))
        created.bio = "Updated bio"

        await repo.update(created)

        assert (await repo.get(created.id)).bio == "Updated bio"

    @pytest.mark.asyncio
    async def test_delete_reports_existence(self, db_session: AsyncSession):
        repo = SQLAlchemyProfileRepository(db_session)
        created = await repo.create(_profile("john@example.com"))

        assert await repo.delete(created.id) is True
        assert await repo.get(created.id) is None
        assert await repo.delete(created.id) is False


class TestIdsAreNotReused:
    @pytest.mark.asyncio
    async def test_new_profile_after_delete_gets_fresh_id(
        self, session_factory: async_sessionmaker[AsyncSession]
    ):
        async with SQLAlchemyUnitOfWork(session_factory) as uow:
            created = await uow.profiles.create(_profile("john@example.com"))
            await uow.commit()

        async with SQLAlchemyUnitOfWork(session_factory) as uow:
            await uow.profiles.delete(created.id)
            await uow.commit()

        async with SQLAlchemyUnitOfWork(session_factory) as uow:
            fresh = await uow.profiles.create(_profile("jane@example.com"))
            await uow.commit()

        assert fresh.id > created.id

    @pytest.mark.asyncio
    async def test_uow_rolls_back_on_error(
        self, session_factory: async_sessionmaker[AsyncSession]
    ):
        with pytest.raises(RuntimeError):
            async with SQLAlchemyUnitOfWork(session_factory) as uow:
                await uow.profiles.create(_profile("john@example.com"))
                raise RuntimeError("boom")

        async with SQLAlchemyUnitOfWork(session_factory) as uow:
            assert await uow.profiles.get_all() == []
