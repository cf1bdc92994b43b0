"""SQLAlchemy implementation of Profile repository."""

from sqlalchemy import exists, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from core.exceptions import DuplicateEmailError
from domain.entities.profile import Profile
from infrastructure.database.models import ProfileModel


def _is_email_conflict(error: IntegrityError) -> bool:
    """Whether an integrity failure came from the unique email constraint."""
    message = str(error.orig).lower()
    return "email" in message and ("unique" in message or "duplicate" in message)


class SQLAlchemyProfileRepository:
    """SQLAlchemy implementation of IProfileRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get(self, id: int) -> Profile | None:
        """Get a profile by ID."""
        model = await self._get_model(id)
        return self._to_entity(model) if model else None

    async def get_all(self) -> list[Profile]:
        """Get all profiles in insertion order."""
        stmt = select(ProfileModel).order_by(ProfileModel.id)
        result = await self._session.execute(stmt)
        return [self._to_entity(model) for model in result.scalars()]

    async def exists_by_email(self, email: str) -> bool:
        """Check whether any profile uses this email, ignoring case."""
        # Stored emails are already lower-cased, so the unique index applies
        stmt = select(exists().where(ProfileModel.email == email.strip().lower()))
        result = await self._session.execute(stmt)
        return bool(result.scalar())

    async def create(self, profile: Profile) -> Profile:
        """Create a new profile."""
        model = self._to_model(profile)
        self._session.add(model)
        await self._flush_unique(profile.email)
        await self._session.refresh(model)
        return self._to_entity(model)

    async def update(self, profile: Profile) -> Profile:
        """Update an existing profile."""
        model = await self._get_model(profile.id)

        if not model:
            raise ValueError(f"Profile {profile.id} not found")

        model.name = profile.name
        model.email = profile.email
        model.bio = profile.bio
        model.avatar_url = profile.avatar_url
        model.phone = profile.phone
        model.location = profile.location
        model.website = profile.website
        model.updated_at = profile.updated_at

        await self._flush_unique(profile.email)
        return self._to_entity(model)

    async def delete(self, id: int) -> bool:
        """Delete a profile."""
        model = await self._get_model(id)

        if not model:
            return False

        await self._session.delete(model)
        await self._session.flush()
        return True

    async def _get_model(self, id: int | None) -> ProfileModel | None:
        stmt = select(ProfileModel).where(ProfileModel.id == id)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    async def _flush_unique(self, email: str) -> None:
        """Flush pending writes, reporting a unique-email violation as a conflict."""
        try:
            await self._session.flush()
        except IntegrityError as e:
            if _is_email_conflict(e):
                raise DuplicateEmailError(email) from e
            raise

    def _to_entity(self, model: ProfileModel) -> Profile:
        """Convert ORM model to domain entity."""
        return Profile(
            id=model.id,
            name=model.name,
            email=model.email,
            bio=model.bio,
            avatar_url=model.avatar_url,
            phone=model.phone,
            location=model.location,
            website=model.website,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _to_model(self, entity: Profile) -> ProfileModel:
        """Convert domain entity to ORM model."""
        return ProfileModel(
            id=entity.id,
            name=entity.name,
            email=entity.email,
            bio=entity.bio,
            avatar_url=entity.avatar_url,
            phone=entity.phone,
            location=entity.location,
            website=entity.website,
            created_at=entity.created_at,
            updated_at=entity.updated_at,
        )
