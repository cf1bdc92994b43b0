"""Profile service layer with business logic."""

import re
from collections.abc import Callable
from datetime import datetime

import structlog

from core.exceptions import DuplicateEmailError, InvalidPhoneError, ProfileNotFoundError
from domain.entities.profile import Profile, ProfileChanges
from domain.repositories.unit_of_work import IUnitOfWork

logger = structlog.get_logger()

PHONE_MIN_DIGITS = 10
PHONE_MAX_DIGITS = 15

_NON_DIGITS = re.compile(r"\D")


def normalize_email(email: str) -> str:
    """Trim and lower-case an email address for storage and comparison."""
    return email.strip().lower()


def validate_phone(phone: str | None) -> None:
    """Reject phone numbers whose digit count falls outside 10-15.

    Empty or missing phones are accepted; formatting characters are ignored.
    """
    if not phone:
        return
    digits = _NON_DIGITS.sub("", phone)
    if not PHONE_MIN_DIGITS <= len(digits) <= PHONE_MAX_DIGITS:
        raise InvalidPhoneError(phone)


class ProfileService:
    """Service layer for Profile business logic."""

    def __init__(self, uow_factory: Callable[[], IUnitOfWork]) -> None:
        self._uow_factory = uow_factory

    async def list_profiles(self, skip: int = 0, limit: int = 100) -> list[Profile]:
        """Get a page of profiles in storage order."""
        async with self._uow_factory() as uow:
            profiles = await uow.profiles.get_all()
            return profiles[skip : skip + limit]

    async def get_profile(self, profile_id: int) -> Profile:
        """Get a specific profile."""
        async with self._uow_factory() as uow:
            profile = await uow.profiles.get(profile_id)
            if not profile:
                raise ProfileNotFoundError(profile_id)
            return profile

    async def create_profile(
        self,
        name: str,
        email: str,
        bio: str | None = None,
        avatar_url: str | None = None,
        phone: str | None = None,
        location: str | None = None,
        website: str | None = None,
    ) -> Profile:
        """Create a new profile. Emails are unique regardless of case."""
        email = normalize_email(email)

        async with self._uow_factory() as uow:
            if await uow.profiles.exists_by_email(email):
                raise DuplicateEmailError(email)

            validate_phone(phone)

            now = datetime.now()
            profile = Profile(
                name=name,
                email=email,
                bio=bio,
                avatar_url=avatar_url,
                phone=phone,
                location=location,
                website=website,
                created_at=now,
                updated_at=now,
            )

            created = await uow.profiles.create(profile)
            await uow.commit()

        logger.info("profile_created", profile_id=created.id)
        return created

    async def update_profile(self, profile_id: int, changes: ProfileChanges) -> Profile:
        """Apply a partial update. Fields not provided keep their values."""
        provided = changes.provided()

        async with self._uow_factory() as uow:
            profile = await uow.profiles.get(profile_id)
            if not profile:
                raise ProfileNotFoundError(profile_id)

            if "email" in provided:
                provided["email"] = normalize_email(provided["email"])
                if provided["email"] != profile.email:
                    if await uow.profiles.exists_by_email(provided["email"]):
                        raise DuplicateEmailError(provided["email"])

            if "phone" in provided:
                validate_phone(provided["phone"])

            for field_name, value in provided.items():
                setattr(profile, field_name, value)

            profile.updated_at = max(datetime.now(), profile.updated_at)

            updated = await uow.profiles.update(profile)
            await uow.commit()

        logger.info(
            "profile_updated",
            profile_id=profile_id,
            fields=sorted(provided),
        )
        return updated

    async def delete_profile(self, profile_id: int) -> None:
        """Hard-delete a profile."""
        async with self._uow_factory() as uow:
            deleted = await uow.profiles.delete(profile_id)
            if not deleted:
                raise ProfileNotFoundError(profile_id)
            await uow.commit()

        logger.info("profile_deleted", profile_id=profile_id)

    async def search_profiles(
        self,
        name: str | None = None,
        email: str | None = None,
        location: str | None = None,
    ) -> list[Profile]:
        """Filter profiles by case-insensitive substring on each given criterion."""
        async with self._uow_factory() as uow:
            profiles = await uow.profiles.get_all()

        return [
            profile
            for profile in profiles
            if _matches(profile.name, name)
            and _matches(profile.email, email)
            and _matches(profile.location, location)
        ]


def _matches(value: str | None, criterion: str | None) -> bool:
    """Case-insensitive containment; an empty criterion matches anything."""
    if not criterion:
        return True
    if value is None:
        return False
    return criterion.lower() in value.lower()
