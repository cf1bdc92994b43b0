"""Profile domain entity."""

from dataclasses import dataclass, field, fields
from datetime import datetime
from typing import Any


@dataclass
class Profile:
    """Domain entity for a user profile."""

    name: str
    email: str
    id: int | None = None  # Assigned by the store on insert
    bio: str | None = None
    avatar_url: str | None = None
    phone: str | None = None
    location: str | None = None
    website: str | None = None
    created_at: datetime = field(default_factory=datetime.now)
    updated_at: datetime = field(default_factory=datetime.now)

    def __post_init__(self) -> None:
        """Ensure updated_at is always at least as recent as created_at."""
        if self.updated_at < self.created_at:
            self.updated_at = self.created_at


@dataclass(frozen=True, slots=True)
class ProfileChanges:
    """Fields supplied to a partial update.

    A field left at ``...`` was not provided. ``None`` is treated the same
    way; any other value, including an empty string, replaces the stored one.
    """

    name: Any = ...
    email: Any = ...
    bio: Any = ...
    avatar_url: Any = ...
    phone: Any = ...
    location: Any = ...
    website: Any = ...

    def provided(self) -> dict[str, str]:
        """Return only the fields that should be written."""
        return {
            f.name: value
            for f in fields(self)
            if (value := getattr(self, f.name)) is not ... and value is not None
        }
