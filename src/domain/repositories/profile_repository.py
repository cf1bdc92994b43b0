"""Profile repository protocol."""

from typing import Protocol

from domain.entities.profile import Profile


class IProfileRepository(Protocol):
    """Repository interface for Profile entities."""

    async def get(self, id: int) -> Profile | None:
        """Get a profile by ID."""
        ...

    async def get_all(self) -> list[Profile]:
        """Get all profiles in storage order."""
        ...

    async def exists_by_email(self, email: str) -> bool:
        """Check whether any profile uses this email (case-insensitive)."""
        ...

    async def create(self, profile: Profile) -> Profile:
        """Insert a new profile and return it with its assigned ID."""
        ...

    async def update(self, profile: Profile) -> Profile:
        """Update an existing profile."""
        ...

    async def delete(self, id: int) -> bool:
        """Delete a profile and return whether it existed."""
        ...
