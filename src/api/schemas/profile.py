"""Pydantic schemas for Profile API."""

import re
from datetime import datetime

from pydantic import (
    AnyUrl,
    BaseModel,
    ConfigDict,
    Field,
    TypeAdapter,
    ValidationError,
    field_validator,
)
from pydantic.alias_generators import to_camel

NAME_PATTERN = r"^[a-zA-Z\s'.-]+$"
PHONE_PATTERN = r"^[0-9\s()+-]+$"

_EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
_url_adapter = TypeAdapter(AnyUrl)
# Schemes a profile link may use; rules out script-bearing ones like javascript: and data:
URL_SCHEMES = frozenset({"http", "https", "ftp", "file", "jar", "mailto"})


def _check_email(v: str | None) -> str | None:
    """Basic email syntax validation."""
    if v is not None and not _EMAIL_RE.match(v.strip()):
        raise ValueError("Email must be valid")
    return v


def _check_url(v: str | None) -> str | None:
    """Accept empty strings, otherwise require an absolute URL with an allowed scheme."""
    if v:
        try:
            url = _url_adapter.validate_python(v)
        except ValidationError as e:
            raise ValueError("Must be a valid URL") from e
        if url.scheme not in URL_SCHEMES:
            raise ValueError("Must be a valid URL")
    return v


class ProfileBase(BaseModel):
    """Base schema for Profile."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    name: str = Field(..., min_length=2, max_length=100, pattern=NAME_PATTERN)
    email: str = Field(..., max_length=255)
    bio: str | None = Field(None, max_length=1000)
    avatar_url: str | None = Field(None, max_length=500)
    phone: str | None = Field(None, min_length=10, max_length=20, pattern=PHONE_PATTERN)
    location: str | None = Field(None, max_length=100)
    website: str | None = Field(None, max_length=255)

    @field_validator("email")
    @classmethod
    def validate_email(cls, v: str) -> str:
        return _check_email(v)  # type: ignore[return-value]

    @field_validator("avatar_url", "website")
    @classmethod
    def validate_url(cls, v: str | None) -> str | None:
        return _check_url(v)


class ProfileCreate(ProfileBase):
    """Schema for creating a Profile."""


class ProfileUpdate(BaseModel):
    """Schema for updating a Profile (all fields optional)."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    name: str | None = Field(None, min_length=2, max_length=100, pattern=NAME_PATTERN)
    email: str | None = Field(None, max_length=255)
    bio: str | None = Field(None, max_length=1000)
    avatar_url: str | None = Field(None, max_length=500)
    phone: str | None = Field(None, min_length=10, max_length=20, pattern=PHONE_PATTERN)
    location: str | None = Field(None, max_length=100)
    website: str | None = Field(None, max_length=255)

    @field_validator("email")
    @classmethod
    def validate_email(cls, v: str | None) -> str | None:
        return _check_email(v)

    @field_validator("avatar_url", "website")
    @classmethod
    def validate_url(cls, v: str | None) -> str | None:
        return _check_url(v)


class ProfileResponse(BaseModel):
    """Schema for Profile response."""

    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "id": 1,
                "name": "John Doe",
                "email": "john.doe@example.com",
                "bio": "Software developer",
                "avatarUrl": None,
                "phone": "1234567890",
                "location": "New York",
                "website": "https://johndoe.com",
                "createdAt": "2026-01-28T10:00:00",
                "updatedAt": "2026-01-28T10:00:00",
            }
        },
    )

    id: int
    name: str
    email: str
    bio: str | None = None
    avatar_url: str | None = None
    phone: str | None = None
    location: str | None = None
    website: str | None = None
    created_at: datetime
    updated_at: datetime
