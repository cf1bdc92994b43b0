"""Profile API routes."""

from typing import Annotated

from fastapi import APIRouter, Depends, Path, Query, Request, status

from api.dependencies import get_profile_service
from api.schemas.common import ErrorResponse
from api.schemas.profile import ProfileCreate, ProfileResponse, ProfileUpdate
from core.rate_limit import limiter
from domain.entities.profile import Profile, ProfileChanges
from domain.services.profile_service import ProfileService

router = APIRouter(prefix="/profiles", tags=["profiles"])

# Ids are 64-bit integers in the store; larger values fail validation with 400
ProfileId = Annotated[int, Path(ge=-(2**63), le=2**63 - 1, description="Profile ID")]


def _to_response(profile: Profile) -> ProfileResponse:
    return ProfileResponse.model_validate(profile)


@router.get(
    "",
    response_model=list[ProfileResponse],
    summary="List profiles",
)
@limiter.limit("30/minute")  # type: ignore[untyped-decorator]
async def list_profiles(
    request: Request,
    service: ProfileService = Depends(get_profile_service),
    skip: int = Query(0, ge=0, description="Number of profiles to skip"),
    limit: int = Query(100, ge=0, description="Maximum number of profiles to return"),
) -> list[ProfileResponse]:
    """Get a page of profiles in creation order."""
    profiles = await service.list_profiles(skip=skip, limit=limit)
    return [_to_response(p) for p in profiles]


@router.get(
    "/search",
    response_model=list[ProfileResponse],
    summary="Search profiles",
)
@limiter.limit("30/minute")  # type: ignore[untyped-decorator]
async def search_profiles(
    request: Request,
    service: ProfileService = Depends(get_profile_service),
    name: str | None = Query(None, description="Substring of the name"),
    email: str | None = Query(None, description="Substring of the email"),
    location: str | None = Query(None, description="Substring of the location"),
) -> list[ProfileResponse]:
    """
    Search profiles by name, email and location.

    Each given criterion is a case-insensitive substring match; all given
    criteria must match. With no criteria every profile is returned.
    """
    profiles = await service.search_profiles(name=name, email=email, location=location)
    return [_to_response(p) for p in profiles]


@router.get(
    "/{profile_id}",
    response_model=ProfileResponse,
    summary="Get a profile",
    responses={
        404: {"model": ErrorResponse, "description": "Profile not found"},
    },
)
@limiter.limit("30/minute")  # type: ignore[untyped-decorator]
async def get_profile(
    request: Request,
    profile_id: ProfileId,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileResponse:
    """Get a single profile by ID."""
    profile = await service.get_profile(profile_id)
    return _to_response(profile)


@router.post(
    "",
    response_model=ProfileResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a profile",
    responses={
        201: {"description": "Profile created successfully"},
        400: {"model": ErrorResponse, "description": "Duplicate email or invalid field"},
    },
)
@limiter.limit("10/minute")  # type: ignore[untyped-decorator]
async def create_profile(
    request: Request,
    body: ProfileCreate,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileResponse:
    """Create a new profile. Emails are stored lower-cased and must be unique."""
    profile = await service.create_profile(
        name=body.name,
        email=body.email,
        bio=body.bio,
        avatar_url=body.avatar_url,
        phone=body.phone,
        location=body.location,
        website=body.website,
    )
    return _to_response(profile)


@router.put(
    "/{profile_id}",
    response_model=ProfileResponse,
    summary="Update a profile",
    responses={
        200: {"description": "Profile updated successfully"},
        400: {"model": ErrorResponse, "description": "Duplicate email or invalid field"},
        404: {"model": ErrorResponse, "description": "Profile not found"},
    },
)
@limiter.limit("10/minute")  # type: ignore[untyped-decorator]
async def update_profile(
    request: Request,
    profile_id: ProfileId,
    body: ProfileUpdate,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileResponse:
    """
    Update an existing profile. All fields are optional (partial update).

    Omitted or `null` fields keep their current value; an empty string
    replaces it.
    """
    changes = ProfileChanges(**body.model_dump(exclude_unset=True))
    profile = await service.update_profile(profile_id, changes)
    return _to_response(profile)


@router.delete(
    "/{profile_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a profile",
    responses={
        204: {"description": "Profile deleted successfully"},
        404: {"model": ErrorResponse, "description": "Profile not found"},
    },
)
@limiter.limit("10/minute")  # type: ignore[untyped-decorator]
async def delete_profile(
    request: Request,
    profile_id: ProfileId,
    service: ProfileService = Depends(get_profile_service),
) -> None:
    """Permanently delete a profile."""
    await service.delete_profile(profile_id)
    return None
