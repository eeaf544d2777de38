"""User profile API routes."""

from dataclasses import asdict

from fastapi import APIRouter, Depends, Query, Request, status

from api.v1.dependencies import get_profile_store
from api.v1.schemas.profile import (
    ErrorResponse,
    ProfileCreate,
    ProfileDeleteResponse,
    ProfileResponse,
    ProfileUpdate,
)
from core.exceptions import ProfileNotFoundError
from core.rate_limit import READ_LIMIT, WRITE_LIMIT, limiter
from domain.entities.profile import Profile, ProfileDraft
from domain.repositories.profile_repository import IProfileRepository

router = APIRouter(prefix="/users", tags=["users"])


def _to_response(profile: Profile) -> ProfileResponse:
    return ProfileResponse.model_validate(asdict(profile))


@router.get(
    "",
    response_model=list[ProfileResponse],
    summary="List or search profiles",
)
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def list_users(
    request: Request,
    q: str | None = Query(None, description="Case-insensitive substring search"),
    store: IProfileRepository = Depends(get_profile_store),
) -> list[ProfileResponse]:
    """Get all profiles in insertion order, or those matching ``q``."""
    if q is not None and q.strip():
        profiles = await store.search(q)
    else:
        profiles = await store.get_all()
    return [_to_response(profile) for profile in profiles]


@router.get(
    "/{user_id}",
    response_model=ProfileResponse | None,
    summary="Get a profile",
)
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def get_user(
    request: Request,
    user_id: str,
    store: IProfileRepository = Depends(get_profile_store),
) -> ProfileResponse | None:
    """Get a profile by id. Returns ``null`` when it does not exist."""
    profile = await store.get_by_id(user_id)
    return _to_response(profile) if profile else None


@router.post(
    "",
    response_model=ProfileResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a profile",
    responses={
        201: {"description": "Profile created successfully"},
        400: {"model": ErrorResponse, "description": "Required field missing"},
    },
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def create_user(
    request: Request,
    body: ProfileCreate,
    store: IProfileRepository = Depends(get_profile_store),
) -> ProfileResponse:
    """Create a profile. The id and timestamps are assigned by the server."""
    profile = await store.create(ProfileDraft(**body.model_dump()))
    return _to_response(profile)


@router.put(
    "/{user_id}",
    response_model=ProfileResponse,
    summary="Update a profile",
    responses={
        200: {"description": "Profile updated successfully"},
        404: {"model": ErrorResponse, "description": "Profile not found"},
    },
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def update_user(
    request: Request,
    user_id: str,
    body: ProfileUpdate,
    store: IProfileRepository = Depends(get_profile_store),
) -> ProfileResponse:
    """Merge the supplied fields into a profile; omitted fields are kept."""
    profile = await store.update(user_id, body.model_dump(exclude_unset=True))
    if profile is None:
        raise ProfileNotFoundError(user_id)
    return _to_response(profile)


@router.delete(
    "/{user_id}",
    response_model=ProfileDeleteResponse,
    summary="Delete a profile",
    responses={
        200: {"description": "Profile deleted successfully"},
        404: {"model": ErrorResponse, "description": "Profile not found"},
    },
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def delete_user(
    request: Request,
    user_id: str,
    store: IProfileRepository = Depends(get_profile_store),
) -> ProfileDeleteResponse:
    """Delete a profile permanently."""
    if not await store.delete(user_id):
        raise ProfileNotFoundError(user_id)
    return ProfileDeleteResponse(message="User deleted successfully")
