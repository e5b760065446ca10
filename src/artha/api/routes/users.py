from typing import Any

from fastapi import APIRouter

from artha.auth import (
    CurrentIdentity,
    PreferencesUpdate,
    ProfileResponse,
    SessionDep,
    UserPublic,
    find_user_by_id,
    update_preferences,
)

router = APIRouter(prefix="/user", tags=["user"])


@router.get("/profile", response_model=ProfileResponse)
def read_profile(session: SessionDep, identity: CurrentIdentity) -> Any:
    """Get the caller's stored profile, without the password hash."""
    user = find_user_by_id(session=session, user_id=identity.user_id)
    return ProfileResponse(user=UserPublic.model_validate(user))


@router.patch("/preferences", response_model=ProfileResponse)
def update_my_preferences(
    session: SessionDep,
    identity: CurrentIdentity,
    prefs_in: PreferencesUpdate,
) -> Any:
    """Update default languages or theme.

    Only preference fields are accepted; anything else, including ``role``,
    is rejected.
    """
    user = find_user_by_id(session=session, user_id=identity.user_id)
    user = update_preferences(session=session, db_user=user, prefs_in=prefs_in)
    return ProfileResponse(user=UserPublic.model_validate(user))
