from artha.auth.crud import (
    find_user_by_id,
    get_user_by_email,
    get_user_by_id,
    register_user,
    set_user_role,
    update_preferences,
    verify_credentials,
)
from artha.auth.deps import (
    AdminIdentity,
    CurrentIdentity,
    SessionDep,
    get_current_identity,
    require_role,
)
from artha.auth.models import (
    AuthResponse,
    PreferencesUpdate,
    ProfileResponse,
    TokenPayload,
    User,
    UserLogin,
    UserPublic,
    UserRegister,
    UserRole,
)
from artha.auth.tokens import issue_token, verify_token

__all__ = [
    # Dependencies
    "AdminIdentity",
    "CurrentIdentity",
    "SessionDep",
    # Models
    "AuthResponse",
    "PreferencesUpdate",
    "ProfileResponse",
    "TokenPayload",
    "User",
    "UserLogin",
    "UserPublic",
    "UserRegister",
    "UserRole",
    # CRUD
    "find_user_by_id",
    "get_current_identity",
    "get_user_by_email",
    "get_user_by_id",
    "issue_token",
    "register_user",
    "require_role",
    "set_user_role",
    "update_preferences",
    "verify_credentials",
    "verify_token",
]
