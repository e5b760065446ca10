"""Authentication routes package.

- signup: Registration of new identities
- login: Credential verification and token issuance
"""

from fastapi import APIRouter

from artha.api.routes.auth import login, signup

router = APIRouter(prefix="/auth", tags=["auth"])

router.include_router(signup.router)
router.include_router(login.router)
