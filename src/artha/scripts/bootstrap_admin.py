"""Promote an existing identity to the admin role.

Run deliberately, once per admin, never as part of server startup::

    python -m artha.scripts.bootstrap_admin someone@example.com

Without an argument the email is taken from FIRST_ADMIN_EMAIL.
"""

import logging
import sys

from sqlalchemy import Engine
from sqlmodel import Session

from artha.auth import UserRole, get_user_by_email, set_user_role
from artha.core.config import settings
from artha.core.db import engine

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


class BootstrapError(Exception):
    """The requested promotion cannot be performed."""


def promote_admin(email: str | None, db_engine: Engine = engine) -> bool:
    """Give ``email`` the admin role.

    Returns:
        True if the role changed, False if the user was already an admin

    Raises:
        BootstrapError: If no email is given or no such user exists
    """
    if not email:
        raise BootstrapError(
            "No email given and FIRST_ADMIN_EMAIL is not set"
        )

    with Session(db_engine) as session:
        user = get_user_by_email(session=session, email=email)
        if not user:
            raise BootstrapError(f"No registered user with email {email}")
        if user.role == UserRole.ADMIN:
            logger.info(f"{user.email} is already an admin")
            return False
        set_user_role(session=session, db_user=user, role=UserRole.ADMIN)
        logger.info(f"{user.email} is now an admin")
        return True


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    email = args[0] if args else settings.FIRST_ADMIN_EMAIL
    try:
        promote_admin(email)
    except BootstrapError as e:
        logger.error(str(e))
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
