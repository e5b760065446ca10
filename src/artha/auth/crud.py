import uuid

from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, select

from artha.auth.models import (
    MIN_PASSWORD_LENGTH,
    PreferencesUpdate,
    User,
    UserRegister,
    UserRole,
)
from artha.core.exceptions import (
    DuplicateIdentityError,
    InvalidCredentialsError,
    ResourceNotFoundError,
    ValidationError,
)
from artha.core.logging import get_logger
from artha.core.security import dummy_password_hash, get_password_hash, verify_password

logger = get_logger(__name__)


def register_user(*, session: Session, user_in: UserRegister) -> User:
    """Create a new identity with a hashed password.

    Args:
        session: Database session
        user_in: Registration data (email already lowercased)

    Returns:
        Created user object

    Raises:
        ValidationError: If a field is blank or the password is too short
        DuplicateIdentityError: If the email is already registered
    """
    if not user_in.name or not user_in.email or not user_in.password:
        raise ValidationError("All fields are required")
    if len(user_in.password) < MIN_PASSWORD_LENGTH:
        raise ValidationError(
            f"Password must be at least {MIN_PASSWORD_LENGTH} characters",
            field="password",
        )

    email = user_in.email.lower()
    if get_user_by_email(session=session, email=email):
        raise DuplicateIdentityError()

    db_obj = User(
        name=user_in.name,
        email=email,
        hashed_password=get_password_hash(user_in.password),
    )
    session.add(db_obj)
    try:
        session.commit()
    except IntegrityError as e:
        # Lost a race with a concurrent registration for the same email
        session.rollback()
        raise DuplicateIdentityError() from e
    session.refresh(db_obj)
    logger.info("user_registered", user_id=str(db_obj.id))
    return db_obj


def get_user_by_email(*, session: Session, email: str) -> User | None:
    """Get a user by email address, ignoring case."""
    statement = select(User).where(User.email == email.strip().lower())
    return session.exec(statement).first()


def get_user_by_id(*, session: Session, user_id: uuid.UUID) -> User | None:
    return session.get(User, user_id)


def find_user_by_id(*, session: Session, user_id: uuid.UUID) -> User:
    """Get a user by ID or raise.

    Raises:
        ResourceNotFoundError: If no such user exists
    """
    user = get_user_by_id(session=session, user_id=user_id)
    if not user:
        raise ResourceNotFoundError("User")
    return user


def verify_credentials(*, session: Session, email: str, password: str) -> User:
    """Authenticate a user by email and password.

    Unknown email and wrong password fail identically, and the unknown-email
    path still pays for one hash verification so the two are not
    distinguishable by timing.

    Raises:
        InvalidCredentialsError: If the credentials do not match
    """
    db_user = get_user_by_email(session=session, email=email)

    if not db_user:
        verify_password(password, dummy_password_hash())
        raise InvalidCredentialsError()

    if not verify_password(password, db_user.hashed_password):
        raise InvalidCredentialsError()

    return db_user


def update_preferences(
    *, session: Session, db_user: User, prefs_in: PreferencesUpdate
) -> User:
    """Merge preference changes into the stored preferences."""
    changes = prefs_in.model_dump(exclude_unset=True, exclude_none=True, by_alias=True)
    db_user.preferences = {**db_user.preferences, **changes}
    session.add(db_user)
    session.commit()
    session.refresh(db_user)
    return db_user


def set_user_role(*, session: Session, db_user: User, role: UserRole) -> User:
    """Change a user's role.

    Only the administrative bootstrap script calls this; no request handler
    can reach it.
    """
    previous = db_user.role
    db_user.role = role
    session.add(db_user)
    session.commit()
    session.refresh(db_user)
    logger.info(
        "user_role_changed",
        user_id=str(db_user.id),
        previous_role=previous.value,
        role=role.value,
    )
    return db_user
