import uuid

import pytest
from sqlmodel import Session

from artha.auth import (
    User,
    UserRegister,
    UserRole,
    find_user_by_id,
    get_user_by_email,
    register_user,
    verify_credentials,
)
from artha.core.exceptions import (
    DuplicateIdentityError,
    InvalidCredentialsError,
    ResourceNotFoundError,
    ValidationError,
)
from artha.core.security import verify_password
from artha.feedback import Feedback
from tests.utils.user import random_email


def test_register_stores_hash_not_plaintext(db: Session) -> None:
    email = random_email()
    user = register_user(
        session=db,
        user_in=UserRegister(name="Ada", email=email, password="hunter22"),
    )

    assert user.email == email
    assert user.role == UserRole.STANDARD
    assert user.hashed_password != "hunter22"
    assert "hunter22" not in user.hashed_password
    assert verify_password("hunter22", user.hashed_password)
    assert user.translation_history == []
    assert user.preferences["defaultSourceLang"] == "en"


def test_register_lowercases_email(db: Session) -> None:
    user = register_user(
        session=db,
        user_in=UserRegister(
            name="Ada", email="Ada.Lovelace@Example.COM", password="hunter22"
        ),
    )
    assert user.email == "ada.lovelace@example.com"


def test_register_duplicate_email_fails(db: Session) -> None:
    email = random_email()
    register_user(
        session=db, user_in=UserRegister(name="First", email=email, password="hunter22")
    )

    with pytest.raises(DuplicateIdentityError):
        register_user(
            session=db,
            user_in=UserRegister(
                name="Second", email=email.upper(), password="other-pass"
            ),
        )

    # The first registration is untouched
    stored = get_user_by_email(session=db, email=email)
    assert stored is not None
    assert stored.name == "First"
    assert verify_password("hunter22", stored.hashed_password)


@pytest.mark.parametrize("password", ["", "a", "abcde"])
def test_register_short_password_fails(db: Session, password: str) -> None:
    user_in = UserRegister.model_construct(
        name="Ada", email=random_email(), password=password
    )
    with pytest.raises(ValidationError):
        register_user(session=db, user_in=user_in)


def test_verify_credentials(db: Session) -> None:
    email = random_email()
    created = register_user(
        session=db, user_in=UserRegister(name="Ada", email=email, password="hunter22")
    )

    user = verify_credentials(session=db, email=email.upper(), password="hunter22")
    assert user.id == created.id


def test_wrong_password_and_unknown_email_fail_the_same_way(db: Session) -> None:
    email = random_email()
    register_user(
        session=db, user_in=UserRegister(name="Ada", email=email, password="hunter22")
    )

    with pytest.raises(InvalidCredentialsError) as wrong_password:
        verify_credentials(session=db, email=email, password="hunter23")
    with pytest.raises(InvalidCredentialsError) as unknown_email:
        verify_credentials(session=db, email=random_email(), password="hunter22")

    assert wrong_password.value.to_dict() == unknown_email.value.to_dict()


def test_find_user_by_id_missing(db: Session) -> None:
    with pytest.raises(ResourceNotFoundError):
        find_user_by_id(session=db, user_id=uuid.uuid4())


def test_creation_time_is_stored_with_timezone() -> None:
    assert User.__table__.c.created_at.type.timezone is True
    assert Feedback.__table__.c.created_at.type.timezone is True
