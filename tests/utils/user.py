import random
import string

from fastapi.testclient import TestClient
from sqlmodel import Session

from artha.auth import (
    User,
    UserRegister,
    UserRole,
    issue_token,
    register_user,
    set_user_role,
)


def random_lower_string(length: int = 16) -> str:
    return "".join(random.choices(string.ascii_lowercase, k=length))


def random_email() -> str:
    return f"{random_lower_string(10)}@example.com"


def create_random_user(
    session: Session,
    *,
    role: UserRole = UserRole.STANDARD,
    password: str = "secret-pass",
) -> User:
    user_in = UserRegister(
        name=random_lower_string(8), email=random_email(), password=password
    )
    user = register_user(session=session, user_in=user_in)
    if role != UserRole.STANDARD:
        user = set_user_role(session=session, db_user=user, role=role)
    return user


def auth_headers(user: User) -> dict[str, str]:
    return {"Authorization": f"Bearer {issue_token(user)}"}


def register_via_api(
    client: TestClient,
    *,
    name: str = "Test User",
    email: str | None = None,
    password: str = "secret-pass",
) -> dict:
    response = client.post(
        "/api/auth/register",
        json={"name": name, "email": email or random_email(), "password": password},
    )
    assert response.status_code == 201, response.text
    return response.json()
