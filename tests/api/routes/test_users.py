from datetime import datetime, timedelta
import uuid

from fastapi.testclient import TestClient
from sqlmodel import Session

from artha.core.security import create_access_token
from tests.utils.user import auth_headers, create_random_user, register_via_api


def test_profile_requires_token(client: TestClient) -> None:
    response = client.get("/api/user/profile")

    assert response.status_code == 401
    assert response.json()["error_code"] == "UNAUTHORIZED"


def test_profile_rejects_bad_token(client: TestClient) -> None:
    response = client.get(
        "/api/user/profile", headers={"Authorization": "Bearer not-a-token"}
    )

    assert response.status_code == 403
    assert response.json()["message"] == "Invalid or expired token"


def test_profile_rejects_expired_token(client: TestClient, db: Session) -> None:
    user = create_random_user(db)
    token, _ = create_access_token(
        str(user.id),
        claims={"email": user.email, "role": user.role.value},
        expires_delta=timedelta(seconds=-1),
    )

    response = client.get(
        "/api/user/profile", headers={"Authorization": f"Bearer {token}"}
    )

    assert response.status_code == 403


def test_profile_returns_stored_user(client: TestClient) -> None:
    registered = register_via_api(client, name="Ada")
    headers = {"Authorization": f"Bearer {registered['token']}"}

    response = client.get("/api/user/profile", headers=headers)

    assert response.status_code == 200
    user = response.json()["user"]
    assert user["id"] == registered["user"]["id"]
    assert user["name"] == "Ada"
    assert user["preferences"] == {
        "defaultSourceLang": "en",
        "defaultTargetLang": "es",
        "theme": "dark",
    }
    assert "hashedPassword" not in user


def test_profile_for_deleted_user(client: TestClient, db: Session) -> None:
    user = create_random_user(db)
    headers = auth_headers(user)
    db.delete(user)
    db.commit()

    response = client.get("/api/user/profile", headers=headers)

    assert response.status_code == 404
    assert response.json()["error_code"] == "USER_NOT_FOUND"


def test_profile_for_unknown_subject(client: TestClient) -> None:
    token, _ = create_access_token(
        str(uuid.uuid4()), claims={"email": "ghost@example.com", "role": "standard"}
    )

    response = client.get(
        "/api/user/profile", headers={"Authorization": f"Bearer {token}"}
    )

    assert response.status_code == 404


def test_update_preferences_merges(client: TestClient, db: Session) -> None:
    user = create_random_user(db)

    response = client.patch(
        "/api/user/preferences",
        headers=auth_headers(user),
        json={"defaultTargetLang": "fr"},
    )

    assert response.status_code == 200
    assert response.json()["user"]["preferences"] == {
        "defaultSourceLang": "en",
        "defaultTargetLang": "fr",
        "theme": "dark",
    }


def test_update_preferences_cannot_change_role(client: TestClient, db: Session) -> None:
    user = create_random_user(db)

    response = client.patch(
        "/api/user/preferences",
        headers=auth_headers(user),
        json={"theme": "light", "role": "admin"},
    )

    assert response.status_code == 400
    profile = client.get("/api/user/profile", headers=auth_headers(user)).json()
    assert profile["user"]["role"] == "standard"
    assert profile["user"]["preferences"]["theme"] == "dark"


def test_profile_created_at_carries_offset(client: TestClient) -> None:
    registered = register_via_api(client)
    headers = {"Authorization": f"Bearer {registered['token']}"}

    user = client.get("/api/user/profile", headers=headers).json()["user"]

    created_at = datetime.fromisoformat(user["createdAt"])
    assert created_at.utcoffset() == timedelta(0)
