from artha.core.logging import redact_secrets


def test_credentials_are_masked() -> None:
    event = {
        "event": "user_login",
        "password": "hunter22",
        "auth_token": "eyJhbGciOi...",
        "user_id": "42",
    }

    result = redact_secrets(None, "info", event)

    assert result["password"] == "***"
    assert result["auth_token"] == "***"
    assert result["user_id"] == "42"
