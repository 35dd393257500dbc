from typing import Any


def make_user_payload(**overrides: Any) -> dict[str, Any]:
    """Build a valid create payload in wire (camelCase) form."""
    payload: dict[str, Any] = {
        "name": "Ada Lovelace",
        "ext": "+44",
        "phone": "5551234",
        "email": "ada@example.com",
        "dateOfBirth": "1990-05-15",
        "password": "s3cret-pass",
        "skills": [{"field": "Mathematics", "tags": ["analysis", "engines"]}],
    }
    payload.update(overrides)
    return payload


def make_users(count: int, **overrides: Any) -> list[dict[str, Any]]:
    """Build ``count`` valid payloads with distinct names and emails."""
    return [
        make_user_payload(
            name=f"User {index:02d}",
            email=f"user{index:02d}@example.com",
            **overrides,
        )
        for index in range(1, count + 1)
    ]
