"""Tests unitaires pour UserService, PasswordHasher et JWTService."""

from datetime import timedelta

import pytest

from domain.exceptions import DuplicateUsernameError
from infrastructure.security.jwt_service import JWTService
from infrastructure.security.password_hasher import PasswordHasher


def test_register_stores_user(user_service, user_repo):
    user = user_service.register("ana", "s3cret", "Ana", avatar_url="https://a.png")

    assert user.id == 1
    stored = user_repo.find_by_id(user.id)
    assert user_service.password_hasher.verify("s3cret", stored.hashed_password)
    assert stored.name == "Ana"
    assert stored.avatar_url == "https://a.png"


def test_register_duplicate_username_raises(user_service):
    user_service.register("ana", "s3cret", "Ana")

    try:
        user_service.register("ana", "other", "Another Ana")
        assert False, "register aurait dû lever DuplicateUsernameError"
    except DuplicateUsernameError as exc:
        assert "already exists" in str(exc)


def test_authenticate(user_service):
    user_service.register("ana", "s3cret", "Ana")

    assert user_service.authenticate("ana", "s3cret").username == "ana"
    assert user_service.authenticate("ana", "wrong") is None
    assert user_service.authenticate("bob", "s3cret") is None


def test_bcrypt_hasher_roundtrip():
    hasher = PasswordHasher()
    hashed = hasher.hash("s3cret")

    assert hashed.startswith("$2")
    assert hasher.verify("s3cret", hashed)
    assert not hasher.verify("nope", hashed)
    assert not hasher.verify("s3cret", "not-a-hash")


@pytest.fixture
def jwt_service():
    return JWTService(secret_key="test-secret", expire_minutes=5)


def test_user_token_carries_username_and_id(jwt_service, user_service):
    user = user_service.register("ana", "s3cret", "Ana")

    payload = jwt_service.decode_token(jwt_service.create_user_token(user))

    assert payload["sub"] == "ana"
    assert payload["uid"] == user.id
    assert "exp" in payload


def test_invalid_tokens_are_rejected(jwt_service):
    expired = jwt_service.create_access_token({"sub": "ana"}, expires_delta=timedelta(minutes=-1))
    foreign = JWTService(secret_key="other-secret").create_access_token({"sub": "ana"})

    for token in (expired, foreign, "garbage"):
        with pytest.raises(ValueError):
            jwt_service.decode_token(token)
