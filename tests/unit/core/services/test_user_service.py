"""Tests for UserService and JwtService."""

import time

import pytest
from authlib.jose import jwt
from sqlmodel import Session

from src.selectshop.core.exceptions import InvalidArgumentError, UnauthenticatedError
from src.selectshop.core.services import JwtService, UserService
from src.selectshop.entities import UserRole
from src.selectshop.runtime.config.config_data import ConfigData
from src.selectshop.runtime.context import with_context


@pytest.fixture
def fast_hashing():
    override = ConfigData()
    override.security.password_hash_iterations = 1000
    with with_context(override):
        yield


@pytest.fixture
def jwt_service() -> JwtService:
    return JwtService()


@pytest.fixture
def users(session: Session, jwt_service: JwtService, fast_hashing) -> UserService:
    return UserService(session, jwt_service)


class TestSignup:
    def test_signup_creates_user(self, users: UserService):
        user = users.signup("sollertia4351", "robbie1234", "sollertia@sparta.com")

        assert user.id is not None
        assert user.role == UserRole.USER
        assert user.password_hash != "robbie1234"

    def test_duplicate_username_rejected(self, users: UserService):
        users.signup("sollertia4351", "robbie1234", "sollertia@sparta.com")

        with pytest.raises(InvalidArgumentError):
            users.signup("sollertia4351", "other", "other@sparta.com")

    def test_duplicate_email_rejected(self, users: UserService):
        users.signup("sollertia4351", "robbie1234", "sollertia@sparta.com")

        with pytest.raises(InvalidArgumentError):
            users.signup("someone", "other", "sollertia@sparta.com")

    def test_admin_with_valid_token(self, users: UserService):
        override = ConfigData()
        override.security.admin_token = "let-me-in"

        with with_context(override):
            user = users.signup("boss", "pw", "boss@sparta.com", admin=True, admin_token="let-me-in")

        assert user.role == UserRole.ADMIN

    def test_admin_with_wrong_token_rejected(self, users: UserService):
        with pytest.raises(InvalidArgumentError):
            users.signup("boss", "pw", "boss@sparta.com", admin=True, admin_token="guess")

    def test_admin_with_non_ascii_token_rejected(self, users: UserService):
        with pytest.raises(InvalidArgumentError):
            users.signup("boss", "pw", "boss@sparta.com", admin=True, admin_token="관리자")

    def test_blank_password_rejected(self, users: UserService):
        with pytest.raises(InvalidArgumentError):
            users.signup("sollertia4351", " ", "sollertia@sparta.com")


class TestLogin:
    def test_login_returns_verifiable_token(self, users: UserService, jwt_service: JwtService):
        user = users.signup("sollertia4351", "robbie1234", "sollertia@sparta.com")

        token = users.login("sollertia4351", "robbie1234")
        claims = jwt_service.verify_jwt(token)

        assert claims.user_id == user.id
        assert claims.username == "sollertia4351"
        assert claims.role == "USER"

    def test_wrong_password_rejected(self, users: UserService):
        users.signup("sollertia4351", "robbie1234", "sollertia@sparta.com")

        with pytest.raises(UnauthenticatedError):
            users.login("sollertia4351", "wrong")

    def test_unknown_user_rejected(self, users: UserService):
        with pytest.raises(UnauthenticatedError):
            users.login("nobody", "robbie1234")


class TestJwtService:
    def test_expired_token_rejected(self, jwt_service: JwtService, owner):
        token = jwt_service.generate_access_token(owner, expires_in_seconds=-3600)

        with pytest.raises(UnauthenticatedError):
            jwt_service.verify_jwt(token)

    def test_token_signed_with_other_secret_rejected(self, jwt_service: JwtService, owner):
        now = int(time.time())
        forged = jwt.encode(
            {"alg": "HS256", "typ": "JWT"},
            {
                "iss": "selectshop",
                "sub": str(owner.id),
                "aud": ["selectshop-api"],
                "exp": now + 600,
                "iat": now,
            },
            "not-the-secret",
        ).decode()

        with pytest.raises(UnauthenticatedError):
            jwt_service.verify_jwt(forged)

    def test_wrong_audience_rejected(self, jwt_service: JwtService, owner):
        token = jwt_service.generate_access_token(owner)
        override = ConfigData()
        override.jwt.audiences = ["someone-else"]

        with with_context(override):
            with pytest.raises(UnauthenticatedError):
                jwt_service.verify_jwt(token)

    def test_garbage_rejected(self, jwt_service: JwtService):
        with pytest.raises(UnauthenticatedError) as excinfo:
            jwt_service.verify_jwt("not.a.token")

        assert excinfo.value.message == "Invalid access token"
