"""Account signup and login."""

import hmac

from loguru import logger
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlmodel import Session

from src.selectshop.core.exceptions import (
    InvalidArgumentError,
    StorageFailureError,
    UnauthenticatedError,
)
from src.selectshop.core.security import hash_password, verify_password
from src.selectshop.core.services.jwt import JwtService
from src.selectshop.core.validation import require_non_blank
from src.selectshop.entities.core.user import User, UserRepository, UserRole
from src.selectshop.runtime.context import get_config


class UserService:
    def __init__(self, session: Session, jwt_service: JwtService) -> None:
        self._users = UserRepository(session)
        self._jwt_service = jwt_service

    def signup(
        self,
        username: str,
        password: str,
        email: str,
        admin: bool = False,
        admin_token: str = "",
    ) -> User:
        """Register a new account.

        Raises:
            InvalidArgumentError: Blank fields, a taken username or email, or
                an ADMIN request with the wrong admin token.
        """
        require_non_blank(username, "username")
        require_non_blank(password, "password")
        require_non_blank(email, "email")

        role = UserRole.USER
        if admin:
            expected = get_config().security.admin_token
            # compare_digest rejects non-ASCII str
            if not hmac.compare_digest(admin_token.encode("utf-8"), expected.encode("utf-8")):
                raise InvalidArgumentError("Admin token is incorrect")
            role = UserRole.ADMIN

        try:
            if self._users.get_by_username(username) is not None:
                raise InvalidArgumentError("Username is already registered")
            if self._users.exists_by_email(email):
                raise InvalidArgumentError("Email is already registered")

            user = self._users.create(
                User(
                    username=username,
                    email=email,
                    password_hash=hash_password(password),
                    role=role,
                )
            )
        except IntegrityError as e:
            raise InvalidArgumentError("Username or email is already registered") from e
        except SQLAlchemyError as e:
            raise StorageFailureError(f"Failed to store user: {e}") from e

        logger.info("User {} signed up with role {}", user.id, user.role)
        return user

    def login(self, username: str, password: str) -> str:
        """Exchange credentials for an access token.

        Raises:
            UnauthenticatedError: Unknown username or wrong password.
        """
        try:
            user = self._users.get_by_username(username)
        except SQLAlchemyError as e:
            raise StorageFailureError(f"Failed to load user: {e}") from e

        if user is None or not verify_password(password, user.password_hash):
            raise UnauthenticatedError("Invalid username or password")

        return self._jwt_service.generate_access_token(user)

    def get_user(self, user_id: int) -> User | None:
        try:
            return self._users.get(user_id)
        except SQLAlchemyError as e:
            raise StorageFailureError(f"Failed to load user: {e}") from e
