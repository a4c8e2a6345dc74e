"""User domain entity."""

from enum import StrEnum
from typing import Any

from pydantic import Field

from src.selectshop.entities._base import Entity


class UserRole(StrEnum):
    USER = "USER"
    ADMIN = "ADMIN"


class User(Entity):
    """A registered account.

    Users are created by signup only; the folder and product services use
    them purely as an ownership tag.
    """

    username: str = Field(description="Unique login name")
    email: str = Field(description="Unique email address")
    password_hash: str = Field(description="Encoded salted password hash", repr=False)
    role: UserRole = Field(default=UserRole.USER, description="Authorization role")

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN

    def __eq__(self, other: Any) -> bool:
        """Compare users by identity and account attributes, ignoring timestamps."""
        if not isinstance(other, User):
            return False

        return (
            self.id == other.id
            and self.username == other.username
            and self.email == other.email
            and self.role == other.role
        )

    def __hash__(self) -> int:
        return hash((self.id, self.username, self.email, self.role))
