"""Folder database table model."""

from sqlalchemy import UniqueConstraint
from sqlmodel import Field

from src.selectshop.entities._base import EntityTable


class FolderTable(EntityTable, table=True):
    """Database persistence model for folders.

    The ``(user_id, name)`` constraint is the final guard against two
    concurrent requests creating the same folder for one user.
    """

    __tablename__ = "folders"
    __table_args__ = (UniqueConstraint("user_id", "name", name="uq_folders_user_name"),)

    name: str = Field(nullable=False)
    user_id: int = Field(foreign_key="users.id", index=True, nullable=False)
