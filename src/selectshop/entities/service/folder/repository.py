"""Folder repository for data access operations."""

from collections.abc import Iterable

from sqlmodel import Session, col, select

from .entity import Folder
from .table import FolderTable


class FolderRepository:
    """Data-access layer for folders."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def get(self, folder_id: int) -> Folder | None:
        row = self._session.get(FolderTable, folder_id)
        if row is None:
            return None
        return Folder.model_validate(row, from_attributes=True)

    def list_by_user(self, user_id: int) -> list[Folder]:
        """Folders owned by ``user_id`` in insertion order."""
        statement = (
            select(FolderTable)
            .where(FolderTable.user_id == user_id)
            .order_by(col(FolderTable.id))
        )
        rows = self._session.exec(statement).all()
        return [Folder.model_validate(row, from_attributes=True) for row in rows]

    def names_by_user(self, user_id: int, names: Iterable[str]) -> set[str]:
        """Subset of ``names`` the user already has folders for."""
        statement = select(FolderTable.name).where(
            FolderTable.user_id == user_id, col(FolderTable.name).in_(list(names))
        )
        return set(self._session.exec(statement).all())

    def create_many(self, folders: Iterable[Folder]) -> list[Folder]:
        """Persist new folders in the given order and return them with ids."""
        rows = [FolderTable.model_validate(folder, from_attributes=True) for folder in folders]
        self._session.add_all(rows)
        self._session.flush()
        for row in rows:
            self._session.refresh(row)
        return [Folder.model_validate(row, from_attributes=True) for row in rows]
