"""Creation and lookup of a user's folders."""

from collections.abc import Sequence

from loguru import logger
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session

from src.selectshop.core.exceptions import NotFoundError, StorageFailureError
from src.selectshop.core.validation import validate_folder_names
from src.selectshop.entities.core.user import User
from src.selectshop.entities.service.folder import Folder, FolderRepository, FolderSummary


class FolderRegistry:
    """Owns the folders of every user; the only writer of folder rows.

    Names are unique per owner using exact, case-sensitive comparison. The
    caller owns the transaction: nothing here commits.
    """

    def __init__(self, session: Session) -> None:
        self._folders = FolderRepository(session)

    def add_folders(self, names: Sequence[str], owner: User) -> None:
        """Create a folder for each name the owner does not already have.

        Names are handled in order; a name that exists for ``owner`` or
        appeared earlier in ``names`` is skipped silently.

        Raises:
            InvalidArgumentError: ``names`` is empty or contains a blank name.
            StorageFailureError: The store rejected the insert, for example a
                concurrent request created the same folder first.
        """
        checked = validate_folder_names(names)

        try:
            seen = self._folders.names_by_user(owner.id, checked)
            pending = []
            for name in checked:
                if name in seen:
                    logger.debug("Skipping existing folder {!r} for user {}", name, owner.id)
                    continue
                seen.add(name)
                pending.append(Folder(name=name, user_id=owner.id))

            created = self._folders.create_many(pending) if pending else []
        except SQLAlchemyError as e:
            raise StorageFailureError(f"Failed to store folders: {e}") from e

        logger.info(
            "Folders added for user {}: {} created, {} skipped",
            owner.id,
            len(created),
            len(checked) - len(created),
        )

    def get_folders(self, owner: User) -> list[FolderSummary]:
        """All folders of ``owner`` as id/name pairs, oldest first."""
        try:
            folders = self._folders.list_by_user(owner.id)
        except SQLAlchemyError as e:
            raise StorageFailureError(f"Failed to load folders: {e}") from e
        return [folder.summary() for folder in folders]

    def get_folder(self, folder_id: int, owner: User) -> Folder:
        """Resolve one of ``owner``'s folders.

        Raises:
            NotFoundError: No such folder, or it belongs to another user.
        """
        try:
            folder = self._folders.get(folder_id)
        except SQLAlchemyError as e:
            raise StorageFailureError(f"Failed to load folder: {e}") from e
        if folder is None or folder.user_id != owner.id:
            raise NotFoundError(f"Folder {folder_id} not found")
        return folder
