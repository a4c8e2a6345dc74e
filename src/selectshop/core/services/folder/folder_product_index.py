"""Folder/product association queries and updates."""

from loguru import logger
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session

from src.selectshop.core.exceptions import (
    InvalidArgumentError,
    NotFoundError,
    StorageFailureError,
)
from src.selectshop.entities.core.user import User
from src.selectshop.entities.service.folder import Folder, FolderRepository, FolderSummary
from src.selectshop.entities.service.folder_product import (
    FolderProduct,
    FolderProductRepository,
)
from src.selectshop.entities.service.product import Product, ProductRepository


class FolderProductIndex:
    """Resolves which products sit in which folders, scoped to the folder's owner."""

    def __init__(self, session: Session) -> None:
        self._folders = FolderRepository(session)
        self._products = ProductRepository(session)
        self._links = FolderProductRepository(session)

    def products_in(self, folder: Folder) -> list[Product]:
        """Products placed in ``folder``.

        Ownership of ``folder`` must already be checked by the caller. Only
        products owned by the folder's owner are returned.

        Raises:
            NotFoundError: The folder does not exist in storage.
        """
        try:
            stored = self._folders.get(folder.id) if folder.id is not None else None
            if stored is None:
                raise NotFoundError(f"Folder {folder.id} not found")
            return self._links.products_in_folder(stored.id, stored.user_id)
        except SQLAlchemyError as e:
            raise StorageFailureError(f"Failed to load folder products: {e}") from e

    def add_product_to_folder(self, product_id: int, folder_id: int, owner: User) -> None:
        """Place one of ``owner``'s products into one of their folders.

        Raises:
            NotFoundError: The product or folder is missing or not owned by ``owner``.
            InvalidArgumentError: The product is already in the folder.
        """
        try:
            product = self._products.get(product_id)
            if product is None or product.user_id != owner.id:
                raise NotFoundError(f"Product {product_id} not found")

            folder = self._folders.get(folder_id)
            if folder is None or folder.user_id != owner.id:
                raise NotFoundError(f"Folder {folder_id} not found")

            if self._links.exists(folder.id, product.id):
                raise InvalidArgumentError(
                    f"Product {product_id} is already in folder {folder_id}"
                )

            self._links.create(FolderProduct(folder_id=folder.id, product_id=product.id))
        except SQLAlchemyError as e:
            raise StorageFailureError(f"Failed to link product to folder: {e}") from e

        logger.info("Product {} added to folder {} by user {}", product_id, folder_id, owner.id)

    def folders_of(self, product: Product) -> list[FolderSummary]:
        """Folders ``product`` has been placed in."""
        try:
            folders = self._links.folders_of_product(product.id)
        except SQLAlchemyError as e:
            raise StorageFailureError(f"Failed to load product folders: {e}") from e
        return [folder.summary() for folder in folders]
