"""FolderProduct repository for association queries."""

from sqlmodel import Session, col, select

from src.selectshop.entities.service.folder.entity import Folder
from src.selectshop.entities.service.folder.table import FolderTable
from src.selectshop.entities.service.product.entity import Product
from src.selectshop.entities.service.product.table import ProductTable

from .entity import FolderProduct
from .table import FolderProductTable


class FolderProductRepository:
    """Data-access layer for folder/product links."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def create(self, link: FolderProduct) -> FolderProduct:
        row = FolderProductTable.model_validate(link, from_attributes=True)
        self._session.add(row)
        self._session.flush()
        self._session.refresh(row)
        return FolderProduct.model_validate(row, from_attributes=True)

    def exists(self, folder_id: int, product_id: int) -> bool:
        statement = select(FolderProductTable.id).where(
            FolderProductTable.folder_id == folder_id,
            FolderProductTable.product_id == product_id,
        )
        return self._session.exec(statement).first() is not None

    def products_in_folder(self, folder_id: int, owner_id: int) -> list[Product]:
        """Products linked to ``folder_id`` that belong to ``owner_id``, in link order."""
        statement = (
            select(ProductTable)
            .join(FolderProductTable, col(FolderProductTable.product_id) == col(ProductTable.id))
            .where(
                FolderProductTable.folder_id == folder_id,
                ProductTable.user_id == owner_id,
            )
            .order_by(col(FolderProductTable.id))
        )
        rows = self._session.exec(statement).all()
        return [Product.model_validate(row, from_attributes=True) for row in rows]

    def folders_of_product(self, product_id: int) -> list[Folder]:
        statement = (
            select(FolderTable)
            .join(FolderProductTable, col(FolderProductTable.folder_id) == col(FolderTable.id))
            .where(FolderProductTable.product_id == product_id)
            .order_by(col(FolderProductTable.id))
        )
        rows = self._session.exec(statement).all()
        return [Folder.model_validate(row, from_attributes=True) for row in rows]
