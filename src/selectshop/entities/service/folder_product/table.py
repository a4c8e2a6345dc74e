"""FolderProduct database table model."""

from sqlalchemy import UniqueConstraint
from sqlmodel import Field

from src.selectshop.entities._base import EntityTable


class FolderProductTable(EntityTable, table=True):
    """Many-to-many link between folders and products."""

    __tablename__ = "folder_products"
    __table_args__ = (
        UniqueConstraint("folder_id", "product_id", name="uq_folder_products_pair"),
    )

    folder_id: int = Field(foreign_key="folders.id", index=True, nullable=False)
    product_id: int = Field(foreign_key="products.id", index=True, nullable=False)
