"""Product database table model."""

from sqlmodel import Field

from src.selectshop.entities._base import EntityTable


class ProductTable(EntityTable, table=True):
    """Database persistence model for products."""

    __tablename__ = "products"

    title: str = Field(nullable=False)
    image: str = Field(nullable=False)
    link: str = Field(nullable=False)
    lprice: int = Field(nullable=False)
    myprice: int = Field(default=0, nullable=False)
    user_id: int = Field(foreign_key="users.id", index=True, nullable=False)
