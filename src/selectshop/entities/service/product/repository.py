"""Product repository for data access operations."""

from sqlmodel import Session, col, select

from .entity import Product
from .table import ProductTable


class ProductRepository:
    """Data-access layer for products."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def create(self, product: Product) -> Product:
        row = ProductTable.model_validate(product, from_attributes=True)
        self._session.add(row)
        self._session.flush()
        self._session.refresh(row)
        return Product.model_validate(row, from_attributes=True)

    def get(self, product_id: int) -> Product | None:
        row = self._session.get(ProductTable, product_id)
        if row is None:
            return None
        return Product.model_validate(row, from_attributes=True)

    def update(self, product: Product) -> Product:
        """Write the mutable fields of an existing product."""
        row = self._session.get(ProductTable, product.id)
        if row is None:
            raise ValueError(f"Product with ID {product.id} not found")

        row.title = product.title
        row.image = product.image
        row.link = product.link
        row.lprice = product.lprice
        row.myprice = product.myprice
        self._session.add(row)
        self._session.flush()
        self._session.refresh(row)
        return Product.model_validate(row, from_attributes=True)

    def list_by_user(self, user_id: int) -> list[Product]:
        statement = (
            select(ProductTable)
            .where(ProductTable.user_id == user_id)
            .order_by(col(ProductTable.id))
        )
        rows = self._session.exec(statement).all()
        return [Product.model_validate(row, from_attributes=True) for row in rows]

    def list_all(self) -> list[Product]:
        statement = select(ProductTable).order_by(col(ProductTable.id))
        rows = self._session.exec(statement).all()
        return [Product.model_validate(row, from_attributes=True) for row in rows]
