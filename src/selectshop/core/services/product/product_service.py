"""Registration and maintenance of bookmarked products."""

from loguru import logger
from pydantic import BaseModel, Field
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session

from src.selectshop.core.exceptions import (
    InvalidArgumentError,
    NotFoundError,
    StorageFailureError,
)
from src.selectshop.core.validation import require_non_blank
from src.selectshop.entities.core.user import User
from src.selectshop.entities.service.product import Product, ProductRepository
from src.selectshop.runtime.context import get_config


class ProductRequest(BaseModel):
    """Listing details captured when a user bookmarks a product."""

    title: str
    image: str
    link: str
    lprice: int = Field(ge=0)


class ProductService:
    def __init__(self, session: Session) -> None:
        self._products = ProductRepository(session)

    def create_product(self, request: ProductRequest, owner: User) -> Product:
        require_non_blank(request.title, "title")
        require_non_blank(request.link, "link")
        product = Product(
            title=request.title,
            image=request.image,
            link=request.link,
            lprice=request.lprice,
            user_id=owner.id,
        )
        try:
            created = self._products.create(product)
        except SQLAlchemyError as e:
            raise StorageFailureError(f"Failed to store product: {e}") from e
        logger.info("Product {} registered by user {}", created.id, owner.id)
        return created

    def update_my_price(self, product_id: int, myprice: int, owner: User) -> Product:
        """Set the owner's target price on a product.

        Raises:
            InvalidArgumentError: ``myprice`` is below the configured minimum.
            NotFoundError: The product is missing or owned by another user.
        """
        min_my_price = get_config().product.min_my_price
        if myprice < min_my_price:
            raise InvalidArgumentError(
                f"Invalid target price; set at least {min_my_price}"
            )

        try:
            product = self._products.get(product_id)
            if product is None or product.user_id != owner.id:
                raise NotFoundError(f"Product {product_id} not found")
            product.myprice = myprice
            return self._products.update(product)
        except SQLAlchemyError as e:
            raise StorageFailureError(f"Failed to update product: {e}") from e

    def list_products(self, owner: User) -> list[Product]:
        """The owner's products; administrators see every product."""
        try:
            if owner.is_admin:
                return self._products.list_all()
            return self._products.list_by_user(owner.id)
        except SQLAlchemyError as e:
            raise StorageFailureError(f"Failed to load products: {e}") from e
