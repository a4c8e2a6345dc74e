"""Product API router."""

from typing import Annotated

from fastapi import APIRouter, Depends, Path, Response
from sqlmodel import Session

from src.selectshop.api.http.deps import (
    get_current_user,
    get_db_session,
    get_folder_product_index,
    get_product_service,
)
from src.selectshop.api.http.schemas import (
    MAX_DB_INT,
    ProductCreateRequest,
    ProductFolderRequest,
    ProductMyPriceRequest,
    ProductResponse,
)
from src.selectshop.core.services import FolderProductIndex, ProductRequest, ProductService
from src.selectshop.core.services.database import commit
from src.selectshop.entities.core.user import User

router = APIRouter(prefix="/products", tags=["products"])


@router.post("", response_model=ProductResponse)
def create_product(
    request: ProductCreateRequest,
    user: User = Depends(get_current_user),
    products: ProductService = Depends(get_product_service),
    session: Session = Depends(get_db_session),
) -> ProductResponse:
    """Bookmark a product for the caller."""
    product = products.create_product(
        ProductRequest(
            title=request.title,
            image=request.image,
            link=request.link,
            lprice=request.lprice,
        ),
        user,
    )
    commit(session)
    return ProductResponse.from_product(product)


@router.get("", response_model=list[ProductResponse])
def list_products(
    user: User = Depends(get_current_user),
    products: ProductService = Depends(get_product_service),
    index: FolderProductIndex = Depends(get_folder_product_index),
) -> list[ProductResponse]:
    """List the caller's products, or every product for an administrator."""
    return [
        ProductResponse.from_product(product, index.folders_of(product))
        for product in products.list_products(user)
    ]


@router.put("/{product_id}", response_model=ProductResponse)
def update_my_price(
    product_id: Annotated[int, Path(ge=1, le=MAX_DB_INT)],
    request: ProductMyPriceRequest,
    user: User = Depends(get_current_user),
    products: ProductService = Depends(get_product_service),
    index: FolderProductIndex = Depends(get_folder_product_index),
    session: Session = Depends(get_db_session),
) -> ProductResponse:
    """Set the caller's target price on a product."""
    product = products.update_my_price(product_id, request.myprice, user)
    commit(session)
    return ProductResponse.from_product(product, index.folders_of(product))


@router.post("/{product_id}/folder", response_class=Response)
def add_product_to_folder(
    product_id: Annotated[int, Path(ge=1, le=MAX_DB_INT)],
    request: ProductFolderRequest,
    user: User = Depends(get_current_user),
    index: FolderProductIndex = Depends(get_folder_product_index),
    session: Session = Depends(get_db_session),
) -> Response:
    """Place one of the caller's products into one of their folders."""
    index.add_product_to_folder(product_id, request.folder_id, user)
    commit(session)
    return Response(status_code=200)
