"""Folder API router."""

from typing import Annotated

from fastapi import APIRouter, Depends, Path, Response
from sqlmodel import Session

from src.selectshop.api.http.deps import (
    get_current_user,
    get_db_session,
    get_folder_product_index,
    get_folder_registry,
)
from src.selectshop.api.http.schemas import (
    MAX_DB_INT,
    FolderRequest,
    FolderResponse,
    ProductResponse,
)
from src.selectshop.core.services import FolderProductIndex, FolderRegistry
from src.selectshop.core.services.database import commit
from src.selectshop.entities.core.user import User

router = APIRouter(prefix="/folders", tags=["folders"])


@router.post("", response_class=Response)
def add_folders(
    folder_request: FolderRequest,
    user: User = Depends(get_current_user),
    registry: FolderRegistry = Depends(get_folder_registry),
    session: Session = Depends(get_db_session),
) -> Response:
    """Create the named folders the caller does not have yet."""
    registry.add_folders(folder_request.folder_names, user)
    commit(session)
    return Response(status_code=200)


@router.get("", response_model=list[FolderResponse])
def get_folders(
    user: User = Depends(get_current_user),
    registry: FolderRegistry = Depends(get_folder_registry),
) -> list[FolderResponse]:
    """List the caller's folders."""
    return [FolderResponse.from_summary(summary) for summary in registry.get_folders(user)]


@router.get("/{folder_id}/products", response_model=list[ProductResponse])
def get_products_in_folder(
    folder_id: Annotated[int, Path(ge=1, le=MAX_DB_INT)],
    user: User = Depends(get_current_user),
    registry: FolderRegistry = Depends(get_folder_registry),
    index: FolderProductIndex = Depends(get_folder_product_index),
) -> list[ProductResponse]:
    """List the products the caller placed in one of their folders."""
    folder = registry.get_folder(folder_id, user)
    return [
        ProductResponse.from_product(product, index.folders_of(product))
        for product in index.products_in(folder)
    ]
