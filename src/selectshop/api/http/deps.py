"""FastAPI dependency implementations."""

from __future__ import annotations

from collections.abc import Iterator

from fastapi import Depends, HTTPException, Request
from sqlmodel import Session

from src.selectshop.api.http.app_data import ApplicationDependencies
from src.selectshop.core.exceptions import UnauthenticatedError
from src.selectshop.core.services import (
    FolderProductIndex,
    FolderRegistry,
    JwtService,
    ProductService,
    UserService,
)
from src.selectshop.entities.core.user import User


def get_app_dependencies(request: Request) -> ApplicationDependencies:
    return request.app.state.app_dependencies


def get_db_session(request: Request) -> Iterator[Session]:
    """One session per request; rolled back if the handler raises."""
    app_deps = get_app_dependencies(request)
    session = app_deps.database_service.get_session()
    try:
        yield session
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


def get_jwt_service(request: Request) -> JwtService:
    """Get the JWT service instance."""
    return get_app_dependencies(request).jwt_service


def get_user_service(
    db: Session = Depends(get_db_session),
    jwt_service: JwtService = Depends(get_jwt_service),
) -> UserService:
    return UserService(db, jwt_service)


def get_folder_registry(db: Session = Depends(get_db_session)) -> FolderRegistry:
    return FolderRegistry(db)


def get_folder_product_index(db: Session = Depends(get_db_session)) -> FolderProductIndex:
    return FolderProductIndex(db)


def get_product_service(db: Session = Depends(get_db_session)) -> ProductService:
    return ProductService(db)


def get_current_user(
    request: Request,
    users: UserService = Depends(get_user_service),
    jwt_service: JwtService = Depends(get_jwt_service),
) -> User:
    """Resolve the caller from an ``Authorization: Bearer`` header.

    The resolved user is passed explicitly to every service call; nothing
    below the router reads it from the request.
    """
    auth_header = request.headers.get("Authorization")
    if not auth_header or not auth_header.startswith("Bearer "):
        raise HTTPException(
            status_code=401,
            detail="Missing Bearer token",
            headers={"WWW-Authenticate": "Bearer"},
        )

    token = auth_header.split(" ", 1)[1].strip()
    claims = jwt_service.verify_jwt(token)

    try:
        user_id = claims.user_id
    except ValueError:
        raise UnauthenticatedError("Access token subject is not a user id") from None

    user = users.get_user(user_id)
    if user is None:
        raise UnauthenticatedError("User not found")

    request.state.user_id = user.id
    return user
