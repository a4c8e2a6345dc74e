"""Core services exports."""

from .database import DbManageService, DbSessionService
from .folder import FolderProductIndex, FolderRegistry
from .jwt import JwtService, TokenClaims
from .product import ProductRequest, ProductService
from .user import UserService

__all__ = [
    # Database
    "DbManageService",
    "DbSessionService",
    # Folders
    "FolderRegistry",
    "FolderProductIndex",
    # Products
    "ProductRequest",
    "ProductService",
    # Users
    "JwtService",
    "TokenClaims",
    "UserService",
]
