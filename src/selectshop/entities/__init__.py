"""Entities module with hybrid entity-centric structure.

Each entity has its own package containing:
- entity.py: Domain model
- table.py: Database persistence model
- repository.py: Data access layer

Importing this package registers every table with ``SQLModel.metadata``.
"""

from .core.user import User, UserRepository, UserRole, UserTable
from .service.folder import Folder, FolderRepository, FolderSummary, FolderTable
from .service.folder_product import (
    FolderProduct,
    FolderProductRepository,
    FolderProductTable,
)
from .service.product import Product, ProductRepository, ProductTable

__all__ = [
    "User",
    "UserRole",
    "UserTable",
    "UserRepository",
    "Folder",
    "FolderSummary",
    "FolderTable",
    "FolderRepository",
    "Product",
    "ProductTable",
    "ProductRepository",
    "FolderProduct",
    "FolderProductTable",
    "FolderProductRepository",
]
