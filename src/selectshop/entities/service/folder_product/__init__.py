"""Entity package: FolderProduct association."""

from .entity import FolderProduct
from .repository import FolderProductRepository
from .table import FolderProductTable

__all__ = ["FolderProduct", "FolderProductRepository", "FolderProductTable"]
