from .folder_product_index import FolderProductIndex
from .folder_registry import FolderRegistry

__all__ = ["FolderProductIndex", "FolderRegistry"]
