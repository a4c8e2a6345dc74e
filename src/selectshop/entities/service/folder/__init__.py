"""Entity package: Folder."""

from .entity import Folder, FolderSummary
from .repository import FolderRepository
from .table import FolderTable

__all__ = ["Folder", "FolderSummary", "FolderRepository", "FolderTable"]
