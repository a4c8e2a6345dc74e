"""Entity: Folder."""

from typing import Any

from pydantic import BaseModel, Field

from src.selectshop.entities._base import Entity


class Folder(Entity):
    """A named collection of bookmarked products owned by exactly one user."""

    name: str = Field(min_length=1, description="Folder name, unique per owner")
    user_id: int = Field(description="Identifier of the owning user")

    def summary(self) -> "FolderSummary":
        return FolderSummary(id=self.id, name=self.name)

    def __eq__(self, other: Any) -> bool:
        """Compare folders by business attributes, ignoring timestamps."""
        if not isinstance(other, Folder):
            return False

        return (
            self.id == other.id
            and self.name == other.name
            and self.user_id == other.user_id
        )

    def __hash__(self) -> int:
        return hash((self.id, self.name, self.user_id))


class FolderSummary(BaseModel):
    """Identifier and name of a folder, as listed to its owner."""

    id: int
    name: str
