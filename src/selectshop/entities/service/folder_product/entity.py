"""Entity: FolderProduct."""

from pydantic import Field

from src.selectshop.entities._base import Entity


class FolderProduct(Entity):
    """Link recording that a product has been placed in a folder."""

    folder_id: int = Field(description="Identifier of the folder")
    product_id: int = Field(description="Identifier of the product")
