"""Entity: Product."""

from typing import Any

from pydantic import Field

from src.selectshop.entities._base import Entity


class Product(Entity):
    """A bookmarked listing from an external shopping site."""

    title: str = Field(description="Listing title")
    image: str = Field(description="Listing image URL")
    link: str = Field(description="Listing URL")
    lprice: int = Field(ge=0, description="Lowest price seen for the listing")
    myprice: int = Field(default=0, ge=0, description="Owner's target price")
    user_id: int = Field(description="Identifier of the owning user")

    def __eq__(self, other: Any) -> bool:
        """Compare products by business attributes, ignoring timestamps."""
        if not isinstance(other, Product):
            return False

        return (
            self.id == other.id
            and self.title == other.title
            and self.link == other.link
            and self.lprice == other.lprice
            and self.myprice == other.myprice
            and self.user_id == other.user_id
        )

    def __hash__(self) -> int:
        return hash((self.id, self.title, self.link, self.user_id))
