"""Menu data models.

These models represent menu items as stored by the menu repository and as
returned by the API. Field constraints mirror the request validation rules so
a stored item can never violate them.
"""

from enum import Enum

from pydantic import BaseModel, Field


class MenuCategory(str, Enum):
    """Enumeration of menu categories."""

    APPETIZER = "appetizer"
    ENTREE = "entree"
    DESSERT = "dessert"
    BEVERAGE = "beverage"


class MenuItemPayload(BaseModel):
    """Menu item fields accepted on create and update requests."""

    name: str = Field(..., description="Item name", min_length=3)
    description: str = Field(..., description="Item description", min_length=10)
    price: float = Field(..., description="Item price", gt=0)
    category: MenuCategory = Field(..., description="Menu category")
    ingredients: list[str] = Field(..., description="Ingredients list", min_length=1)
    available: bool = Field(default=True, description="Whether item is currently available")


class MenuItem(BaseModel):
    """Menu item model."""

    id: int = Field(..., description="Unique identifier for the menu item", gt=0)
    name: str = Field(..., description="Item name", min_length=3)
    description: str = Field(..., description="Item description", min_length=10)
    price: float = Field(..., description="Item price", gt=0)
    category: MenuCategory = Field(..., description="Menu category")
    ingredients: list[str] = Field(..., description="Ingredients list", min_length=1)
    available: bool = Field(default=True, description="Whether item is currently available")

    @classmethod
    def from_payload(cls, item_id: int, payload: MenuItemPayload) -> "MenuItem":
        """Create a MenuItem from a validated payload.

        Every field comes from the payload, so this doubles as the full
        replacement used by updates.

        Args:
            item_id: Identifier assigned by the repository
            payload: Validated request payload

        Returns:
            MenuItem: New item carrying the id and every payload field
        """
        return cls(id=item_id, **payload.model_dump())
