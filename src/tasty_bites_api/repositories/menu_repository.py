"""In-memory repository for menu items.

The repository owns the ordered list of menu items and the id counter for the
lifetime of the process. Following the pattern of the other repositories in
this codebase, expected misses return None rather than raising.
"""

import logging

from tasty_bites_api.models.menu_models import MenuCategory, MenuItem, MenuItemPayload
from tasty_bites_api.observability import traced

logger = logging.getLogger(__name__)


def default_menu_items() -> list[MenuItem]:
    """Build a fresh copy of the seed menu loaded at startup."""
    return [
        MenuItem(
            id=1,
            name="Margherita Pizza",
            description="Classic pizza with tomato, mozzarella, and basil.",
            price=12.5,
            category=MenuCategory.ENTREE,
            ingredients=["tomato", "mozzarella", "basil", "olive oil"],
            available=True,
        ),
        MenuItem(
            id=2,
            name="Tiramisu",
            description="Layers of espresso-soaked ladyfingers and mascarpone.",
            price=7.0,
            category=MenuCategory.DESSERT,
            ingredients=["ladyfingers", "espresso", "mascarpone", "cocoa"],
            available=True,
        ),
        MenuItem(
            id=3,
            name="Iced Tea",
            description="Freshly brewed black tea served over ice.",
            price=3.25,
            category=MenuCategory.BEVERAGE,
            ingredients=["black tea", "water", "ice"],
            available=True,
        ),
    ]


class MenuRepository:
    """Repository for menu item CRUD operations.

    Items are kept in insertion order, which is also the listing order. Ids
    are assigned from a counter that starts above the highest seeded id and
    only ever moves forward, so deleted ids are never reused.

    No method awaits, so on a single event loop every call is atomic with
    respect to other requests.
    """

    def __init__(self, items: list[MenuItem] | None = None) -> None:
        """Initialize repository.

        Args:
            items: Initial menu items (defaults to the seed menu)
        """
        self.items: list[MenuItem] = list(items) if items is not None else default_menu_items()
        self.next_id = max((item.id for item in self.items), default=0) + 1

    def _find_index(self, item_id: int | None) -> int | None:
        if item_id is None:
            return None
        for index, item in enumerate(self.items):
            if item.id == item_id:
                return index
        return None

    @traced("menu.list_items")
    def list_items(self) -> list[MenuItem]:
        """List all menu items.

        Returns:
            list: Menu items in insertion order
        """
        return list(self.items)

    @traced("menu.get_item")
    def get_item(self, item_id: int | None) -> MenuItem | None:
        """Retrieve a menu item by id.

        Args:
            item_id: Item identifier (None never matches)

        Returns:
            MenuItem if found, None otherwise
        """
        index = self._find_index(item_id)
        return self.items[index] if index is not None else None

    @traced("menu.create_item")
    def create_item(self, payload: MenuItemPayload) -> MenuItem:
        """Append a new menu item with the next id.

        Args:
            payload: Validated item fields

        Returns:
            MenuItem: The stored item
        """
        item = MenuItem.from_payload(self.next_id, payload)
        self.next_id += 1
        self.items.append(item)
        logger.info(f"Created menu item {item.id}")
        return item

    @traced("menu.replace_item")
    def replace_item(self, item_id: int | None, payload: MenuItemPayload) -> MenuItem | None:
        """Replace every field of an existing item, keeping its id and position.

        Args:
            item_id: Item identifier
            payload: Validated item fields

        Returns:
            MenuItem: The replacement if the id exists, None otherwise
        """
        index = self._find_index(item_id)
        if index is None:
            return None

        item = MenuItem.from_payload(self.items[index].id, payload)
        self.items[index] = item
        logger.info(f"Replaced menu item {item.id}")
        return item

    @traced("menu.delete_item")
    def delete_item(self, item_id: int | None) -> MenuItem | None:
        """Remove a menu item.

        Args:
            item_id: Item identifier

        Returns:
            MenuItem: The removed item if the id existed, None otherwise
        """
        index = self._find_index(item_id)
        if index is None:
            return None

        item = self.items.pop(index)
        logger.info(f"Deleted menu item {item.id}")
        return item
